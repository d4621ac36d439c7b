import threading

from loginflow.domain.entities.user import User
from loginflow.domain.ports.repositories.sessions import ActiveSessionRepository
from loginflow.domain.ports.repositories.users import UserRepository


class InMemoryUserRepository(UserRepository, ActiveSessionRepository):
    """Keeps users and the logged in username in process memory.

    Both roles share a single lock so that lookups, saves and session updates
    are serialized when the repository is used from several threads.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {user.username: user for user in users or []}
        self._current_username: str | None = None

    def get_by_username(self, username: str) -> User | None:
        with self._lock:
            return self._users.get(username)

    def exists_by_username(self, username: str) -> bool:
        with self._lock:
            return username in self._users

    def save(self, user: User) -> None:
        with self._lock:
            self._users[user.username] = user

    def get_current_username(self) -> str | None:
        with self._lock:
            return self._current_username

    def set_current_username(self, username: str) -> None:
        with self._lock:
            self._current_username = username
