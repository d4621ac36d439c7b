from abc import ABC
from abc import abstractmethod


class ActiveSessionRepository(ABC):
    """Tracks which user, if any, is currently logged in.

    Implementations shared between concurrent callers are responsible for
    serializing access to the active username.
    """

    @abstractmethod
    def get_current_username(self) -> str | None:
        """Returns the username of the logged in user, or None if nobody is."""
        ...

    @abstractmethod
    def set_current_username(self, username: str) -> None:
        """Marks the given username as the logged in user.

        Args:
            username: The username that has just been authenticated.
        """
        ...
