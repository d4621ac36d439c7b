from abc import ABC
from abc import abstractmethod

from loginflow.domain.entities.user import User


class UserRepository(ABC):
    """A repository for looking up and registering `User` entities."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Retrieves a user by their unique username.

        Args:
            username: The username of the user to retrieve.

        Returns:
            The `User` entity if found, otherwise None.
        """
        ...

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """Checks whether a user with the given username is registered.

        Args:
            username: The username to look for.

        Returns:
            True if a user exists with this username, False otherwise.
        """
        ...

    @abstractmethod
    def save(self, user: User) -> None:
        """Stores a user, replacing any record with the same username.

        Args:
            user: The `User` entity to store.
        """
        ...
