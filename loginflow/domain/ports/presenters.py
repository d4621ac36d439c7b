from abc import ABC
from abc import abstractmethod


class LoginOutputPort(ABC):
    """Interface receiving the outcome of a login attempt.

    Exactly one of the two methods is called per attempt, so that a presenter
    can prepare the matching view without inspecting the outcome itself.
    """

    @abstractmethod
    def on_success(self, username: str) -> None:
        """Called once the user has been authenticated.

        Args:
            username: The username of the authenticated user.
        """
        pass

    @abstractmethod
    def on_failure(self, reason: str) -> None:
        """Called when the login attempt is refused.

        Args:
            reason: A human readable explanation of the refusal.
        """
        pass
