import logging

from pydantic import BaseModel
from pydantic import Field

from loginflow.domain.ports.presenters import LoginOutputPort

logger = logging.getLogger(__name__)


class LoginState(BaseModel):
    username: str | None = None
    login_error: str | None = None

    @property
    def is_logged_in(self) -> bool:
        return self.username is not None


class LoginViewModel(BaseModel):
    """Holds what a login view displays after an attempt."""

    state: LoginState = Field(default_factory=LoginState)


class LoginPresenter(LoginOutputPort):
    """Updates a `LoginViewModel` from the outcome of a login attempt."""

    def __init__(self, view_model: LoginViewModel) -> None:
        self.view_model = view_model

    def on_success(self, username: str) -> None:
        self.view_model.state = LoginState(username=username)
        logger.debug(f"Login view switched to logged in user {username!r}")

    def on_failure(self, reason: str) -> None:
        self.view_model.state = LoginState(login_error=reason)
        logger.debug(f"Login view shows error: {reason}")
