import logging

from loginflow.domain.entities.login import LoginFailure
from loginflow.domain.entities.login import LoginOutcome
from loginflow.domain.entities.login import LoginSuccess
from loginflow.domain.ports.presenters import LoginOutputPort
from loginflow.domain.ports.repositories.sessions import ActiveSessionRepository
from loginflow.domain.ports.repositories.users import UserRepository
from loginflow.domain.schemas.login import LoginCredentials

logger = logging.getLogger(__name__)


def user_login(
    credentials: LoginCredentials,
    user_repository: UserRepository,
    session_repository: ActiveSessionRepository,
) -> LoginOutcome:
    """Decides whether the given credentials log a user in.

    The user is looked up first, then the stored password is compared to the
    supplied one with exact equality. Only a successful login marks the user
    as the active one in the session repository.

    Args:
        credentials: The submitted username and password.
        user_repository: The repository for user data.
        session_repository: The repository holding the logged in username.

    Returns:
        A `LoginSuccess` carrying the username, or a `LoginFailure` carrying
        the reason of the refusal. Failures are never raised.
    """
    username = credentials.username

    user = user_repository.get_by_username(username)
    if not user:
        logger.info(f"Login refused for {username!r}: unknown account")
        return LoginFailure.account_not_found(username)

    if user.password != credentials.password:
        logger.info(f"Login refused for {username!r}: password mismatch")
        return LoginFailure.password_mismatch(username)

    session_repository.set_current_username(user.username)
    logger.info(f"User {username!r} logged in")

    return LoginSuccess(username=user.username)


class LoginInteractor:
    """Runs the login use case and hands its outcome to a presenter.

    The outcome is returned as well, so callers without a view to update can
    simply match on it.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: ActiveSessionRepository,
        output_port: LoginOutputPort,
    ) -> None:
        self.user_repository = user_repository
        self.session_repository = session_repository
        self.output_port = output_port

    def execute(self, credentials: LoginCredentials) -> LoginOutcome:
        outcome = user_login(
            credentials=credentials,
            user_repository=self.user_repository,
            session_repository=self.session_repository,
        )

        match outcome:
            case LoginSuccess(username=username):
                self.output_port.on_success(username)
            case LoginFailure(reason=reason):
                self.output_port.on_failure(reason)

        return outcome
