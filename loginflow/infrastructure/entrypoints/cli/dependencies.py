from loginflow.application.use_cases.user_login import LoginInteractor
from loginflow.domain.ports.presenters import LoginOutputPort
from loginflow.domain.ports.repositories.sessions import ActiveSessionRepository
from loginflow.domain.ports.repositories.users import UserRepository
from loginflow.infrastructure.adapters.memory.users import InMemoryUserRepository
from loginflow.infrastructure.adapters.presenters.login import LoginPresenter
from loginflow.infrastructure.adapters.presenters.login import LoginViewModel


def get_user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def get_login_presenter(view_model: LoginViewModel) -> LoginOutputPort:
    return LoginPresenter(view_model)


def get_login_interactor(
    user_repository: UserRepository,
    session_repository: ActiveSessionRepository,
    output_port: LoginOutputPort,
) -> LoginInteractor:
    return LoginInteractor(
        user_repository=user_repository,
        session_repository=session_repository,
        output_port=output_port,
    )
