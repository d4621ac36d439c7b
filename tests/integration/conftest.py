import pytest

from loginflow.application.use_cases.user_create import user_create
from loginflow.application.use_cases.user_login import LoginInteractor
from loginflow.domain.entities.user import User
from loginflow.domain.schemas.user import UserCreate
from loginflow.infrastructure.adapters.memory.users import InMemoryUserRepository
from loginflow.infrastructure.adapters.presenters.login import LoginPresenter
from loginflow.infrastructure.adapters.presenters.login import LoginViewModel


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def user(request: pytest.FixtureRequest, user_repository: InMemoryUserRepository) -> User:
    params = getattr(request, "param", {})
    params.setdefault("username", "Paul")
    params.setdefault("password", "password")

    return user_create(UserCreate(**params), user_repository)


@pytest.fixture
def view_model() -> LoginViewModel:
    return LoginViewModel()


@pytest.fixture
def interactor(user_repository: InMemoryUserRepository, view_model: LoginViewModel) -> LoginInteractor:
    return LoginInteractor(
        user_repository=user_repository,
        session_repository=user_repository,
        output_port=LoginPresenter(view_model),
    )
