from unittest import mock

import pytest

from loginflow.domain.entities.user import User
from loginflow.domain.ports.presenters import LoginOutputPort
from loginflow.domain.ports.repositories.sessions import ActiveSessionRepository
from loginflow.domain.ports.repositories.users import UserRepository
from loginflow.domain.schemas.login import LoginCredentials

from tests.unit.factories.entities.user import UserFactory
from tests.unit.factories.schemas.login import LoginCredentialsFactory

# --- Repository Mocks ---


@pytest.fixture
def mock_user_repository() -> mock.Mock:
    return mock.Mock(spec=UserRepository)


@pytest.fixture
def mock_session_repository() -> mock.Mock:
    return mock.Mock(spec=ActiveSessionRepository)


# --- Presenter Mocks ---


@pytest.fixture
def mock_output_port() -> mock.Mock:
    return mock.Mock(spec=LoginOutputPort)


# --- Entity Mocks ---


@pytest.fixture
def user(request: pytest.FixtureRequest) -> User:
    return UserFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def credentials(request: pytest.FixtureRequest, user: User) -> LoginCredentials:
    params = getattr(request, "param", {})
    params.setdefault("username", user.username)

    return LoginCredentialsFactory.build(**params)
