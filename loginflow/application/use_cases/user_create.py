from loginflow.domain.entities.user import User
from loginflow.domain.exceptions import UserAlreadyExistsException
from loginflow.domain.ports.repositories.users import UserRepository
from loginflow.domain.schemas.user import UserCreate


def user_create(user_data: UserCreate, user_repository: UserRepository) -> User:
    """Registers a new user.

    Args:
        user_data: The data for the new user.
        user_repository: The repository to store the user data.

    Returns:
        The newly created user.

    Raises:
        UserAlreadyExistsException: If a user with the same username already exists.
    """
    if user_repository.exists_by_username(user_data.username):
        raise UserAlreadyExistsException("Username already registered")

    user = User(username=user_data.username, password=user_data.password)
    user_repository.save(user)

    return user
