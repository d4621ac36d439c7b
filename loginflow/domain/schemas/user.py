from typing import Annotated

from pydantic import Field

from loginflow.domain.schemas.base import BaseEntity


class UserCreate(BaseEntity):
    """Schema for registering a new user.

    Requires a non-empty username and a password.
    """

    username: Annotated[str, Field(min_length=1, max_length=150)]
    password: str
