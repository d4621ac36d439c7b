from typing import Annotated

from pydantic import ConfigDict
from pydantic import Field

from loginflow.domain.schemas.base import BaseEntity


class LoginCredentials(BaseEntity):
    """The credentials submitted for a login attempt.

    This schema is an immutable Value Object: the username must not be empty,
    and neither field is stripped or normalized before comparison.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    username: Annotated[str, Field(min_length=1)]
    password: str
