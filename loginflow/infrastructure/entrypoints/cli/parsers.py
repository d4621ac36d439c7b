from typing import Annotated

from pydantic import TypeAdapter
from pydantic import ValidationError

import typer

from loginflow.domain.schemas.login import LoginCredentials

username_field_info = LoginCredentials.model_fields["username"]

UsernameAdapter: TypeAdapter[str] = TypeAdapter(Annotated[username_field_info.annotation, username_field_info])


def parse_username(value: str) -> str:
    try:
        UsernameAdapter.validate_python(value)
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"]) from e

    return value
