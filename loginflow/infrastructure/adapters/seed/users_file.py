import codecs
import csv
import io
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from loginflow.application.use_cases.user_create import user_create
from loginflow.domain.entities.user import User
from loginflow.domain.exceptions import UserAlreadyExistsException
from loginflow.domain.exceptions import UsersFileError
from loginflow.domain.ports.repositories.users import UserRepository
from loginflow.domain.schemas.user import UserCreate

logger = logging.getLogger(__name__)

USERS_FILE_HEADER: Final[tuple[str, ...]] = ("username", "password")


def _iter_rows(path: Path) -> Iterator[tuple[int, dict[str | None, str | list[str] | None]]]:
    # Spreadsheet tools put a BOM in front of the header.
    data = path.read_bytes().removeprefix(codecs.BOM_UTF8)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise UsersFileError(str(path), data.count(b"\n", 0, e.start) + 1, "content is not valid UTF-8") from e

    reader = csv.DictReader(io.StringIO(text, newline=""))
    try:
        if tuple(reader.fieldnames or ()) != USERS_FILE_HEADER:
            raise UsersFileError(str(path), 1, f"expected header {','.join(USERS_FILE_HEADER)}")

        for row in reader:
            yield reader.line_num, row
    except csv.Error as e:
        raise UsersFileError(str(path), reader.line_num, str(e)) from e


def load_users_file(path: Path, user_repository: UserRepository) -> list[User]:
    """Registers every user listed in a CSV file.

    The file must be UTF-8 and start with a `username,password` header row.
    Each following row is registered through the `user_create` use case, so
    duplicates are refused.

    Args:
        path: The CSV file to read.
        user_repository: The repository to register the users into.

    Returns:
        The registered users, in file order.

    Raises:
        UsersFileError: If the file cannot be decoded or parsed, the header is
            wrong, a row is invalid or a username appears twice.
    """
    users: list[User] = []

    for line, row in _iter_rows(path):
        if None in row or any(value is None for value in row.values()):
            raise UsersFileError(str(path), line, "expected exactly two columns")

        try:
            user_data = UserCreate(username=row["username"], password=row["password"])
            users.append(user_create(user_data, user_repository))
        except ValidationError as e:
            raise UsersFileError(str(path), line, e.errors()[0]["msg"]) from e
        except UserAlreadyExistsException as e:
            raise UsersFileError(str(path), line, f"duplicate username {row['username']!r}") from e

    logger.debug(f"Loaded {len(users)} users from {path}")
    return users
