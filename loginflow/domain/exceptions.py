class UserAlreadyExistsException(Exception):
    pass


class UsersFileError(Exception):
    """Raised when a users seed file cannot be parsed."""

    def __init__(self, path: str, line: int, message: str) -> None:
        self.path = path
        self.line = line
        super().__init__(f"{path}:{line}: {message}")
