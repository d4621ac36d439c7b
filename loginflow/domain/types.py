from enum import StrEnum


class LoginFailureKind(StrEnum):
    """Enumeration of the reasons a login attempt can be refused."""

    ACCOUNT_NOT_FOUND = "account_not_found"
    PASSWORD_MISMATCH = "password_mismatch"
