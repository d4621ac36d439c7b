from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class User:
    """A registered account, identified by its unique username.

    The password is kept as plain text and compared as is on login. There is
    no hashing on purpose: this record only feeds the login decision and must
    not be used to store real credentials.
    """

    username: str
    password: str
