from dataclasses import dataclass
from typing import Self
from typing import TypeAlias

from loginflow.domain.types import LoginFailureKind


@dataclass(frozen=True, kw_only=True)
class LoginSuccess:
    username: str


@dataclass(frozen=True, kw_only=True)
class LoginFailure:
    kind: LoginFailureKind
    reason: str

    @classmethod
    def account_not_found(cls, username: str) -> Self:
        return cls(kind=LoginFailureKind.ACCOUNT_NOT_FOUND, reason=f"{username}: Account does not exist.")

    @classmethod
    def password_mismatch(cls, username: str) -> Self:
        return cls(kind=LoginFailureKind.PASSWORD_MISMATCH, reason=f'Incorrect password for "{username}".')


LoginOutcome: TypeAlias = LoginSuccess | LoginFailure
