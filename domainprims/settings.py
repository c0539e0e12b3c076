"""Password and authorization settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from domainprims.errors import UseCaseError

__all__ = ["PasswordSettings", "AuthorizationSettings", "INVALID_TOKEN_EXPIRATIONS"]

_log = logging.getLogger(__name__)

INVALID_TOKEN_EXPIRATIONS = (
    "リフレッシュトークンの有効期限は、アクセストークンの有効期限よりも長くなければなりません。"
)


@dataclass
class PasswordSettings:
    """Settings for hashing passwords."""

    pepper: str = field(repr=False)
    hash_memory: int
    hash_iterations: int
    hash_parallelism: int


@dataclass
class AuthorizationSettings:
    """Settings for sign-in attempts and token lifetimes."""

    attempting_seconds: int
    number_of_failures: int
    jwt_token_secret: str = field(repr=False)
    access_token_seconds: int
    refresh_token_seconds: int

    def validate(self) -> None:
        """Raise UseCaseError unless refresh tokens outlive access tokens."""
        if self.refresh_token_seconds <= self.access_token_seconds:
            _log.error(INVALID_TOKEN_EXPIRATIONS)
            raise UseCaseError.unexpected(INVALID_TOKEN_EXPIRATIONS)