"""Error types shared by domain primitives and use cases."""

from __future__ import annotations

import enum

__all__ = [
    "DomainErrorKind",
    "DomainError",
    "UseCaseErrorCode",
    "UseCaseErrorKind",
    "UseCaseError",
    "ERR_SAME_EMAIL_ADDRESS_IS_REGISTERED",
    "ERR_SPECIFY_FIXED_OR_MOBILE_NUMBER",
]


class DomainErrorKind(enum.Enum):
    """Category of a domain error."""

    UNEXPECTED = "unexpected"
    VALIDATION = "validation"
    DOMAIN_RULE = "domain_rule"
    REPOSITORY = "repository"


class DomainError(Exception):
    """Error raised by domain objects."""

    def __init__(self, kind: DomainErrorKind, message: object) -> None:
        self.kind = kind
        self.message = str(message)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def validation(cls, message: object) -> DomainError:
        return cls(DomainErrorKind.VALIDATION, message)

    @classmethod
    def unexpected(cls, message: object) -> DomainError:
        return cls(DomainErrorKind.UNEXPECTED, message)

    @classmethod
    def domain_rule(cls, message: object) -> DomainError:
        return cls(DomainErrorKind.DOMAIN_RULE, message)

    @classmethod
    def repository(cls, message: object) -> DomainError:
        return cls(DomainErrorKind.REPOSITORY, message)


class UseCaseErrorCode(enum.IntEnum):
    """Numeric codes of the general use case error categories."""

    UNEXPECTED = 0
    VALIDATION = 1
    DOMAIN_RULE = 2
    REPOSITORY = 3
    NOT_FOUND = 4
    UNAUTHORIZED = 5


class UseCaseErrorKind(enum.Enum):
    """Category of a use case error."""

    UNEXPECTED = "Unexpected"
    VALIDATION = "Validation"
    DOMAIN_RULE = "DomainRule"
    REPOSITORY = "Repository"
    NOT_FOUND = "NotFound"
    UNAUTHORIZED = "Unauthorized"

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()


class UseCaseError(Exception):
    """Error raised by use cases; its text is its message."""

    def __init__(self, kind: UseCaseErrorKind, error_code: int, message: object) -> None:
        self.kind = kind
        self.error_code = int(error_code)
        self.message = str(message)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def _of(cls, kind: UseCaseErrorKind, code: UseCaseErrorCode, message: object) -> UseCaseError:
        return cls(kind, int(code), message)

    @classmethod
    def unexpected(cls, message: object) -> UseCaseError:
        return cls._of(UseCaseErrorKind.UNEXPECTED, UseCaseErrorCode.UNEXPECTED, message)

    @classmethod
    def validation(cls, message: object) -> UseCaseError:
        return cls._of(UseCaseErrorKind.VALIDATION, UseCaseErrorCode.VALIDATION, message)

    @classmethod
    def domain_rule(cls, message: object) -> UseCaseError:
        return cls._of(UseCaseErrorKind.DOMAIN_RULE, UseCaseErrorCode.DOMAIN_RULE, message)

    @classmethod
    def repository(cls, message: object) -> UseCaseError:
        return cls._of(UseCaseErrorKind.REPOSITORY, UseCaseErrorCode.REPOSITORY, message)

    @classmethod
    def not_found(cls, message: object) -> UseCaseError:
        return cls._of(UseCaseErrorKind.NOT_FOUND, UseCaseErrorCode.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: object) -> UseCaseError:
        return cls._of(UseCaseErrorKind.UNAUTHORIZED, UseCaseErrorCode.UNAUTHORIZED, message)

    @classmethod
    def from_domain_error(cls, error: DomainError) -> UseCaseError:
        """Convert a domain error into the use case error of the same category."""
        factories = {
            DomainErrorKind.UNEXPECTED: cls.unexpected,
            DomainErrorKind.VALIDATION: cls.validation,
            DomainErrorKind.DOMAIN_RULE: cls.domain_rule,
            DomainErrorKind.REPOSITORY: cls.repository,
        }
        return factories[error.kind](error.message)


# Sign-up
ERR_SAME_EMAIL_ADDRESS_IS_REGISTERED = 1000
ERR_SPECIFY_FIXED_OR_MOBILE_NUMBER = 1001