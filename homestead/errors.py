"""Domain errors raised throughout homestead."""

from __future__ import annotations


class HomesteadError(Exception):
    """Base class for every domain error."""

    default_message = "homestead error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotFoundError(HomesteadError, LookupError):
    """A requested resource does not exist."""

    default_message = "resource not found"


class AlreadyExistsError(HomesteadError):
    """A resource with the same identity already exists."""

    default_message = "resource already exists"


class InvalidInputError(HomesteadError, ValueError):
    """The input given to an operation is invalid."""

    default_message = "invalid input"


class PermissionDeniedError(HomesteadError):
    """The operation was not permitted."""

    default_message = "permission denied"


class ExecutionFailedError(HomesteadError):
    """Running a command or script failed."""

    default_message = "execution failed"


class DependencyNotMetError(HomesteadError):
    """Something the operation depends on is missing."""

    default_message = "dependency not met"