"""Registry exceptions for TalentMatch."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced to callers."""

    MALFORMED_INPUT = "MalformedInput"
    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    UNAUTHORIZED = "Unauthorized"
    CLOCK_UNAVAILABLE = "ClockUnavailable"


class RegistryError(Exception):
    """Base exception for registry and matching errors."""

    kind: ErrorKind


class MalformedInputError(RegistryError):
    """Raised when a required field is empty, a list is empty, or a limit is exceeded."""

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Malformed input: " + "; ".join(errors))


class ExpirationInPastError(MalformedInputError):
    """Raised when an opportunity's expiration is earlier than the current time."""

    def __init__(self, expires_at, now):
        self.expires_at = expires_at
        self.now = now
        super().__init__([f"expires_at {expires_at.isoformat()} is before {now.isoformat()}"])


class AlreadyExistsError(RegistryError):
    """Raised when creating a record under a key that already holds one."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, record_type: str, identity: str):
        self.record_type = record_type
        self.identity = identity
        super().__init__(f"{record_type} already exists for {identity}")


class NotFoundError(RegistryError):
    """Raised when updating or deleting a record under a key that holds none."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, record_type: str, identity: str):
        self.record_type = record_type
        self.identity = identity
        super().__init__(f"No {record_type} for {identity}")


class UnauthorizedError(RegistryError):
    """Raised when the caller does not own the record it is acting on."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, identity: str, action: str):
        self.identity = identity
        self.action = action
        super().__init__(f"{identity} is not allowed to {action}")


class ClockUnavailableError(RegistryError):
    """Raised when the time source cannot produce a timestamp."""

    kind = ErrorKind.CLOCK_UNAVAILABLE

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        message = "Clock unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
