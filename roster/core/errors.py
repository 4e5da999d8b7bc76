"""Domain errors for the roster service."""

from enum import Enum

NOT_FOUND_MESSAGE = "not found"
BAD_REQUEST_MESSAGE = "bad request"


class ErrorKind(Enum):
    """Classification of a failure, used by transports to pick a status."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"

    @classmethod
    def from_message(cls, message: str) -> "ErrorKind":
        """Classify an error by its literal text.

        Any error whose message is exactly "not found" or "bad request" is
        classified as such, whatever raised it.
        """
        if message == NOT_FOUND_MESSAGE:
            return cls.NOT_FOUND
        if message == BAD_REQUEST_MESSAGE:
            return cls.BAD_REQUEST
        return cls.INTERNAL

    @classmethod
    def of(cls, exc: BaseException) -> "ErrorKind":
        """Return the kind carried by a roster error, else classify by text."""
        if isinstance(exc, RosterError):
            return exc.kind
        return cls.from_message(str(exc))


class RosterError(Exception):
    """Base class for roster domain errors."""

    kind = ErrorKind.INTERNAL


class NotFoundError(RosterError):
    """No stored player matches the request."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)


class BadRequestError(RosterError):
    """Transport input could not be decoded into a valid request."""

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str = BAD_REQUEST_MESSAGE):
        super().__init__(message)
