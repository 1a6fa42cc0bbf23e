"""Error types raised by mdrefactor."""
from enum import Enum
from typing import Optional, Any


class ErrorKind(Enum):
    """Broad category of a failure."""

    CONFIGURATION = "configuration"
    IO = "io"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"


class RefactorError(Exception):
    """Raised when any stage of a refactoring run fails.

    All kinds are terminal for a run: the CLI reports the message and exits
    with a non-zero status.

    Args:
        kind: The failure category.
        message: Human readable description.
        error_type: The ``type`` field of an API error object, if any.
        code: The ``code`` field of an API error object, if any.
        raw_body: The raw response body when it could not be used.
        status_code: The HTTP status of the response, if one was received.
    """

    def __init__(self, kind: ErrorKind, message: str,
                 error_type: Optional[str] = None, code: Optional[Any] = None,
                 raw_body: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.error_type = error_type
        self.code = code
        self.raw_body = raw_body
        self.status_code = status_code

    def __str__(self):
        return self.message

    @classmethod
    def configuration(cls, message: str) -> 'RefactorError':
        return cls(ErrorKind.CONFIGURATION, message)

    @classmethod
    def io(cls, message: str) -> 'RefactorError':
        return cls(ErrorKind.IO, message)

    @classmethod
    def transport(cls, message: str) -> 'RefactorError':
        return cls(ErrorKind.TRANSPORT, message)

    @classmethod
    def protocol(cls, message: str, **payload) -> 'RefactorError':
        return cls(ErrorKind.PROTOCOL, message, **payload)
