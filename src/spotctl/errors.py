"""Error taxonomy shared by every layer of the client.

Callers branch on the exception class (or ``exc.kind``), never on message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar


class ErrorKind(str, Enum):
    VALIDATION = "Validation"
    TRANSPORT = "Transport"
    API = "API"
    INTERNAL = "Internal"


class SpotctlError(Exception):
    """Base error type for spotctl."""

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        operation: str | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.operation = operation
        self.endpoint = endpoint

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        context = ""
        if self.operation and self.endpoint:
            context = f" [{self.operation} {self.endpoint}]"
        if self.__cause__ is not None:
            return f"{self.kind.value} error: {self.message}{context} ({self.__cause__})"
        return f"{self.kind.value} error: {self.message}{context}"


class ValidationError(SpotctlError):
    """A precondition failed before any network activity."""

    kind = ErrorKind.VALIDATION


class ConfigError(ValidationError):
    """Raised when configuration cannot be loaded or validated."""


class PatchFileError(ValidationError):
    """Raised when a JSON patch file cannot be read or has the wrong shape."""


class TransportError(SpotctlError):
    """The request could not be completed; no HTTP response was received."""

    kind = ErrorKind.TRANSPORT


class InternalError(SpotctlError):
    """Marshalling, decoding, or request construction failed."""

    kind = ErrorKind.INTERNAL


class APIError(SpotctlError):
    """Structured non-2xx response from the Spot API.

    ``code``, ``message`` and ``details`` mirror the server's error envelope;
    ``status_code`` is the HTTP status that carried it.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        code: int,
        message: str,
        details: Any = None,
        *,
        status_code: int | None = None,
        operation: str | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message, code=code, operation=operation, endpoint=endpoint)
        self.code: int = code
        self.details = details
        self.status_code = status_code if status_code is not None else code

    def __str__(self) -> str:
        if self.details:
            return f"API error {self.code}: {self.message} ({self.details})"
        return f"API error {self.code}: {self.message}"
