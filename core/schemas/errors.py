"""
Core Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy shared by the codec, key, signature and
instruction modules. Defines both Pydantic models for structured error
communication and Python exceptions for control flow.

Every failure caused by caller-supplied data is an InvalidInput or a
ConstructionError. InternalError is reserved for failures the caller
cannot fix (e.g. the random source failing).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    CONSTRUCTION_ERROR = "CONSTRUCTION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class ForgeError(BaseModel):
    """
    Error model for structured error communication.

    Used when an error has to cross a boundary as data (HTTP envelope,
    CLI JSON output) instead of as a raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "ForgeException":
        """Convert this error model back to the matching exception."""
        exc_type = _EXCEPTIONS_BY_CODE.get(self.code)
        if exc_type is None:
            return ForgeException(
                message=self.message,
                code=self.code,
                details=dict(self.details),
            )
        return exc_type(self.message, details=dict(self.details))


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ForgeException(Exception):
    """
    Base exception for all instruction forge errors.

    Carries structured error information and can be converted to a
    ForgeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "FORGE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> ForgeError:
        """Convert this exception to a ForgeError model."""
        return ForgeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInput(ForgeException):
    """
    Raised for malformed caller input.

    Covers bad address text, wrong-length keys, empty required fields,
    out-of-range numbers and secret/key mismatches.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field:
            full_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=full_details,
        )


class ConstructionError(ForgeException):
    """Raised when an instruction cannot be encoded from validated parameters."""

    def __init__(
        self,
        message: str,
        instruction: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if instruction:
            full_details["instruction"] = instruction
        super().__init__(
            message=message,
            code=ErrorCodes.CONSTRUCTION_ERROR,
            details=full_details,
        )


class InternalError(ForgeException):
    """Raised for unexpected failures; reported to callers without detail."""

    def __init__(
        self,
        message: str = "Internal error",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INTERNAL_ERROR,
            details=details,
        )


_EXCEPTIONS_BY_CODE: dict[str, type[ForgeException]] = {
    ErrorCodes.INVALID_INPUT: InvalidInput,
    ErrorCodes.CONSTRUCTION_ERROR: ConstructionError,
    ErrorCodes.INTERNAL_ERROR: InternalError,
}


__all__ = [
    "ErrorCodes",
    "ForgeError",
    "ForgeException",
    "InvalidInput",
    "ConstructionError",
    "InternalError",
]
