from typing import Any

from kryptos.models.schemas import ErrorResponse


class KryptosError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        """Convert the error into a serialisable error model."""
        return ErrorResponse(
            error=type(self).__name__,
            message=self.message,
            details=self.details,
        )


class ValidationError(KryptosError):
    """Raised when input validation fails."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when a cipher key is outside its legal domain."""

    def __init__(self, message: str, key: Any = None):
        super().__init__(message, {"key": key})


class KeyTooLargeError(ValidationError):
    """Raised when a scytale has as many or more rotations than characters."""

    def __init__(self, height: int, length: int):
        super().__init__(
            f"The height ({height}) must be less than the text length ({length})",
            {"height": height, "length": length},
        )


class TextTooLongError(ValidationError):
    """Raised when text exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class CipherError(KryptosError):
    """Base exception for cipher lookup errors."""

    pass


class CipherNotFoundError(CipherError):
    """Raised when the requested cipher is not registered."""

    def __init__(self, cipher_name: str):
        super().__init__(
            f"Cipher '{cipher_name}' not found",
            {"cipher_name": cipher_name},
        )
