from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    ROT13 = "rot13"
    SUBSTITUTION = "substitution"
    VIGENERE = "vigenere"
    RAIL_FENCE = "rail_fence"
    SCYTALE = "scytale"


class Direction(str, Enum):
    """Which way a text is run through a cipher."""

    ENCIPHER = "encipher"
    DECIPHER = "decipher"


# Keys arrive as plain integers, strings, or a dict naming the parameter.
# Strict members keep a bool key a bool, for the cipher to reject.
CipherKey = StrictBool | StrictInt | StrictStr | dict[str, Any] | None


# ============================================================================
# Cipher Metadata
# ============================================================================


class CipherInfo(BaseModel):
    """Descriptive metadata for a registered cipher."""

    model_config = ConfigDict(frozen=True)

    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    key_name: str | None = None


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """Request to run text through a cipher."""

    text: str
    cipher_type: CipherType
    key: CipherKey = None
    direction: Direction = Direction.ENCIPHER


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Result of running text through a cipher."""

    text: str
    cipher_type: CipherType
    direction: Direction
    key_used: CipherKey = None


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
