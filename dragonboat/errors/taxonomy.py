"""
errors/taxonomy.py - Error classification system

The lineup core never raises for malformed ids in its default mode; the
exceptions here exist for strict-mode diagnostics, payload validation and
programming errors.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error categories."""
    # Lookup errors (1xxx)
    LOOKUP = "lookup"

    # Payload errors (2xxx)
    PAYLOAD = "payload"

    # Configuration errors (3xxx)
    CONFIGURATION = "configuration"


class ErrorCode(Enum):
    """Specific error codes."""

    # Lookup (1xxx)
    ATHLETE_NOT_FOUND = 1001
    SEAT_NOT_FOUND = 1002
    SLOT_NOT_FOUND = 1003

    # Payload (2xxx)
    LINEUP_INVALID = 2001
    ROSTER_INVALID = 2002

    # Configuration (3xxx)
    UNIT_UNSUPPORTED = 3001


ERROR_CATEGORIES: Dict[ErrorCode, ErrorCategory] = {
    ErrorCode.ATHLETE_NOT_FOUND: ErrorCategory.LOOKUP,
    ErrorCode.SEAT_NOT_FOUND: ErrorCategory.LOOKUP,
    ErrorCode.SLOT_NOT_FOUND: ErrorCategory.LOOKUP,
    ErrorCode.LINEUP_INVALID: ErrorCategory.PAYLOAD,
    ErrorCode.ROSTER_INVALID: ErrorCategory.PAYLOAD,
    ErrorCode.UNIT_UNSUPPORTED: ErrorCategory.CONFIGURATION,
}


class DragonboatError(Exception):
    """Base class for all lineup core errors."""

    code: ErrorCode = ErrorCode.LINEUP_INVALID

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    @property
    def category(self) -> ErrorCategory:
        return ERROR_CATEGORIES[self.code]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "category": self.category.value,
            "message": self.message,
        }


class NotFoundError(DragonboatError, LookupError):
    """
    Raised in strict mode when an athlete, seat or slot cannot be resolved.

    In the default mode the same situations are silent no-ops.
    """

    def __init__(self, kind: str, identifier: Any, code: ErrorCode = ErrorCode.ATHLETE_NOT_FOUND):
        super().__init__(f"{kind} not found: {identifier!r}", code)
        self.kind = kind
        self.identifier = identifier

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["kind"] = self.kind
        data["identifier"] = self.identifier
        return data


class InvalidLineupError(DragonboatError, ValueError):
    """Raised when a persisted lineup or roster payload fails validation."""

    code = ErrorCode.LINEUP_INVALID


class UnitConversionError(DragonboatError, ValueError):
    """Raised when a unit conversion is not supported."""

    code = ErrorCode.UNIT_UNSUPPORTED
