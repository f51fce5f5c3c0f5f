"""
errors/ - Error taxonomy for the lineup core.
"""

from .taxonomy import (
    ErrorCategory,
    ErrorCode,
    DragonboatError,
    NotFoundError,
    InvalidLineupError,
    UnitConversionError,
)

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "DragonboatError",
    "NotFoundError",
    "InvalidLineupError",
    "UnitConversionError",
]
