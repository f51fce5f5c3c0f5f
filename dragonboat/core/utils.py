"""
Dragonboat Utilities

Small numeric and serialization helpers shared across the package.
"""

from __future__ import annotations
import json
import math
from enum import Enum
from typing import Any, Dict


def determinize_dict(data: Dict[str, Any], precision: int = 6) -> Dict[str, Any]:
    """
    Make a dictionary deterministic for hashing and caching.

    Operations:
    - Sorts all keys recursively
    - Rounds floats to consistent precision
    - Converts enums to their values

    Args:
        data: Dictionary to determinize
        precision: Float rounding precision (default: 6)

    Returns:
        Deterministic dictionary with sorted keys and rounded floats
    """
    def _process(obj: Any) -> Any:
        if isinstance(obj, Enum):
            return obj.value
        elif isinstance(obj, float):
            return round(obj, precision)
        elif isinstance(obj, dict):
            return {str(k): _process(v) for k, v in sorted(obj.items(), key=lambda kv: str(kv[0]))}
        elif isinstance(obj, (list, tuple)):
            return [_process(item) for item in obj]
        elif isinstance(obj, (int, str, bool, type(None))):
            return obj
        else:
            return str(obj)

    processed = _process(data)
    return json.loads(json.dumps(processed, sort_keys=True))


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safe division that returns default if denominator is zero.

    Args:
        numerator: Numerator
        denominator: Denominator
        default: Default value for division by zero

    Returns:
        Result of division or default
    """
    if abs(denominator) < 1e-10:
        return default
    return numerator / denominator


def coerce_weight_kg(value: Any) -> float:
    """
    Coerce a roster weight into a usable number of kilograms.

    Missing, non-numeric, non-finite and negative values all become 0.0 so
    that one bad roster row cannot break a balance calculation.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        weight = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(weight) or weight < 0:
        return 0.0
    return weight
