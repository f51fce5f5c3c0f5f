"""
Dragonboat Core Module

Shared types, enumerations, constants and helpers.
"""

from .enums import Side, SeatRole, SlotTier, BalanceStatus, WeightUnit
from .dataclasses import Seat, BoatLayout, Athlete, Assignment, Lineup, index_athletes
from .utils import determinize_dict, safe_divide, coerce_weight_kg
from .unit_converter import UnitConverter, format_weight, normalize_unit

__all__ = [
    "Side",
    "SeatRole",
    "SlotTier",
    "BalanceStatus",
    "WeightUnit",
    "Seat",
    "BoatLayout",
    "Athlete",
    "Assignment",
    "Lineup",
    "index_athletes",
    "determinize_dict",
    "safe_divide",
    "coerce_weight_kg",
    "UnitConverter",
    "format_weight",
    "normalize_unit",
]
