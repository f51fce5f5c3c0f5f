"""
Dragonboat Core Enumerations

All enumeration types used throughout the lineup core.
"""

from enum import Enum


class Side(str, Enum):
    """
    Which side of the boat a seat sits on.

    Center is used for the drummer and the steersperson, who sit on the
    centerline and contribute to neither side of the left/right split.
    """
    PORT = "port"
    STARBOARD = "starboard"
    CENTER = "center"


class SeatRole(str, Enum):
    """What a seat is used for."""
    PADDLER = "paddler"
    DRUMMER = "drummer"
    STEER = "steer"
    ALTERNATE = "alternate"  # Reserve, not on the boat


class SlotTier(str, Enum):
    """
    Occupancy tier within a single seat.

    PRIMARY is the race lineup; SECONDARY is the comparison lineup shown
    side by side with it. Alternates only carry a PRIMARY slot.
    """
    PRIMARY = "primary"
    SECONDARY = "secondary"


class BalanceStatus(str, Enum):
    """Left/right balance verdict."""
    PORT_HEAVY = "Port heavy"
    STARBOARD_HEAVY = "Starboard heavy"
    BALANCED = "Balanced"


class WeightUnit(str, Enum):
    """Display units for athlete weight. Storage is always kilograms."""
    KG = "kg"
    LB = "lb"
