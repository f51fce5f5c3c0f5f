"""
balance/results.py - Balance result dataclasses

All weights in kilograms; x positions in layout units, negative toward the
bow.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..core.enums import BalanceStatus
from ..core.utils import determinize_dict


@dataclass(frozen=True)
class CenterOfGravity:
    """Longitudinal center of gravity of the occupied seats."""

    x_cg: float = 0.0
    total_weight: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.total_weight == 0

    @property
    def is_bow_heavy(self) -> bool:
        return self.x_cg < 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x_cg": self.x_cg,
            "total_weight": self.total_weight,
        }


@dataclass(frozen=True)
class SeatMoment:
    """Fore/aft leverage of one occupied seat."""

    seat_id: str
    athlete_id: str
    x: float
    weight_kg: float
    moment: float
    moment_normalized: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seat_id": self.seat_id,
            "athlete_id": self.athlete_id,
            "x": self.x,
            "weight_kg": self.weight_kg,
            "moment": self.moment,
            "moment_normalized": self.moment_normalized,
        }


@dataclass(frozen=True)
class LeftRightDistribution:
    """Port/starboard/center weight split and its verdict."""

    port_weight: float = 0.0
    starboard_weight: float = 0.0
    center_weight: float = 0.0
    port_ratio: float = 50.0
    starboard_ratio: float = 50.0
    diff: float = 0.0
    status: BalanceStatus = BalanceStatus.BALANCED

    @property
    def total_weight(self) -> float:
        return self.port_weight + self.starboard_weight + self.center_weight

    @property
    def status_label(self) -> str:
        return self.status.value

    @property
    def is_balanced(self) -> bool:
        return self.status == BalanceStatus.BALANCED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "port_weight": self.port_weight,
            "starboard_weight": self.starboard_weight,
            "center_weight": self.center_weight,
            "port_ratio": self.port_ratio,
            "starboard_ratio": self.starboard_ratio,
            "diff": self.diff,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class CrewComposition:
    """Head count of the seated crew by gender."""

    male: int = 0
    female: int = 0
    other: int = 0

    @property
    def total(self) -> int:
        return self.male + self.female + self.other

    def to_dict(self) -> Dict[str, Any]:
        return {
            "male": self.male,
            "female": self.female,
            "other": self.other,
            "total": self.total,
        }


@dataclass
class BalanceSummary:
    """Everything the balance panels display for one lineup."""

    center_of_gravity: CenterOfGravity
    left_right: LeftRightDistribution
    seat_moments: List[SeatMoment] = field(default_factory=list)
    crew: CrewComposition = field(default_factory=CrewComposition)

    @property
    def max_moment_normalized(self) -> float:
        if not self.seat_moments:
            return 0.0
        return max(m.moment_normalized for m in self.seat_moments)

    def moment_for_seat(self, seat_id: str) -> float:
        """Normalized leverage for a seat, 0.0 when the seat is empty."""
        for m in self.seat_moments:
            if m.seat_id == seat_id:
                return m.moment_normalized
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a hash-stable dictionary."""
        return determinize_dict({
            "center_of_gravity": self.center_of_gravity.to_dict(),
            "left_right": self.left_right.to_dict(),
            "seat_moments": [m.to_dict() for m in self.seat_moments],
            "crew": self.crew.to_dict(),
        })
