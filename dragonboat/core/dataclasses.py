"""
Dragonboat Core Data Structures

Shared value types consumed by the layout generator, the balance engine and
the assignment state:
- Seat: one seating position on the bow(-)/stern(+) axis
- BoatLayout: the immutable set of seats for one boat size
- Athlete: the slice of a roster member the core needs
- Assignment / Lineup: flattened seat -> athlete facts for one tier
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .enums import Side
from .utils import coerce_weight_kg


# =============================================================================
# SEAT / LAYOUT
# =============================================================================

@dataclass(frozen=True)
class Seat:
    """
    A seat in a boat layout.

    Attributes:
        id: Seat id, unique within its layout (e.g. "row0-port", "drummer")
        x: Signed position along the boat, negative toward the bow
        side: Port, starboard or center. None when a foreign layout did not
            say; the balance engine then infers the side from the id.
    """
    id: str
    x: float
    side: Optional[Side] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "side": self.side.value if self.side is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Seat":
        side = data.get("side")
        return cls(
            id=str(data["id"]),
            x=float(data.get("x", 0.0)),
            side=Side(side) if side else None,
        )


@dataclass(frozen=True)
class BoatLayout:
    """
    Geometric model of a boat's seats.

    Seats are immutable once a layout is built and seat ids are unique.
    """
    id: str
    seats: Tuple[Seat, ...]
    name: str = ""
    num_rows: int = 0

    def __post_init__(self):
        # Accept any iterable of seats, store a tuple
        seats = tuple(self.seats)
        object.__setattr__(self, "seats", seats)

        seen = set()
        for seat in seats:
            if seat.id in seen:
                raise ValueError(f"Duplicate seat id in layout {self.id!r}: {seat.id!r}")
            seen.add(seat.id)

        object.__setattr__(self, "_seat_index", {seat.id: seat for seat in seats})

    def get_seat(self, seat_id: str) -> Optional[Seat]:
        """Look up a seat by id. Returns None if the layout has no such seat."""
        return self._seat_index.get(seat_id)

    def has_seat(self, seat_id: str) -> bool:
        return seat_id in self._seat_index

    @property
    def seat_ids(self) -> List[str]:
        return [seat.id for seat in self.seats]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "num_rows": self.num_rows,
            "seats": [seat.to_dict() for seat in self.seats],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoatLayout":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            num_rows=int(data.get("num_rows", 0)),
            seats=tuple(Seat.from_dict(s) for s in data.get("seats", [])),
        )


# =============================================================================
# ATHLETE
# =============================================================================

@dataclass(frozen=True)
class Athlete:
    """
    A roster member as seen by the lineup core.

    Only id and weight_kg matter to the balance engine. The rest is carried
    for crew composition and the eligible pool.
    """
    id: str
    name: str = ""
    weight_kg: float = 0.0
    gender: Optional[str] = None
    preferred_side: Optional[str] = None
    is_active: bool = True

    def __post_init__(self):
        object.__setattr__(self, "weight_kg", coerce_weight_kg(self.weight_kg))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "weight_kg": self.weight_kg,
            "gender": self.gender,
            "preferred_side": self.preferred_side,
            "is_active": self.is_active,
        }


def index_athletes(athletes: Iterable[Athlete]) -> Dict[str, Athlete]:
    """Map athlete id -> athlete. Later duplicates win."""
    return {athlete.id: athlete for athlete in athletes}


# =============================================================================
# ASSIGNMENT / LINEUP
# =============================================================================

@dataclass(frozen=True)
class Assignment:
    """One fact: this athlete currently occupies this seat."""
    seat_id: str
    athlete_id: str

    def to_dict(self) -> Dict[str, str]:
        return {"seat_id": self.seat_id, "athlete_id": self.athlete_id}


@dataclass
class Lineup:
    """
    Flattened, order-independent view of one tier of an assignment state.

    The balance engine consumes this shape.
    """
    boat_layout_id: str
    assignments: List[Assignment] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.assignments

    def athlete_for_seat(self, seat_id: str) -> Optional[str]:
        for assignment in self.assignments:
            if assignment.seat_id == seat_id:
                return assignment.athlete_id
        return None

    def as_mapping(self) -> Dict[str, str]:
        """seat id -> athlete id"""
        return {a.seat_id: a.athlete_id for a in self.assignments}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "boat_layout_id": self.boat_layout_id,
            "assignments": [a.to_dict() for a in self.assignments],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Lineup":
        return cls(
            boat_layout_id=str(data.get("boat_layout_id", "")),
            assignments=[
                Assignment(seat_id=str(a["seat_id"]), athlete_id=str(a["athlete_id"]))
                for a in data.get("assignments", [])
            ],
        )
