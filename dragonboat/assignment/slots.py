"""
assignment/slots.py - Seat slot structures

Every seat's occupancy is a small tagged slot list: [primary, secondary]
for boat seats, [primary] for alternates. One accessor serves both, so the
placement policy is a single algorithm for every seat kind.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..core.enums import SeatRole, SlotTier


class _Pool:
    """
    Sentinel destination meaning "back to the unassigned pool".
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "<POOL>"


POOL = _Pool()


_TIER_ORDER: Tuple[SlotTier, ...] = (SlotTier.PRIMARY, SlotTier.SECONDARY)


@dataclass(frozen=True)
class SlotRef:
    """
    Reference to a seat, and optionally one tier within it.

    tier=None is tier-agnostic: the placement policy picks the tier.
    """
    seat_id: str
    tier: Optional[SlotTier] = None

    def __str__(self) -> str:
        if self.tier is None:
            return self.seat_id
        return f"{self.seat_id}:{self.tier.value}"


@dataclass
class SeatSlots:
    """
    Occupancy of one seat.

    Attributes:
        seat_id: Seat id the slots belong to
        role: Paddler, drummer, steer or alternate
        slots: Athlete ids per tier, primary first; None is empty
    """
    seat_id: str
    role: SeatRole
    slots: List[Optional[str]] = field(default_factory=list)

    @classmethod
    def empty(cls, seat_id: str, role: SeatRole) -> "SeatSlots":
        size = 1 if role == SeatRole.ALTERNATE else 2
        return cls(seat_id=seat_id, role=role, slots=[None] * size)

    @property
    def supports_secondary(self) -> bool:
        return len(self.slots) > 1

    @property
    def tiers(self) -> Tuple[SlotTier, ...]:
        return _TIER_ORDER[:len(self.slots)]

    def has_tier(self, tier: SlotTier) -> bool:
        return tier in self.tiers

    def get(self, tier: SlotTier = SlotTier.PRIMARY) -> Optional[str]:
        """Occupant of a tier, None if empty or the seat has no such tier."""
        if not self.has_tier(tier):
            return None
        return self.slots[_TIER_ORDER.index(tier)]

    def set(self, tier: SlotTier, athlete_id: Optional[str]) -> Optional[str]:
        """
        Write a tier and return whoever was there before.

        Raises:
            KeyError: If the seat has no such tier.
        """
        if not self.has_tier(tier):
            raise KeyError(f"Seat {self.seat_id!r} has no {tier.value} slot")
        position = _TIER_ORDER.index(tier)
        previous = self.slots[position]
        self.slots[position] = athlete_id
        return previous

    def occupied(self) -> Iterator[Tuple[SlotTier, str]]:
        for tier, athlete_id in zip(self.tiers, self.slots):
            if athlete_id is not None:
                yield tier, athlete_id

    @property
    def is_empty(self) -> bool:
        return all(a is None for a in self.slots)
