"""
Dragonboat Assignment Transition Engine

Applies one move (athlete X to destination Z, or back to the pool) to an
AssignmentState:

1. Resolve the athlete (in a slot, or in the derived pool). Unknown
   athletes and unknown destination seats are no-ops.
2. Clear the athlete from every slot it holds, whatever the caller thinks
   its source is. A POOL destination stops here.
3. Place: empty primary, else empty secondary (when the seat has one),
   else overwrite the targeted slot. The overwritten occupant is not moved
   anywhere; it simply reappears in the derived pool.

Moves never raise for malformed ids unless the engine runs in strict mode,
where NotFoundError surfaces them for diagnostics.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from ..core.dataclasses import Athlete
from ..core.enums import SlotTier
from ..errors.taxonomy import ErrorCode, NotFoundError
from .slots import POOL, SeatSlots, SlotRef, _Pool
from .state import AssignmentState

logger = logging.getLogger(__name__)

Destination = Union[SlotRef, str, _Pool]


@dataclass
class MoveResult:
    """Outcome of a single move."""

    athlete_id: str
    applied: bool = False
    destination: Optional[Union[SlotRef, _Pool]] = None
    placed: Optional[SlotRef] = None
    evicted_athlete_id: Optional[str] = None
    cleared: List[SlotRef] = field(default_factory=list)
    reason: str = ""

    @property
    def to_pool(self) -> bool:
        return self.destination is POOL

    @property
    def evicted(self) -> bool:
        return self.evicted_athlete_id is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "athlete_id": self.athlete_id,
            "applied": self.applied,
            "destination": "pool" if self.to_pool else (str(self.destination) if self.destination else None),
            "placed": str(self.placed) if self.placed else None,
            "evicted_athlete_id": self.evicted_athlete_id,
            "cleared": [str(ref) for ref in self.cleared],
            "reason": self.reason,
        }


def choose_tier(slots: SeatSlots, requested: Optional[SlotTier] = None) -> SlotTier:
    """
    Placement policy for one seat, applied after the mover has been cleared.

    Empty primary first, then empty secondary; with both full, overwrite the
    requested tier (tier-agnostic requests overwrite the secondary where the
    seat has one, the primary otherwise).
    """
    if slots.get(SlotTier.PRIMARY) is None:
        return SlotTier.PRIMARY
    if slots.supports_secondary and slots.get(SlotTier.SECONDARY) is None:
        return SlotTier.SECONDARY
    if requested is not None and slots.has_tier(requested):
        return requested
    return SlotTier.SECONDARY if slots.supports_secondary else SlotTier.PRIMARY


class TransitionEngine:
    """
    Applies move events to an AssignmentState.

    Usage:
        engine = TransitionEngine(state, roster)
        engine.move("a1", SlotRef("row0-port"))
        engine.move("a1", POOL)
    """

    def __init__(
        self,
        state: AssignmentState,
        athletes: Iterable[Athlete] = (),
        strict: bool = False,
    ):
        self.state = state
        self.strict = strict
        self._eligible: Dict[str, Athlete] = {}
        self.set_roster(athletes)

    def set_roster(self, athletes: Iterable[Athlete]) -> None:
        """Replace the roster the pool is derived from."""
        self._eligible = {a.id: a for a in athletes if a.is_active}

    def in_pool(self, athlete_id: str) -> bool:
        return athlete_id in self._eligible and not self.state.is_assigned(athlete_id)

    def is_known(self, athlete_id: str) -> bool:
        """True if the athlete is in a slot or in the derived pool."""
        return self.state.is_assigned(athlete_id) or self.in_pool(athlete_id)

    def _not_found(self, athlete_id: str, destination: Any, kind: str, identifier: Any, code: ErrorCode) -> MoveResult:
        if self.strict:
            raise NotFoundError(kind, identifier, code)
        logger.debug(f"Move ignored: {kind.lower()} not found ({identifier!r})")
        return MoveResult(
            athlete_id=athlete_id,
            destination=destination,
            reason=f"{kind.lower()}_not_found",
        )

    def move(self, athlete_id: str, destination: Destination) -> MoveResult:
        """
        Move an athlete to a seat (any tier or a specific one) or to the pool.

        Args:
            athlete_id: Athlete to move
            destination: POOL, a SlotRef, or a bare seat id (tier-agnostic)

        Returns:
            MoveResult describing what changed. applied=False means no-op.

        Raises:
            NotFoundError: Only in strict mode, for unknown athletes or seats.
        """
        if isinstance(destination, str):
            destination = SlotRef(destination)

        if not self.is_known(athlete_id):
            return self._not_found(athlete_id, destination, "Athlete", athlete_id, ErrorCode.ATHLETE_NOT_FOUND)

        if destination is POOL:
            cleared = self.state.clear_athlete(athlete_id)
            logger.debug(f"Move {athlete_id} -> pool (cleared {len(cleared)} slot(s))")
            return MoveResult(
                athlete_id=athlete_id,
                applied=True,
                destination=POOL,
                cleared=cleared,
            )

        slots = self.state.get_seat_slots(destination.seat_id)
        if slots is None:
            return self._not_found(athlete_id, destination, "Seat", destination.seat_id, ErrorCode.SEAT_NOT_FOUND)
        if destination.tier is not None and not slots.has_tier(destination.tier):
            return self._not_found(athlete_id, destination, "Slot", str(destination), ErrorCode.SLOT_NOT_FOUND)

        cleared = self.state.clear_athlete(athlete_id)
        tier = choose_tier(slots, destination.tier)
        evicted = self.state.place(athlete_id, destination.seat_id, tier)
        placed = SlotRef(destination.seat_id, tier)

        if evicted is not None:
            # No swap back to the mover's old seat; the evicted athlete is
            # left to the derived pool.
            logger.info(f"Move {athlete_id} -> {placed} evicted {evicted} to the pool")
        else:
            logger.debug(f"Move {athlete_id} -> {placed}")

        return MoveResult(
            athlete_id=athlete_id,
            applied=True,
            destination=destination,
            placed=placed,
            evicted_athlete_id=evicted,
            cleared=cleared,
        )

    def move_to_pool(self, athlete_id: str) -> MoveResult:
        return self.move(athlete_id, POOL)

    def pool(self) -> List[Athlete]:
        """Derived pool in roster order."""
        return self.state.pool(self._eligible.values())
