"""
Dragonboat Assignment State

The canonical mapping of seat slots to athletes for one lineup being
edited. The unassigned pool is never stored: it is derived on every read as
eligible athletes minus everyone present in a slot.

Invariant: an athlete id occupies at most one slot across the whole state.
Every write goes through place(), which first clears the athlete from
wherever the index says it currently is.
"""

from __future__ import annotations
import copy
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ..core.constants import DEFAULT_NUM_ALTERNATES, DRUMMER_SEAT_ID, STEER_SEAT_ID
from ..core.dataclasses import Assignment, Athlete, BoatLayout, Lineup
from ..core.enums import SeatRole, Side, SlotTier
from ..layout.generator import alternate_seat_id, paddler_seat_id, seat_role
from .slots import SeatSlots, SlotRef

logger = logging.getLogger(__name__)


class AssignmentState:
    """
    Seat slots for drummer, paddler rows, steersperson and alternates.

    Usage:
        state = AssignmentState(num_rows=10)
        state.place("a1", "row0-port", SlotTier.PRIMARY)
        lineup = state.to_lineup("standard-10")
        available = state.pool(roster)
    """

    def __init__(
        self,
        num_rows: int,
        include_drummer: bool = True,
        include_steer: bool = True,
        num_alternates: int = DEFAULT_NUM_ALTERNATES,
    ):
        if num_rows < 1:
            raise ValueError(f"num_rows must be at least 1, got {num_rows}")

        self._num_rows = num_rows
        self._include_drummer = include_drummer
        self._include_steer = include_steer
        self._num_alternates = max(0, num_alternates)

        self._seats: Dict[str, SeatSlots] = {}
        # athlete id -> slots holding it (at most one while the invariant holds)
        self._index: Dict[str, Set[SlotRef]] = {}

        self._build_seats()

    @classmethod
    def for_layout(cls, layout: BoatLayout, num_alternates: int = DEFAULT_NUM_ALTERNATES) -> "AssignmentState":
        """Create an empty state matching a generated layout."""
        num_rows = layout.num_rows or sum(
            1 for seat_id in layout.seat_ids if seat_role(seat_id) == SeatRole.PADDLER
        ) // 2
        return cls(
            num_rows=max(1, num_rows),
            include_drummer=layout.has_seat(DRUMMER_SEAT_ID),
            include_steer=layout.has_seat(STEER_SEAT_ID),
            num_alternates=num_alternates,
        )

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    def _build_seats(self) -> None:
        """(Re)build the ordered seat map, keeping existing slot contents."""
        previous = self._seats
        seats: Dict[str, SeatSlots] = {}

        def add(seat_id: str, role: SeatRole) -> None:
            seats[seat_id] = previous.get(seat_id) or SeatSlots.empty(seat_id, role)

        if self._include_drummer:
            add(DRUMMER_SEAT_ID, SeatRole.DRUMMER)
        for row in range(self._num_rows):
            add(paddler_seat_id(row, Side.PORT), SeatRole.PADDLER)
            add(paddler_seat_id(row, Side.STARBOARD), SeatRole.PADDLER)
        if self._include_steer:
            add(STEER_SEAT_ID, SeatRole.STEER)
        for i in range(self._num_alternates):
            add(alternate_seat_id(i), SeatRole.ALTERNATE)

        self._seats = seats

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_alternates(self) -> int:
        return self._num_alternates

    @property
    def include_drummer(self) -> bool:
        return self._include_drummer

    @property
    def include_steer(self) -> bool:
        return self._include_steer

    @property
    def seat_ids(self) -> List[str]:
        return list(self._seats)

    def has_seat(self, seat_id: str) -> bool:
        return seat_id in self._seats

    def get_seat_slots(self, seat_id: str) -> Optional[SeatSlots]:
        """Slots of a seat, None if the state has no such seat."""
        return self._seats.get(seat_id)

    def seats(self) -> Iterator[SeatSlots]:
        return iter(self._seats.values())

    # =========================================================================
    # READS
    # =========================================================================

    def get(self, seat_id: str, tier: SlotTier = SlotTier.PRIMARY) -> Optional[str]:
        """Occupant of a slot, None if empty or unknown."""
        slots = self._seats.get(seat_id)
        if slots is None:
            return None
        return slots.get(tier)

    def locate(self, athlete_id: str) -> Optional[SlotRef]:
        """The slot an athlete currently holds, None if unassigned."""
        refs = self._index.get(athlete_id)
        if not refs:
            return None
        return sorted(refs, key=str)[0]

    def is_assigned(self, athlete_id: str) -> bool:
        return bool(self._index.get(athlete_id))

    def assigned_ids(self) -> Set[str]:
        return {athlete_id for athlete_id, refs in self._index.items() if refs}

    def occupied_slots(self) -> Iterator[Tuple[SlotRef, str]]:
        """Every (slot, athlete id) pair, in seat order."""
        for slots in self._seats.values():
            for tier, athlete_id in slots.occupied():
                yield SlotRef(slots.seat_id, tier), athlete_id

    def pool(self, athletes: Iterable[Athlete], active_only: bool = True) -> List[Athlete]:
        """
        Derived unassigned pool.

        Eligible athletes (active ones, unless active_only is False) minus
        everyone present in any slot, in roster order.
        """
        assigned = self.assigned_ids()
        return [
            athlete for athlete in athletes
            if (athlete.is_active or not active_only) and athlete.id not in assigned
        ]

    # =========================================================================
    # WRITES
    # =========================================================================

    def _index_add(self, ref: SlotRef, athlete_id: str) -> None:
        self._index.setdefault(athlete_id, set()).add(ref)

    def _index_remove(self, ref: SlotRef, athlete_id: str) -> None:
        refs = self._index.get(athlete_id)
        if refs is None:
            return
        refs.discard(ref)
        if not refs:
            del self._index[athlete_id]

    def clear_athlete(self, athlete_id: str) -> List[SlotRef]:
        """
        Remove an athlete from every slot holding it.

        Returns:
            The slots that were cleared (empty if the athlete was unassigned).
        """
        refs = sorted(self._index.pop(athlete_id, set()), key=str)
        for ref in refs:
            slots = self._seats.get(ref.seat_id)
            if slots is not None and slots.get(ref.tier) == athlete_id:
                slots.set(ref.tier, None)
        return refs

    def clear_slot(self, seat_id: str, tier: SlotTier = SlotTier.PRIMARY) -> Optional[str]:
        """Empty one slot. Returns the athlete that was there, if any."""
        slots = self._seats.get(seat_id)
        if slots is None or not slots.has_tier(tier):
            return None
        previous = slots.set(tier, None)
        if previous is not None:
            self._index_remove(SlotRef(seat_id, tier), previous)
        return previous

    def place(self, athlete_id: str, seat_id: str, tier: SlotTier = SlotTier.PRIMARY) -> Optional[str]:
        """
        Put an athlete into one concrete slot.

        The athlete is first cleared from wherever it currently sits. Whoever
        held the slot is overwritten and drops out of the state (and so back
        into the derived pool).

        Returns:
            The evicted athlete id, or None if the slot was empty.

        Raises:
            KeyError: If the seat or tier does not exist.
        """
        slots = self._seats.get(seat_id)
        if slots is None:
            raise KeyError(f"Unknown seat: {seat_id!r}")
        if not slots.has_tier(tier):
            raise KeyError(f"Seat {seat_id!r} has no {tier.value} slot")

        self.clear_athlete(athlete_id)

        ref = SlotRef(seat_id, tier)
        evicted = slots.set(tier, athlete_id)
        if evicted is not None:
            self._index_remove(ref, evicted)
        self._index_add(ref, athlete_id)
        return evicted

    def resize(self, num_rows: int) -> List[str]:
        """
        Change the number of paddling rows.

        Rows beyond the new count are dropped from the stern end (their
        occupants, both tiers, leave the state); new rows are appended empty.
        Existing rows are never reordered.

        Returns:
            Athlete ids evicted by the truncation.
        """
        if num_rows < 1:
            raise ValueError(f"num_rows must be at least 1, got {num_rows}")
        if num_rows == self._num_rows:
            return []

        evicted: List[str] = []
        for row in range(num_rows, self._num_rows):
            for side in (Side.PORT, Side.STARBOARD):
                slots = self._seats[paddler_seat_id(row, side)]
                for tier, athlete_id in list(slots.occupied()):
                    self.clear_slot(slots.seat_id, tier)
                    evicted.append(athlete_id)

        old_rows = self._num_rows
        self._num_rows = num_rows
        self._build_seats()

        if evicted:
            logger.info(f"Resize {old_rows} -> {num_rows} rows returned {len(evicted)} athletes to the pool")
        else:
            logger.debug(f"Resize {old_rows} -> {num_rows} rows")
        return evicted

    def reset(self) -> None:
        """Empty every slot, keeping the boat size."""
        for slots in self._seats.values():
            slots.slots = [None] * len(slots.slots)
        self._index.clear()

    # =========================================================================
    # VIEWS
    # =========================================================================

    def to_lineup(self, boat_layout_id: str, tier: SlotTier = SlotTier.PRIMARY) -> Lineup:
        """
        Flatten one tier of the boat seats into a Lineup.

        Alternates are not on the boat and are left out.
        """
        assignments = []
        for slots in self._seats.values():
            if slots.role == SeatRole.ALTERNATE:
                continue
            athlete_id = slots.get(tier)
            if athlete_id is not None:
                assignments.append(Assignment(seat_id=slots.seat_id, athlete_id=athlete_id))
        return Lineup(boat_layout_id=boat_layout_id, assignments=assignments)

    def mapping(self) -> Dict[str, Tuple[Optional[str], ...]]:
        """seat id -> occupants per tier, for comparisons and snapshots."""
        return {seat_id: tuple(slots.slots) for seat_id, slots in self._seats.items()}

    def copy(self) -> "AssignmentState":
        return copy.deepcopy(self)

    def check_invariants(self) -> List[str]:
        """
        Verify slot contents against the athlete index.

        Returns:
            Human-readable problems; empty when the state is consistent.
        """
        problems = []
        seen: Dict[str, SlotRef] = {}
        for ref, athlete_id in self.occupied_slots():
            if athlete_id in seen:
                problems.append(f"{athlete_id} occupies both {seen[athlete_id]} and {ref}")
            else:
                seen[athlete_id] = ref
            if ref not in self._index.get(athlete_id, set()):
                problems.append(f"{athlete_id} at {ref} missing from index")

        for athlete_id, refs in self._index.items():
            for ref in refs:
                if self.get(ref.seat_id, ref.tier) != athlete_id:
                    problems.append(f"index says {athlete_id} at {ref} but slot disagrees")
        return problems

    def __repr__(self) -> str:
        return (
            f"AssignmentState(rows={self._num_rows}, assigned={len(self.assigned_ids())}, "
            f"alternates={self._num_alternates})"
        )
