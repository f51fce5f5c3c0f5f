"""
Dragonboat Assignment State

Seat slots, the move transition engine, the persisted lineup codec and the
editing session tying them to a layout and roster.
"""

from .slots import POOL, SlotRef, SeatSlots

from .state import AssignmentState

from .transitions import (
    Destination,
    MoveResult,
    TransitionEngine,
    choose_tier,
)

from .serialization import (
    PaddlerRows,
    PersistedLineup,
    validate_persisted,
    state_to_persisted,
    state_from_persisted,
)

from .session import LineupSession

__all__ = [
    # Slots
    "POOL",
    "SlotRef",
    "SeatSlots",
    # State
    "AssignmentState",
    # Transitions
    "Destination",
    "MoveResult",
    "TransitionEngine",
    "choose_tier",
    # Persistence
    "PaddlerRows",
    "PersistedLineup",
    "validate_persisted",
    "state_to_persisted",
    "state_from_persisted",
    # Session
    "LineupSession",
]
