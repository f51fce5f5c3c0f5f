"""
assignment/serialization.py - Persisted lineup codec

Converts an AssignmentState to and from the lineup shape exchanged with the
storage collaborator:

    {
      drummer, steersperson,
      paddlers: {left: [...], right: [...]},
      alternates: [...],
      drummer_secondary, steersperson_secondary,
      paddlers_secondary: {left: [...], right: [...]}
    }

Arrays are indexed by row (0 = bow-most) and are resized, never reordered.
Left is port, right is starboard.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.constants import (
    DEFAULT_NUM_ALTERNATES,
    DEFAULT_NUM_ROWS,
    DRUMMER_SEAT_ID,
    STEER_SEAT_ID,
)
from ..core.enums import Side, SlotTier
from ..errors.taxonomy import ErrorCode, InvalidLineupError
from ..layout.generator import alternate_seat_id, paddler_seat_id
from .state import AssignmentState

logger = logging.getLogger(__name__)


def _coerce_id(v):
    # Ids arrive as strings or integers; empty strings mean "no one"
    if v is None or v == "":
        return None
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


# =============================================================================
# Persisted models
# =============================================================================

class PaddlerRows(BaseModel):
    """Per-side row arrays."""

    model_config = ConfigDict(extra="ignore")

    left: List[Optional[str]] = Field(default_factory=list)
    right: List[Optional[str]] = Field(default_factory=list)

    @field_validator("left", "right", mode="before")
    @classmethod
    def validate_rows(cls, v):
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return v
        return [_coerce_id(item) for item in v]


class PersistedLineup(BaseModel):
    """The stored lineup shape."""

    model_config = ConfigDict(extra="ignore")

    drummer: Optional[str] = None
    steersperson: Optional[str] = None
    paddlers: PaddlerRows = Field(default_factory=PaddlerRows)
    alternates: List[Optional[str]] = Field(default_factory=list)
    drummer_secondary: Optional[str] = None
    steersperson_secondary: Optional[str] = None
    paddlers_secondary: PaddlerRows = Field(default_factory=PaddlerRows)

    @field_validator(
        "drummer", "steersperson", "drummer_secondary", "steersperson_secondary",
        mode="before",
    )
    @classmethod
    def validate_single(cls, v):
        return _coerce_id(v)

    @field_validator("alternates", mode="before")
    @classmethod
    def validate_alternates(cls, v):
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            return v
        return [_coerce_id(item) for item in v]

    @field_validator("paddlers", "paddlers_secondary", mode="before")
    @classmethod
    def validate_paddlers(cls, v):
        return {} if v is None else v

    @property
    def num_rows(self) -> int:
        """Longest per-side row array across both tiers."""
        return max(
            len(self.paddlers.left),
            len(self.paddlers.right),
            len(self.paddlers_secondary.left),
            len(self.paddlers_secondary.right),
        )


def validate_persisted(data: Any) -> PersistedLineup:
    """
    Validate a raw persisted lineup.

    Raises:
        InvalidLineupError: If the payload does not have the lineup shape.
    """
    if isinstance(data, PersistedLineup):
        return data
    try:
        return PersistedLineup.model_validate(data)
    except ValidationError as e:
        raise InvalidLineupError(
            f"Invalid persisted lineup: {e.errors()[0]['msg']}",
            ErrorCode.LINEUP_INVALID,
        ) from e


# =============================================================================
# Conversion
# =============================================================================

def _fit(values: List[Optional[str]], size: int) -> List[Optional[str]]:
    """Pad with None or truncate from the end."""
    if len(values) >= size:
        return list(values[:size])
    return list(values) + [None] * (size - len(values))


def state_to_persisted(state: AssignmentState) -> Dict[str, Any]:
    """Serialize an AssignmentState to the persisted lineup dict."""
    rows = range(state.num_rows)

    def side(tier: SlotTier, s: Side) -> List[Optional[str]]:
        return [state.get(paddler_seat_id(r, s), tier) for r in rows]

    return {
        "drummer": state.get(DRUMMER_SEAT_ID, SlotTier.PRIMARY),
        "steersperson": state.get(STEER_SEAT_ID, SlotTier.PRIMARY),
        "paddlers": {
            "left": side(SlotTier.PRIMARY, Side.PORT),
            "right": side(SlotTier.PRIMARY, Side.STARBOARD),
        },
        "alternates": [state.get(alternate_seat_id(i)) for i in range(state.num_alternates)],
        "drummer_secondary": state.get(DRUMMER_SEAT_ID, SlotTier.SECONDARY),
        "steersperson_secondary": state.get(STEER_SEAT_ID, SlotTier.SECONDARY),
        "paddlers_secondary": {
            "left": side(SlotTier.SECONDARY, Side.PORT),
            "right": side(SlotTier.SECONDARY, Side.STARBOARD),
        },
    }


def state_from_persisted(
    data: Any,
    include_drummer: bool = True,
    include_steer: bool = True,
    num_alternates: int = DEFAULT_NUM_ALTERNATES,
    default_rows: int = DEFAULT_NUM_ROWS,
    num_rows: Optional[int] = None,
) -> AssignmentState:
    """
    Load a persisted lineup into a fresh AssignmentState.

    The row count is the longest per-side paddler array (default_rows when
    all are empty) unless num_rows forces one. Callers that clamp the boat
    size pass the clamped count as num_rows so arrays are cut only once.
    Every per-side array is padded or truncated to that count, and a warning
    is logged only for ids that do not fit. Ids for seats the boat lacks are
    dropped with a warning. An id listed more than once ends up in its last
    position.

    Raises:
        InvalidLineupError: If the payload does not have the lineup shape.
    """
    persisted = validate_persisted(data)

    rows = num_rows or persisted.num_rows or default_rows
    state = AssignmentState(
        num_rows=rows,
        include_drummer=include_drummer,
        include_steer=include_steer,
        num_alternates=num_alternates,
    )

    placements = []

    def add(athlete_id: Optional[str], seat_id: str, tier: SlotTier) -> None:
        if athlete_id is not None:
            placements.append((athlete_id, seat_id, tier))

    add(persisted.drummer, DRUMMER_SEAT_ID, SlotTier.PRIMARY)
    add(persisted.drummer_secondary, DRUMMER_SEAT_ID, SlotTier.SECONDARY)

    for tier, paddlers in (
        (SlotTier.PRIMARY, persisted.paddlers),
        (SlotTier.SECONDARY, persisted.paddlers_secondary),
    ):
        for s, values in ((Side.PORT, paddlers.left), (Side.STARBOARD, paddlers.right)):
            dropped = [a for a in values[rows:] if a is not None]
            if dropped:
                logger.warning(f"Dropping {len(dropped)} {s.value} {tier.value} paddlers beyond row {rows}")
            for row, athlete_id in enumerate(_fit(values, rows)):
                add(athlete_id, paddler_seat_id(row, s), tier)

    add(persisted.steersperson, STEER_SEAT_ID, SlotTier.PRIMARY)
    add(persisted.steersperson_secondary, STEER_SEAT_ID, SlotTier.SECONDARY)

    dropped_alternates = [a for a in persisted.alternates[state.num_alternates:] if a is not None]
    if dropped_alternates:
        logger.warning(f"Dropping {len(dropped_alternates)} alternates beyond {state.num_alternates}")
    for i, athlete_id in enumerate(_fit(persisted.alternates, state.num_alternates)):
        add(athlete_id, alternate_seat_id(i), SlotTier.PRIMARY)

    for athlete_id, seat_id, tier in placements:
        if not state.has_seat(seat_id):
            logger.warning(f"Dropping {athlete_id}: boat has no {seat_id} seat")
            continue
        if state.is_assigned(athlete_id):
            logger.warning(f"Athlete {athlete_id} listed more than once; keeping {seat_id}:{tier.value}")
        state.place(athlete_id, seat_id, tier)

    logger.debug(f"Loaded persisted lineup: {rows} rows, {len(state.assigned_ids())} athletes seated")
    return state
