"""
Dragonboat Layout Generator

Builds the seat geometry of a standard dragon boat: N rows of paired port
and starboard paddlers spread evenly about the middle of the boat, with an
optional drummer forward of the bow-most row and an optional steersperson
aft of the stern-most row.

Output is deterministic for a given input (same seat ids, same order) so
that regenerating a layout for the same boat size lines up with lineups
persisted earlier.
"""

from __future__ import annotations
from typing import Optional, Tuple
import logging
import re

from ..core.constants import (
    DEFAULT_ROW_SPACING,
    DRUMMER_SEAT_ID,
    STEER_SEAT_ID,
    ALTERNATE_SEAT_PREFIX,
    MIN_NUM_ROWS,
    MAX_NUM_ROWS,
)
from ..core.dataclasses import Seat, BoatLayout
from ..core.enums import Side, SeatRole

logger = logging.getLogger(__name__)


_PADDLER_SEAT_RE = re.compile(r"^row(\d+)-(port|starboard)$")


# =============================================================================
# SEAT IDS
# =============================================================================

def paddler_seat_id(row: int, side: Side) -> str:
    """Seat id for a paddler seat, e.g. row 0 port -> "row0-port"."""
    return f"row{row}-{Side(side).value}"


def parse_paddler_seat_id(seat_id: str) -> Optional[Tuple[int, Side]]:
    """Inverse of paddler_seat_id. Returns None for non-paddler ids."""
    match = _PADDLER_SEAT_RE.match(seat_id or "")
    if match is None:
        return None
    return int(match.group(1)), Side(match.group(2))


def alternate_seat_id(index: int) -> str:
    return f"{ALTERNATE_SEAT_PREFIX}-{index}"


def parse_alternate_seat_id(seat_id: str) -> Optional[int]:
    prefix = f"{ALTERNATE_SEAT_PREFIX}-"
    if not seat_id or not seat_id.startswith(prefix):
        return None
    suffix = seat_id[len(prefix):]
    return int(suffix) if suffix.isdigit() else None


def seat_role(seat_id: str) -> Optional[SeatRole]:
    """Classify a seat id produced by this module."""
    if seat_id == DRUMMER_SEAT_ID:
        return SeatRole.DRUMMER
    if seat_id == STEER_SEAT_ID:
        return SeatRole.STEER
    if parse_paddler_seat_id(seat_id) is not None:
        return SeatRole.PADDLER
    if parse_alternate_seat_id(seat_id) is not None:
        return SeatRole.ALTERNATE
    return None


def clamp_rows(num_rows: int, min_rows: int = MIN_NUM_ROWS, max_rows: int = MAX_NUM_ROWS) -> int:
    """Clamp a requested row count into the supported boat sizes."""
    return max(min_rows, min(max_rows, int(num_rows)))


# =============================================================================
# LAYOUT GENERATOR
# =============================================================================

class LayoutGenerator:
    """
    Generates standard dragon boat layouts.

    Usage:
        generator = LayoutGenerator(row_spacing=1.0)
        layout = generator.generate(num_rows=10)
    """

    def __init__(
        self,
        row_spacing: float = DEFAULT_ROW_SPACING,
        include_drummer: bool = True,
        include_steer: bool = True,
    ):
        self.row_spacing = row_spacing
        self.include_drummer = include_drummer
        self.include_steer = include_steer

    def generate(self, num_rows: int) -> BoatLayout:
        """
        Generate the layout for a boat with num_rows paddling rows.

        Rows are centered on x = 0; row 0 is nearest the bow.

        Args:
            num_rows: Number of paddling rows (>= 1, clamped by the caller)

        Returns:
            BoatLayout with 2 * num_rows side seats plus 0-2 center seats
        """
        spacing = self.row_spacing
        center_index = (num_rows - 1) / 2

        seats = []
        for row in range(num_rows):
            x = (row - center_index) * spacing
            seats.append(Seat(id=paddler_seat_id(row, Side.PORT), x=x, side=Side.PORT))
            seats.append(Seat(id=paddler_seat_id(row, Side.STARBOARD), x=x, side=Side.STARBOARD))

        bow_x = (0 - center_index) * spacing
        stern_x = ((num_rows - 1) - center_index) * spacing

        if self.include_drummer:
            seats.append(Seat(id=DRUMMER_SEAT_ID, x=bow_x - spacing, side=Side.CENTER))
        if self.include_steer:
            seats.append(Seat(id=STEER_SEAT_ID, x=stern_x + spacing, side=Side.CENTER))

        layout = BoatLayout(
            id=f"standard-{num_rows}",
            name=f"Standard {num_rows}-row boat",
            num_rows=num_rows,
            seats=tuple(seats),
        )

        logger.debug(
            f"Layout generated: {layout.id} ({len(seats)} seats, "
            f"spacing={spacing}, drummer={self.include_drummer}, steer={self.include_steer})"
        )
        return layout


def make_standard_layout(
    num_rows: int,
    row_spacing: float = DEFAULT_ROW_SPACING,
    include_drummer: bool = True,
    include_steer: bool = True,
) -> BoatLayout:
    """Build a standard layout in one call."""
    generator = LayoutGenerator(
        row_spacing=row_spacing,
        include_drummer=include_drummer,
        include_steer=include_steer,
    )
    return generator.generate(num_rows)
