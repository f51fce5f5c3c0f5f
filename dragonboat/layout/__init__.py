"""
Dragonboat Seat Layout

Deterministic seat geometry for standard boats.
"""

from .generator import (
    LayoutGenerator,
    make_standard_layout,
    clamp_rows,
    paddler_seat_id,
    parse_paddler_seat_id,
    alternate_seat_id,
    parse_alternate_seat_id,
    seat_role,
)

__all__ = [
    "LayoutGenerator",
    "make_standard_layout",
    "clamp_rows",
    "paddler_seat_id",
    "parse_paddler_seat_id",
    "alternate_seat_id",
    "parse_alternate_seat_id",
    "seat_role",
]
