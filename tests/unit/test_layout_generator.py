"""
Unit tests for the seat layout generator.
"""

import pytest

from dragonboat.core.enums import SeatRole, Side
from dragonboat.core.dataclasses import BoatLayout, Seat
from dragonboat.layout.generator import (
    LayoutGenerator,
    alternate_seat_id,
    clamp_rows,
    make_standard_layout,
    paddler_seat_id,
    parse_alternate_seat_id,
    parse_paddler_seat_id,
    seat_role,
)


class TestSeatIds:
    """Tests for seat id helpers."""

    def test_paddler_seat_id(self):
        assert paddler_seat_id(0, Side.PORT) == "row0-port"
        assert paddler_seat_id(9, Side.STARBOARD) == "row9-starboard"

    def test_parse_paddler_seat_id(self):
        assert parse_paddler_seat_id("row3-port") == (3, Side.PORT)
        assert parse_paddler_seat_id("row12-starboard") == (12, Side.STARBOARD)

    def test_parse_rejects_other_ids(self):
        assert parse_paddler_seat_id("drummer") is None
        assert parse_paddler_seat_id("row-port") is None
        assert parse_paddler_seat_id("") is None

    def test_alternate_ids(self):
        assert alternate_seat_id(2) == "alternate-2"
        assert parse_alternate_seat_id("alternate-2") == 2
        assert parse_alternate_seat_id("alternate-x") is None
        assert parse_alternate_seat_id("steer") is None

    def test_seat_role(self):
        assert seat_role("drummer") == SeatRole.DRUMMER
        assert seat_role("steer") == SeatRole.STEER
        assert seat_role("row0-port") == SeatRole.PADDLER
        assert seat_role("alternate-0") == SeatRole.ALTERNATE
        assert seat_role("mast") is None

    def test_clamp_rows(self):
        assert clamp_rows(2) == 4
        assert clamp_rows(10) == 10
        assert clamp_rows(20) == 13


class TestLayoutGenerator:
    """Tests for LayoutGenerator.generate."""

    def test_seat_count(self):
        """2N paddler seats plus drummer and steer."""
        layout = LayoutGenerator().generate(10)
        assert len(layout.seats) == 22
        assert layout.num_rows == 10

    def test_ids_and_name(self):
        layout = make_standard_layout(10)
        assert layout.id == "standard-10"
        assert layout.name == "Standard 10-row boat"

    def test_seat_order(self):
        """Row-major port then starboard, then drummer, then steer."""
        layout = make_standard_layout(2)
        assert layout.seat_ids == [
            "row0-port", "row0-starboard",
            "row1-port", "row1-starboard",
            "drummer", "steer",
        ]

    def test_five_row_coordinates(self):
        """Rows centered on 0; drummer one spacing forward of row 0, steer one aft of the last."""
        layout = make_standard_layout(5, row_spacing=1.0)
        assert layout.get_seat("row0-port").x == -2.0
        assert layout.get_seat("row0-starboard").x == -2.0
        assert layout.get_seat("row2-port").x == 0.0
        assert layout.get_seat("row4-starboard").x == 2.0
        assert layout.get_seat("drummer").x == -3.0
        assert layout.get_seat("steer").x == 3.0

    def test_even_rows_are_symmetric(self):
        layout = make_standard_layout(10, row_spacing=1.0)
        assert layout.get_seat("row0-port").x == -4.5
        assert layout.get_seat("row9-port").x == 4.5
        total = sum(seat.x for seat in layout.seats)
        assert abs(total) < 1e-9

    def test_spacing_scales_positions(self):
        layout = make_standard_layout(4, row_spacing=0.9)
        assert abs(layout.get_seat("row0-port").x - (-1.35)) < 1e-9
        assert abs(layout.get_seat("drummer").x - (-2.25)) < 1e-9

    def test_sides(self):
        layout = make_standard_layout(3)
        assert layout.get_seat("row1-port").side == Side.PORT
        assert layout.get_seat("row1-starboard").side == Side.STARBOARD
        assert layout.get_seat("drummer").side == Side.CENTER
        assert layout.get_seat("steer").side == Side.CENTER

    def test_without_drummer_and_steer(self):
        layout = make_standard_layout(4, include_drummer=False, include_steer=False)
        assert len(layout.seats) == 8
        assert not layout.has_seat("drummer")
        assert not layout.has_seat("steer")

    def test_deterministic(self):
        assert make_standard_layout(7).to_dict() == make_standard_layout(7).to_dict()

    def test_single_row(self):
        layout = make_standard_layout(1)
        assert layout.get_seat("row0-port").x == 0.0
        assert layout.get_seat("drummer").x == -1.0
        assert layout.get_seat("steer").x == 1.0


class TestBoatLayout:
    """Tests for the BoatLayout value type."""

    def test_duplicate_seat_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate seat id"):
            BoatLayout(id="bad", seats=(Seat("a", 0.0), Seat("a", 1.0)))

    def test_unknown_seat_lookup(self):
        layout = make_standard_layout(4)
        assert layout.get_seat("row9-port") is None
        assert not layout.has_seat("row9-port")

    def test_dict_round_trip(self):
        layout = make_standard_layout(6)
        restored = BoatLayout.from_dict(layout.to_dict())
        assert restored == layout
        assert restored.get_seat("steer").side == Side.CENTER
