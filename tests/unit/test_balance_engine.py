"""
Unit tests for the balance engine.

Covers center of gravity, seat moments and the left/right distribution,
including the worked 5-row example.
"""

import pytest

from dragonboat.balance import (
    BalanceSummary,
    balance_status,
    classify_seat_side,
    compute_balance_summary,
    compute_center_of_gravity,
    compute_crew_composition,
    compute_left_right_distribution,
    compute_seat_moments_for_lineup,
)
from dragonboat.core.dataclasses import Assignment, Athlete, BoatLayout, Lineup, Seat
from dragonboat.core.enums import BalanceStatus, Side


class TestWorkedExample:
    """Drummer 60, row0 port 78, row0 starboard 65, steer 55 on a 5-row boat."""

    def test_center_of_gravity(self, five_row_layout, scenario_b_athletes, scenario_b_lineup):
        cg = compute_center_of_gravity(five_row_layout, scenario_b_athletes, scenario_b_lineup)
        assert cg.total_weight == 258
        assert abs(cg.x_cg - (-301 / 258)) < 1e-9
        assert abs(cg.x_cg - (-1.1667)) < 0.001
        assert cg.is_bow_heavy

    def test_left_right(self, five_row_layout, scenario_b_athletes, scenario_b_lineup):
        lr = compute_left_right_distribution(five_row_layout, scenario_b_athletes, scenario_b_lineup)
        assert lr.port_weight == 78
        assert lr.starboard_weight == 65
        assert lr.center_weight == 115
        assert abs(lr.port_ratio - 54.545) < 0.01
        assert abs(lr.starboard_ratio - 45.454) < 0.01
        assert abs(lr.diff - 9.09) < 0.01
        assert lr.status == BalanceStatus.PORT_HEAVY
        assert lr.status_label == "Port heavy"

    def test_seat_moments(self, five_row_layout, scenario_b_athletes, scenario_b_lineup):
        moments = compute_seat_moments_for_lineup(five_row_layout, scenario_b_athletes, scenario_b_lineup)
        by_seat = {m.seat_id: m for m in moments}

        # |60 * -3| = 180 is the largest moment
        assert by_seat["drummer"].moment == 180
        assert by_seat["drummer"].moment_normalized == 1.0
        assert by_seat["steer"].moment == 165
        assert by_seat["row0-port"].moment_normalized == pytest.approx(156 / 180)
        assert by_seat["row0-starboard"].moment_normalized == pytest.approx(130 / 180)

    def test_summary(self, five_row_layout, scenario_b_athletes, scenario_b_lineup):
        summary = compute_balance_summary(five_row_layout, scenario_b_athletes, scenario_b_lineup)
        assert isinstance(summary, BalanceSummary)
        assert summary.max_moment_normalized == 1.0
        assert summary.moment_for_seat("row3-port") == 0.0
        assert summary.crew.male == 2
        assert summary.crew.female == 2

        data = summary.to_dict()
        assert data["left_right"]["status"] == "Port heavy"
        assert data["center_of_gravity"]["total_weight"] == 258


class TestEmptyLineup:
    """Empty lineups fall back to fixed values."""

    def test_center_of_gravity(self, five_row_layout):
        cg = compute_center_of_gravity(five_row_layout, [], Lineup("standard-5"))
        assert cg.x_cg == 0
        assert cg.total_weight == 0
        assert cg.is_empty

    def test_distribution_balanced(self, five_row_layout):
        lr = compute_left_right_distribution(five_row_layout, [], Lineup("standard-5"))
        assert lr.port_ratio == 50
        assert lr.starboard_ratio == 50
        assert lr.diff == 0
        assert lr.status == BalanceStatus.BALANCED

    def test_no_moments(self, five_row_layout):
        assert compute_seat_moments_for_lineup(five_row_layout, [], Lineup("standard-5")) == []

    def test_center_only_is_balanced(self, five_row_layout):
        """Weight only in center seats keeps the 50/50 split."""
        athletes = [Athlete(id="d", weight_kg=70)]
        lineup = Lineup("standard-5", [Assignment("drummer", "d")])
        lr = compute_left_right_distribution(five_row_layout, athletes, lineup)
        assert lr.center_weight == 70
        assert lr.port_ratio == 50
        assert lr.is_balanced


class TestWeightConservation:
    """port + starboard + center equals the center-of-gravity total."""

    def test_full_boat(self, roster):
        from dragonboat.layout.generator import make_standard_layout

        layout = make_standard_layout(10)
        seat_ids = layout.seat_ids
        lineup = Lineup(
            layout.id,
            [Assignment(seat_id, athlete.id) for seat_id, athlete in zip(seat_ids, roster)],
        )

        cg = compute_center_of_gravity(layout, roster, lineup)
        lr = compute_left_right_distribution(layout, roster, lineup)
        assert abs(lr.total_weight - cg.total_weight) < 1e-9
        assert abs(lr.port_ratio + lr.starboard_ratio - 100) < 1e-9

    def test_dangling_ids_skipped(self, five_row_layout, scenario_b_athletes):
        lineup = Lineup(
            "standard-5",
            [
                Assignment("row0-port", "p0"),
                Assignment("row0-port-extra", "s0"),
                Assignment("row1-port", "nobody"),
            ],
        )
        cg = compute_center_of_gravity(five_row_layout, scenario_b_athletes, lineup)
        lr = compute_left_right_distribution(five_row_layout, scenario_b_athletes, lineup)
        assert cg.total_weight == 78
        assert lr.total_weight == 78
        assert len(compute_seat_moments_for_lineup(five_row_layout, scenario_b_athletes, lineup)) == 1

    def test_bad_weights_count_as_zero(self, five_row_layout):
        athletes = [
            Athlete(id="x", weight_kg="heavy"),
            Athlete(id="y", weight_kg=None),
            Athlete(id="z", weight_kg=-5),
            Athlete(id="w", weight_kg=70),
        ]
        lineup = Lineup(
            "standard-5",
            [
                Assignment("row0-port", "x"),
                Assignment("row1-port", "y"),
                Assignment("row2-port", "z"),
                Assignment("row3-starboard", "w"),
            ],
        )
        lr = compute_left_right_distribution(five_row_layout, athletes, lineup)
        assert lr.port_weight == 0
        assert lr.starboard_weight == 70
        assert lr.status == BalanceStatus.STARBOARD_HEAVY


class TestSeatMoments:
    """Tests for moment normalization."""

    def test_max_is_one(self, roster):
        from dragonboat.layout.generator import make_standard_layout

        layout = make_standard_layout(10)
        lineup = Lineup(layout.id, [Assignment(s, a.id) for s, a in zip(layout.seat_ids, roster)])
        moments = compute_seat_moments_for_lineup(layout, roster, lineup)
        assert max(m.moment_normalized for m in moments) == 1.0
        assert all(0.0 <= m.moment_normalized <= 1.0 for m in moments)

    def test_all_at_center_is_zero(self):
        """Seats at x = 0 produce no leverage; the epsilon floor avoids division by zero."""
        layout = BoatLayout(id="mid", seats=(Seat("a-port", 0.0), Seat("a-starboard", 0.0)))
        athletes = [Athlete(id="1", weight_kg=70), Athlete(id="2", weight_kg=80)]
        lineup = Lineup("mid", [Assignment("a-port", "1"), Assignment("a-starboard", "2")])
        moments = compute_seat_moments_for_lineup(layout, athletes, lineup)
        assert [m.moment_normalized for m in moments] == [0.0, 0.0]

    def test_zero_weight_athlete(self, five_row_layout):
        athletes = [Athlete(id="light", weight_kg=0), Athlete(id="heavy", weight_kg=90)]
        lineup = Lineup("standard-5", [Assignment("row0-port", "light"), Assignment("row4-port", "heavy")])
        by_seat = {m.seat_id: m for m in compute_seat_moments_for_lineup(five_row_layout, athletes, lineup)}
        assert by_seat["row0-port"].moment_normalized == 0.0
        assert by_seat["row4-port"].moment_normalized == 1.0


class TestSideClassification:
    """Tests for classify_seat_side."""

    def test_explicit_side_wins(self):
        assert classify_seat_side(Seat("left-ish", 0.0, Side.STARBOARD)) == Side.STARBOARD

    def test_inferred_from_id(self):
        assert classify_seat_side(Seat("row1-port", 0.0)) == Side.PORT
        assert classify_seat_side(Seat("bench-left", 0.0)) == Side.PORT
        assert classify_seat_side(Seat("row1-starboard", 0.0)) == Side.STARBOARD
        assert classify_seat_side(Seat("bench-right", 0.0)) == Side.STARBOARD
        assert classify_seat_side(Seat("drummer", 0.0)) == Side.CENTER

    def test_port_checked_before_starboard(self):
        assert classify_seat_side(Seat("port-starboard", 0.0)) == Side.PORT


class TestBalanceStatus:
    """Tests for the balance verdict thresholds."""

    def test_within_tolerance(self):
        assert balance_status(3.0) == BalanceStatus.BALANCED
        assert balance_status(-3.0) == BalanceStatus.BALANCED
        assert balance_status(0.0) == BalanceStatus.BALANCED

    def test_beyond_tolerance(self):
        assert balance_status(3.01) == BalanceStatus.PORT_HEAVY
        assert balance_status(-3.01) == BalanceStatus.STARBOARD_HEAVY


class TestCrewComposition:
    """Tests for compute_crew_composition."""

    def test_counts_case_insensitive(self, five_row_layout):
        athletes = [
            Athlete(id="1", gender="Male"),
            Athlete(id="2", gender="FEMALE"),
            Athlete(id="3", gender=None),
            Athlete(id="4", gender="non-binary"),
        ]
        lineup = Lineup(
            "standard-5",
            [Assignment("row0-port", "1"), Assignment("row0-starboard", "2"),
             Assignment("row1-port", "3"), Assignment("row1-starboard", "4")],
        )
        crew = compute_crew_composition(five_row_layout, athletes, lineup)
        assert (crew.male, crew.female, crew.other) == (1, 1, 2)
        assert crew.total == 4
