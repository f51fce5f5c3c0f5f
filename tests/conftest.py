"""
Dragonboat Test Configuration and Fixtures

Shared layouts, rosters and sessions for unit and integration tests.
"""

import pytest

from dragonboat.assignment.session import LineupSession
from dragonboat.bootstrap.config import DragonboatConfig, reset_config
from dragonboat.core.dataclasses import Assignment, Athlete, Lineup
from dragonboat.layout.generator import make_standard_layout


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of the developer's environment and config files."""
    for name in (
        "DRAGONBOAT_DEFAULT_ROWS",
        "DRAGONBOAT_MIN_ROWS",
        "DRAGONBOAT_MAX_ROWS",
        "DRAGONBOAT_ROW_SPACING",
        "DRAGONBOAT_INCLUDE_DRUMMER",
        "DRAGONBOAT_INCLUDE_STEER",
        "DRAGONBOAT_NUM_ALTERNATES",
        "DRAGONBOAT_WEIGHT_UNIT",
        "DRAGONBOAT_WEIGHT_DECIMALS",
        "DRAGONBOAT_STRICT_MODE",
        "DRAGONBOAT_LOG_LEVEL",
        "DRAGONBOAT_LOG_FILE",
        "DRAGONBOAT_JSON_LOGS",
        "DRAGONBOAT_ENVIRONMENT",
        "DRAGONBOAT_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config():
    """Default configuration, independent of the environment."""
    return DragonboatConfig()


@pytest.fixture
def five_row_layout():
    """5 rows, spacing 1, drummer and steer: rows at x = -2..2."""
    return make_standard_layout(5, row_spacing=1.0)


@pytest.fixture
def scenario_b_athletes():
    return [
        Athlete(id="drum", name="Drummer", weight_kg=60, gender="female"),
        Athlete(id="p0", name="Port Zero", weight_kg=78, gender="male"),
        Athlete(id="s0", name="Starboard Zero", weight_kg=65, gender="female"),
        Athlete(id="steer", name="Steer", weight_kg=55, gender="male"),
    ]


@pytest.fixture
def scenario_b_lineup():
    return Lineup(
        boat_layout_id="standard-5",
        assignments=[
            Assignment(seat_id="drummer", athlete_id="drum"),
            Assignment(seat_id="row0-port", athlete_id="p0"),
            Assignment(seat_id="row0-starboard", athlete_id="s0"),
            Assignment(seat_id="steer", athlete_id="steer"),
        ],
    )


@pytest.fixture
def roster():
    """Twenty-four active athletes plus one inactive member."""
    athletes = [
        Athlete(
            id=f"a{i}",
            name=f"Athlete {i}",
            weight_kg=55 + (i * 3) % 40,
            gender="female" if i % 2 else "male",
        )
        for i in range(24)
    ]
    athletes.append(Athlete(id="retired", name="Retired Member", weight_kg=80, is_active=False))
    return athletes


@pytest.fixture
def session(roster, config):
    """Ten-row editing session over the shared roster."""
    return LineupSession(roster, config=config, num_rows=10)
