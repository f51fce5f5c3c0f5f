"""
Dragonboat Balance Engine

Center of gravity, fore/aft leverage and left/right distribution computed
from a layout, a roster and a lineup.
"""

from .results import (
    CenterOfGravity,
    SeatMoment,
    LeftRightDistribution,
    CrewComposition,
    BalanceSummary,
)

from .engine import (
    resolve_assignments,
    classify_seat_side,
    compute_center_of_gravity,
    compute_seat_moments_for_lineup,
    balance_status,
    compute_left_right_distribution,
    compute_crew_composition,
    compute_balance_summary,
)

__all__ = [
    # Results
    "CenterOfGravity",
    "SeatMoment",
    "LeftRightDistribution",
    "CrewComposition",
    "BalanceSummary",
    # Engine
    "resolve_assignments",
    "classify_seat_side",
    "compute_center_of_gravity",
    "compute_seat_moments_for_lineup",
    "balance_status",
    "compute_left_right_distribution",
    "compute_crew_composition",
    "compute_balance_summary",
]
