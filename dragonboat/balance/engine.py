"""
Dragonboat Balance Engine

Pure functions computing balance metrics from a layout, a roster and one
lineup tier:
- compute_center_of_gravity: weight-averaged x position of the crew
- compute_seat_moments_for_lineup: per-seat |w * x| normalized to [0, 1]
  for the fore/aft leverage heatmap
- compute_left_right_distribution: port/starboard/center split and verdict

Assignments whose seat or athlete cannot be resolved are skipped. Nothing
here raises for missing data; zero totals resolve to fixed fallbacks.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Tuple, Union
import logging

from ..core.constants import BALANCE_TOLERANCE_PCT, EVEN_SPLIT_PCT, MOMENT_EPSILON
from ..core.dataclasses import Athlete, BoatLayout, Lineup, Seat, index_athletes
from ..core.enums import BalanceStatus, Side
from ..core.utils import coerce_weight_kg, safe_divide
from .results import (
    BalanceSummary,
    CenterOfGravity,
    CrewComposition,
    LeftRightDistribution,
    SeatMoment,
)

logger = logging.getLogger(__name__)

AthleteSource = Union[Iterable[Athlete], Dict[str, Athlete]]


# =============================================================================
# RESOLUTION
# =============================================================================

def _athlete_index(athletes: AthleteSource) -> Dict[str, Athlete]:
    if isinstance(athletes, dict):
        return athletes
    return index_athletes(athletes)


def resolve_assignments(
    layout: BoatLayout,
    athletes: AthleteSource,
    lineup: Lineup,
) -> Iterator[Tuple[Seat, Athlete, float]]:
    """
    Yield (seat, athlete, weight_kg) for every assignment that resolves.

    Dangling seat or athlete ids are skipped silently.
    """
    athlete_by_id = _athlete_index(athletes)

    for assignment in lineup.assignments:
        seat = layout.get_seat(assignment.seat_id)
        athlete = athlete_by_id.get(assignment.athlete_id)
        if seat is None or athlete is None:
            logger.debug(
                f"Skipping unresolved assignment {assignment.seat_id} -> {assignment.athlete_id}"
            )
            continue
        yield seat, athlete, coerce_weight_kg(athlete.weight_kg)


def classify_seat_side(seat: Seat) -> Side:
    """
    Decide which side a seat counts toward.

    The seat's explicit side wins. Otherwise the id is searched for
    "port"/"left" (port) then "starboard"/"right" (starboard); anything else
    is center.
    """
    if seat.side is not None:
        return Side(seat.side)

    seat_id = seat.id.lower()
    if "port" in seat_id or "left" in seat_id:
        return Side.PORT
    if "starboard" in seat_id or "right" in seat_id:
        return Side.STARBOARD
    return Side.CENTER


# =============================================================================
# CENTER OF GRAVITY
# =============================================================================

def compute_center_of_gravity(
    layout: BoatLayout,
    athletes: AthleteSource,
    lineup: Lineup,
) -> CenterOfGravity:
    """
    Compute the crew's longitudinal center of gravity.

    Returns:
        CenterOfGravity(x_cg, total_weight). An empty boat (zero total
        weight) is reported as x_cg = 0, total_weight = 0.
    """
    total_weight = 0.0
    total_moment = 0.0

    for seat, _athlete, weight in resolve_assignments(layout, athletes, lineup):
        total_weight += weight
        total_moment += weight * seat.x

    if total_weight == 0:
        return CenterOfGravity(x_cg=0.0, total_weight=0.0)

    return CenterOfGravity(x_cg=total_moment / total_weight, total_weight=total_weight)


# =============================================================================
# SEAT MOMENTS
# =============================================================================

def compute_seat_moments_for_lineup(
    layout: BoatLayout,
    athletes: AthleteSource,
    lineup: Lineup,
) -> List[SeatMoment]:
    """
    Compute per-seat leverage for the fore/aft heatmap.

    moment = |w * x|, normalized by the largest moment in the lineup (floored
    at MOMENT_EPSILON). The most displaced heavy seat normalizes to 1.0; a
    lineup where every occupied seat sits at x = 0 normalizes to 0.
    """
    raw = []
    for seat, athlete, weight in resolve_assignments(layout, athletes, lineup):
        raw.append((seat, athlete, weight, abs(weight * seat.x)))

    if not raw:
        return []

    max_moment = max(max(entry[3] for entry in raw), MOMENT_EPSILON)

    return [
        SeatMoment(
            seat_id=seat.id,
            athlete_id=athlete.id,
            x=seat.x,
            weight_kg=weight,
            moment=moment,
            moment_normalized=moment / max_moment,
        )
        for seat, athlete, weight, moment in raw
    ]


# =============================================================================
# LEFT / RIGHT
# =============================================================================

def balance_status(diff: float, tolerance: float = BALANCE_TOLERANCE_PCT) -> BalanceStatus:
    """Verdict for a port-minus-starboard percentage point difference."""
    if diff > tolerance:
        return BalanceStatus.PORT_HEAVY
    if diff < -tolerance:
        return BalanceStatus.STARBOARD_HEAVY
    return BalanceStatus.BALANCED


def compute_left_right_distribution(
    layout: BoatLayout,
    athletes: AthleteSource,
    lineup: Lineup,
) -> LeftRightDistribution:
    """
    Compute the port/starboard/center weight split.

    Ratios are over port + starboard only; center weight is reported but
    does not move the split. With nobody on either side the split is 50/50
    and the boat is Balanced.
    """
    totals = {Side.PORT: 0.0, Side.STARBOARD: 0.0, Side.CENTER: 0.0}

    for seat, _athlete, weight in resolve_assignments(layout, athletes, lineup):
        totals[classify_seat_side(seat)] += weight

    port_weight = totals[Side.PORT]
    starboard_weight = totals[Side.STARBOARD]
    lr_total = port_weight + starboard_weight

    if lr_total == 0:
        port_ratio = EVEN_SPLIT_PCT
        starboard_ratio = EVEN_SPLIT_PCT
    else:
        port_ratio = safe_divide(port_weight, lr_total, default=0.5) * 100
        starboard_ratio = 100 - port_ratio

    diff = port_ratio - starboard_ratio

    return LeftRightDistribution(
        port_weight=port_weight,
        starboard_weight=starboard_weight,
        center_weight=totals[Side.CENTER],
        port_ratio=port_ratio,
        starboard_ratio=starboard_ratio,
        diff=diff,
        status=balance_status(diff),
    )


# =============================================================================
# CREW / SUMMARY
# =============================================================================

def compute_crew_composition(
    layout: BoatLayout,
    athletes: AthleteSource,
    lineup: Lineup,
) -> CrewComposition:
    """Count the seated crew by gender (case-insensitive)."""
    male = female = other = 0
    for _seat, athlete, _weight in resolve_assignments(layout, athletes, lineup):
        gender = (athlete.gender or "").strip().lower()
        if gender == "male":
            male += 1
        elif gender == "female":
            female += 1
        else:
            other += 1
    return CrewComposition(male=male, female=female, other=other)


def compute_balance_summary(
    layout: BoatLayout,
    athletes: AthleteSource,
    lineup: Lineup,
) -> BalanceSummary:
    """Run every balance computation for one lineup tier."""
    athlete_by_id = _athlete_index(athletes)

    summary = BalanceSummary(
        center_of_gravity=compute_center_of_gravity(layout, athlete_by_id, lineup),
        left_right=compute_left_right_distribution(layout, athlete_by_id, lineup),
        seat_moments=compute_seat_moments_for_lineup(layout, athlete_by_id, lineup),
        crew=compute_crew_composition(layout, athlete_by_id, lineup),
    )

    logger.debug(
        f"Balance computed for {lineup.boat_layout_id}: "
        f"CG={summary.center_of_gravity.x_cg:.3f}, "
        f"total={summary.center_of_gravity.total_weight:.1f}kg, "
        f"split={summary.left_right.port_ratio:.1f}/{summary.left_right.starboard_ratio:.1f} "
        f"({summary.left_right.status_label})"
    )
    return summary
