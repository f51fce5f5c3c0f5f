"""
Dragonboat Lineup Session

Editor facade for one lineup being composed: owns the layout, the roster,
the assignment state and the transition engine. Balance is recomputed from
the current state on every read, so it is always in step with the last
move.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional
import logging

from ..balance.engine import compute_balance_summary
from ..balance.results import BalanceSummary
from ..bootstrap.config import DragonboatConfig, get_config
from ..core.dataclasses import Athlete, BoatLayout, Lineup
from ..core.enums import SlotTier
from ..layout.generator import LayoutGenerator
from .serialization import state_from_persisted, state_to_persisted, validate_persisted
from .slots import POOL
from .state import AssignmentState
from .transitions import Destination, MoveResult, TransitionEngine

logger = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], None]


class LineupSession:
    """
    One editing session over one lineup.

    Usage:
        session = LineupSession(roster, num_rows=10)
        session.move("a1", "row0-port")
        session.balance().left_right.status_label
        payload = session.to_persisted()
    """

    def __init__(
        self,
        athletes: Iterable[Athlete],
        config: Optional[DragonboatConfig] = None,
        num_rows: Optional[int] = None,
    ):
        self.config = config or get_config()
        layout_cfg = self.config.layout

        self._athletes: List[Athlete] = list(athletes)
        self._generator = LayoutGenerator(
            row_spacing=layout_cfg.row_spacing,
            include_drummer=layout_cfg.include_drummer,
            include_steer=layout_cfg.include_steer,
        )

        rows = layout_cfg.clamp_rows(num_rows if num_rows is not None else layout_cfg.default_rows)
        self._layout = self._generator.generate(rows)
        self._state = AssignmentState.for_layout(self._layout, num_alternates=layout_cfg.num_alternates)
        self._engine = TransitionEngine(self._state, self._athletes, strict=self.config.editor.strict_mode)
        self._listeners: List[Listener] = []

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def layout(self) -> BoatLayout:
        return self._layout

    @property
    def state(self) -> AssignmentState:
        return self._state

    @property
    def athletes(self) -> List[Athlete]:
        return list(self._athletes)

    @property
    def num_rows(self) -> int:
        return self._state.num_rows

    def pool(self) -> List[Athlete]:
        """Active athletes not seated anywhere, in roster order."""
        return self._state.pool(self._athletes)

    def set_roster(self, athletes: Iterable[Athlete]) -> None:
        self._athletes = list(athletes)
        self._engine.set_roster(self._athletes)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback receiving the persisted lineup after each change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        payload = self.to_persisted()
        for listener in list(self._listeners):
            listener(payload)

    def move(self, athlete_id: str, destination: Destination) -> MoveResult:
        """Move an athlete to a seat, a specific slot, or POOL."""
        result = self._engine.move(athlete_id, destination)
        if result.applied:
            self._notify()
        return result

    def move_to_pool(self, athlete_id: str) -> MoveResult:
        return self.move(athlete_id, POOL)

    def resize(self, num_rows: int) -> List[str]:
        """
        Change boat size (clamped to the configured range).

        Returns:
            Athlete ids returned to the pool by truncation.
        """
        rows = self.config.layout.clamp_rows(num_rows)
        if rows == self._state.num_rows:
            return []
        evicted = self._state.resize(rows)
        self._layout = self._generator.generate(rows)
        self._notify()
        return evicted

    def reset(self) -> None:
        """Empty every seat and alternate position."""
        self._state.reset()
        logger.debug("Lineup reset")
        self._notify()

    # =========================================================================
    # BALANCE
    # =========================================================================

    def lineup(self, tier: SlotTier = SlotTier.PRIMARY) -> Lineup:
        return self._state.to_lineup(self._layout.id, tier)

    def balance(self) -> BalanceSummary:
        """Balance of the race (primary) lineup."""
        return compute_balance_summary(self._layout, self._athletes, self.lineup(SlotTier.PRIMARY))

    def comparison_balance(self) -> BalanceSummary:
        """Balance of the comparison (secondary) lineup."""
        return compute_balance_summary(self._layout, self._athletes, self.lineup(SlotTier.SECONDARY))

    # =========================================================================
    # PERSISTENCE SHAPE
    # =========================================================================

    def to_persisted(self) -> Dict[str, Any]:
        return state_to_persisted(self._state)

    def load_persisted(self, data: Any) -> None:
        """
        Replace the state with a persisted lineup.

        The boat size follows the longest paddler row array in the payload,
        clamped to the configured range. Arrays are cut to that final size
        only, so a short left side never drops starboard paddlers.
        """
        layout_cfg = self.config.layout
        persisted = validate_persisted(data)
        rows = layout_cfg.clamp_rows(persisted.num_rows or layout_cfg.default_rows)
        state = state_from_persisted(
            persisted,
            include_drummer=layout_cfg.include_drummer,
            include_steer=layout_cfg.include_steer,
            num_alternates=layout_cfg.num_alternates,
            num_rows=rows,
        )

        self._state = state
        self._layout = self._generator.generate(rows)
        self._engine = TransitionEngine(self._state, self._athletes, strict=self.config.editor.strict_mode)
        logger.debug(f"Session loaded {self._layout.id} with {len(state.assigned_ids())} athletes")
        self._notify()
