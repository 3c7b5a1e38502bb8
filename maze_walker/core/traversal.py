import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from maze_walker.config import STEP_BUDGET_FACTOR
from maze_walker.core.grid import CellState, Grid
from maze_walker.algo.navigator import Navigator, StepResult

logger = logging.getLogger(__name__)


@dataclass
class TraversalResult:
    reached_exit: bool
    stats: Dict[str, int]


class TraversalRunner:
    """
    Headless driver: steps a Navigator until it stands on the grid's exit
    or the step budget runs out, recording explored and dead-end cells.
    """

    def __init__(self, grid: Grid, navigator: Navigator, max_steps: Optional[int] = None):
        self.grid = grid
        self.navigator = navigator
        if max_steps is None:
            max_steps = STEP_BUDGET_FACTOR * grid.size * grid.size
        self.max_steps = max_steps

    @property
    def at_exit(self) -> bool:
        return self.navigator.is_at(*self.grid.exit_cell)

    @property
    def budget_exhausted(self) -> bool:
        return self.navigator.steps >= self.max_steps

    @property
    def finished(self) -> bool:
        return self.at_exit or self.budget_exhausted

    def step(self) -> StepResult:
        result = self.navigator.step_once(self.grid)
        cell = self.grid.get_cell(*result.origin)
        if cell is not None:
            cell.set_state(CellState.DEADEND if result.is_backtrack else CellState.EXPLORED)
        return result

    def run(self) -> Iterator[StepResult]:
        while not self.finished:
            yield self.step()

        if self.at_exit:
            logger.info("Exit reached after %d steps", self.navigator.steps)
        else:
            logger.warning("Step budget of %d exhausted before reaching the exit", self.max_steps)

    def run_all(self) -> TraversalResult:
        for _ in self.run():
            pass
        return TraversalResult(self.at_exit, self.navigator.get_stats())

    def reset(self):
        """Puts the navigator back on the start cell and clears cell states."""
        self.grid.reset()
        nav = self.navigator
        nav.reset(*self.grid.start_cell, strategy=nav.strategy)
        nav.determine_initial_direction(self.grid)
