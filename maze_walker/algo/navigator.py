import logging
import random
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Dict, Optional, Set, Tuple

from maze_walker.config import DEFAULT_PATH_CAPACITY
from maze_walker.core.grid import Grid

logger = logging.getLogger(__name__)


class Heading(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, tag) -> "Heading":
        """Maps a tag (enum member or string) to a Heading, defaulting to UP."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            logger.debug("Unknown heading %r, falling back to %s", tag, cls.UP.value)
            return cls.UP

    @property
    def left(self) -> "Heading":
        return _LEFT_OF[self]

    @property
    def right(self) -> "Heading":
        return _RIGHT_OF[self]

    @property
    def back(self) -> "Heading":
        return _BACK_OF[self]

    @property
    def wall_bit(self) -> int:
        return _WALL_BIT[self]


_LEFT_OF = {Heading.UP: Heading.LEFT, Heading.LEFT: Heading.DOWN,
            Heading.DOWN: Heading.RIGHT, Heading.RIGHT: Heading.UP}
_RIGHT_OF = {Heading.UP: Heading.RIGHT, Heading.RIGHT: Heading.DOWN,
             Heading.DOWN: Heading.LEFT, Heading.LEFT: Heading.UP}
_BACK_OF = {Heading.UP: Heading.DOWN, Heading.DOWN: Heading.UP,
            Heading.LEFT: Heading.RIGHT, Heading.RIGHT: Heading.LEFT}
_WALL_BIT = {Heading.UP: Grid.NORTH, Heading.RIGHT: Grid.EAST,
             Heading.DOWN: Grid.SOUTH, Heading.LEFT: Grid.WEST}


class Strategy(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    FORWARD = "forward"
    RANDOM = "random"

    @classmethod
    def parse(cls, tag) -> "Strategy":
        """Maps a tag (enum member or string) to a Strategy, defaulting to LEFT."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            logger.debug("Unknown strategy %r, falling back to %s", tag, cls.LEFT.value)
            return cls.LEFT


@dataclass(frozen=True)
class PathEntry:
    row: int
    col: int
    was_dead_end: bool


@dataclass(frozen=True)
class StepResult:
    origin: Tuple[int, int]
    destination: Tuple[int, int]
    heading: Heading
    is_backtrack: bool


class HeadingStrategy(ABC):
    @abstractmethod
    def choose(self, navigator: "Navigator", grid: Grid) -> Heading:
        """Picks the next heading from the current cell."""
        pass


class PriorityStrategy(HeadingStrategy):
    """Scans headings relative to the current one, reversing only when all are blocked."""

    # Relative turns as Heading property names
    order: Tuple[str, ...] = ()

    def choose(self, navigator: "Navigator", grid: Grid) -> Heading:
        heading = navigator.heading
        for turn in self.order:
            candidate = heading if turn == "forward" else getattr(heading, turn)
            if navigator.can_move(candidate, grid):
                return candidate
        return heading.back


class LeftHandStrategy(PriorityStrategy):
    order = ("left", "forward", "right")


class RightHandStrategy(PriorityStrategy):
    order = ("right", "forward", "left")


class ForwardStrategy(PriorityStrategy):
    # Can circle forever on some layouts, accepted as-is
    order = ("forward", "right", "left")


class RandomStrategy(HeadingStrategy):
    def choose(self, navigator: "Navigator", grid: Grid) -> Heading:
        heading = navigator.heading
        available = [h for h in (heading.left, heading, heading.right)
                     if navigator.can_move(h, grid)]
        if not available:
            return heading.back
        return navigator.rng.choice(available)


STRATEGIES: Dict[Strategy, HeadingStrategy] = {
    Strategy.LEFT: LeftHandStrategy(),
    Strategy.RIGHT: RightHandStrategy(),
    Strategy.FORWARD: ForwardStrategy(),
    Strategy.RANDOM: RandomStrategy(),
}


class Navigator:
    """
    Agent walking a maze one cell per step using only the walls around it.

    The path log is a diagnostic buffer: path_capacity=None keeps every entry,
    0 disables it, a positive value keeps only the most recent entries.
    """

    def __init__(self, start_row: int, start_col: int, heading=Heading.UP,
                 strategy=Strategy.LEFT, rng: Optional[random.Random] = None,
                 seed: int = None, path_capacity: Optional[int] = DEFAULT_PATH_CAPACITY):
        if path_capacity is not None and path_capacity < 0:
            raise ValueError(f"path_capacity must be None or >= 0, got {path_capacity}")
        self.rng = rng if rng is not None else random.Random(seed)
        self.path_capacity = path_capacity
        self.visited_cells: Set[Tuple[int, int]] = set()
        self.path: Deque[PathEntry] = deque(maxlen=path_capacity)
        self.reset(start_row, start_col, heading, strategy)

    def reset(self, row: int, col: int, heading=Heading.UP, strategy=Strategy.LEFT):
        self.row = row
        self.col = col
        self.heading = Heading.parse(heading)
        self.strategy = Strategy.parse(strategy)
        self.visited_cells.clear()
        self.path.clear()
        self.steps = 0
        self.dead_ends = 0
        self.backtrack_count = 0
        self.mark_visited(row, col)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def is_at(self, row: int, col: int) -> bool:
        return self.row == row and self.col == col

    def mark_visited(self, row: int, col: int):
        self.visited_cells.add((row, col))

    def has_visited(self, row: int, col: int) -> bool:
        return (row, col) in self.visited_cells

    def next_cell(self, heading: Heading) -> Tuple[int, int]:
        bit = heading.wall_bit
        return self.row + Grid.DR[bit], self.col + Grid.DC[bit]

    def can_move(self, heading: Heading, grid: Grid) -> bool:
        nr, nc = self.next_cell(heading)
        if not grid.in_bounds(nr, nc):
            return False
        return not grid.has_wall(self.row, self.col, heading.wall_bit)

    def determine_initial_direction(self, grid: Grid) -> Heading:
        # Face the exit side when possible
        for heading in (Heading.UP, Heading.LEFT, Heading.RIGHT, Heading.DOWN):
            if self.can_move(heading, grid):
                self.heading = heading
                return heading
        # Enclosed cell, nothing to face
        return Heading.UP

    def next_heading(self, grid: Grid) -> Heading:
        return STRATEGIES[self.strategy].choose(self, grid)

    def step_once(self, grid: Grid) -> StepResult:
        next_heading = self.next_heading(grid)
        is_backtrack = next_heading == self.heading.back

        if is_backtrack:
            self.dead_ends += 1
            self.backtrack_count += 1

        if self.path_capacity != 0:
            self.path.append(PathEntry(self.row, self.col, is_backtrack))
        self.steps += 1

        origin = (self.row, self.col)
        self.heading = next_heading
        self.row, self.col = self.next_cell(next_heading)
        self.mark_visited(self.row, self.col)

        return StepResult(origin, (self.row, self.col), next_heading, is_backtrack)

    def get_stats(self) -> Dict[str, int]:
        return {
            "steps": self.steps,
            "dead_ends": self.dead_ends,
            "backtrack_count": self.backtrack_count,
        }
