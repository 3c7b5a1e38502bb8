import logging
import random
from array import array
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


class CellState(str, Enum):
    UNEXPLORED = "unexplored"
    EXPLORED = "explored"
    DEADEND = "deadend"


class Algorithm(str, Enum):
    PRIM = "prim"
    BACKTRACKING = "backtracking"
    KRUSKAL = "kruskal"

    @classmethod
    def parse(cls, tag) -> "Algorithm":
        """Maps a tag (enum member or string) to an Algorithm, defaulting to PRIM."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            logger.debug("Unknown algorithm %r, falling back to %s", tag, cls.PRIM.value)
            return cls.PRIM


class Grid:
    # Bitmask Constants
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # Flags
    VISITED  = 0b00010000
    EXPLORED = 0b00100000
    DEADEND  = 0b01000000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST
    STATE_MASK = EXPLORED | DEADEND

    # Direction Helpers (row, col deltas)
    DR = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    DC = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    # Public wall names
    WALL_BITS = {"top": NORTH, "right": EAST, "bottom": SOUTH, "left": WEST}

    STATE_BITS = {
        CellState.UNEXPLORED: 0,
        CellState.EXPLORED: EXPLORED,
        CellState.DEADEND: DEADEND,
    }

    __slots__ = ('size', 'cells', 'algorithm', 'start_cell', 'exit_cell')

    def __init__(self, size: int, algorithm=Algorithm.PRIM):
        if not isinstance(size, int) or size <= 0:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")
        self.size = size
        self.algorithm = Algorithm.parse(algorithm)
        # Bottom-left start, top-right exit
        self.start_cell = (size - 1, 0)
        self.exit_cell = (0, size - 1)
        # Initialize with all walls present (value 15)
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (size * size))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_index(self, row: int, col: int) -> int:
        if self.in_bounds(row, col):
            return row * self.size + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def get_cell(self, row: int, col: int) -> Optional["Cell"]:
        """Returns a Cell view, or None for out-of-bounds coordinates."""
        if not self.in_bounds(row, col):
            return None
        return Cell(row, col, grid=self)

    def get_cell_walls(self, row: int, col: int) -> Optional[Dict[str, bool]]:
        cell = self.get_cell(row, col)
        return cell.walls if cell else None

    def carve_path(self, row: int, col: int, dir_bit: int):
        """
        Removes the wall between cell (row, col) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        if dir_bit not in self.OPPOSITE:
            return
        r2 = row + self.DR[dir_bit]
        c2 = col + self.DC[dir_bit]
        if not (self.in_bounds(row, col) and self.in_bounds(r2, c2)):
            return # Cannot carve into void

        self.cells[row * self.size + col] &= ~dir_bit
        self.cells[r2 * self.size + c2] &= ~self.OPPOSITE[dir_bit]

    def remove_wall(self, row: int, col: int, dir_bit: int):
        """
        Clears a wall of one cell. The neighbor's facing wall goes with it,
        border walls only touch this cell.
        """
        if dir_bit not in self.OPPOSITE or not self.in_bounds(row, col):
            return
        r2 = row + self.DR[dir_bit]
        c2 = col + self.DC[dir_bit]
        if self.in_bounds(r2, c2):
            self.carve_path(row, col, dir_bit)
        else:
            self.cells[row * self.size + col] &= ~dir_bit

    def remove_between_walls(self, cell_a: "Cell", cell_b: "Cell"):
        dir_bit = self.direction_between(cell_a.row, cell_a.col, cell_b.row, cell_b.col)
        if dir_bit:
            self.carve_path(cell_a.row, cell_a.col, dir_bit)

    @staticmethod
    def direction_between(r1: int, c1: int, r2: int, c2: int) -> int:
        """Direction bit leading from (r1, c1) to (r2, c2), 0 if not 4-adjacent."""
        dr, dc = r2 - r1, c2 - c1
        if abs(dr) + abs(dc) != 1:
            return 0
        if dr == 1: return Grid.SOUTH
        if dr == -1: return Grid.NORTH
        if dc == 1: return Grid.EAST
        return Grid.WEST

    def has_wall(self, row: int, col: int, dir_bit: int) -> bool:
        return (self.cells[row * self.size + col] & dir_bit) != 0

    def is_valid_path(self, r1: int, c1: int, r2: int, c2: int) -> bool:
        if not (self.in_bounds(r1, c1) and self.in_bounds(r2, c2)):
            return False
        dir_bit = self.direction_between(r1, c1, r2, c2)
        if not dir_bit:
            return False
        return not self.has_wall(r1, c1, dir_bit)

    def set_visited(self, row: int, col: int, visited: bool = True):
        idx = row * self.size + col
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, row: int, col: int) -> bool:
        return (self.cells[row * self.size + col] & self.VISITED) != 0

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nrow, ncol, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls (that's for pathfinding).
        """
        # North
        if row > 0:
            yield (row - 1, col, self.NORTH)
        # East
        if col < self.size - 1:
            yield (row, col + 1, self.EAST)
        # South
        if row < self.size - 1:
            yield (row + 1, col, self.SOUTH)
        # West
        if col > 0:
            yield (row, col - 1, self.WEST)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for neighbors that are NOT blocked by a wall.
        """
        for nr, nc, dir_bit in self.get_neighbors(row, col):
            if not self.has_wall(row, col, dir_bit):
                yield (nr, nc)

    def open_wall_count(self) -> int:
        """Number of open wall pairs between in-bounds cells."""
        count = 0
        for row in range(self.size):
            for col in range(self.size):
                val = self.cells[row * self.size + col]
                if col < self.size - 1 and not (val & self.EAST):
                    count += 1
                if row < self.size - 1 and not (val & self.SOUTH):
                    count += 1
        return count

    def reset(self):
        """Clears visited flags and exploration states, walls are kept."""
        keep = ~(self.VISITED | self.STATE_MASK) & 0xFF
        for i in range(len(self.cells)):
            self.cells[i] &= keep

    def generate(self, algorithm=None, rng: Optional[random.Random] = None, seed: int = None):
        """Rebuilds every wall, then carves a perfect maze in place."""
        from maze_walker.algo.registry import create_generator

        if algorithm is not None:
            self.algorithm = Algorithm.parse(algorithm)
        self.reset()
        for i in range(len(self.cells)):
            self.cells[i] |= self.ALL_WALLS

        logger.debug("Generating %dx%d maze with %s", self.size, self.size, self.algorithm.value)
        generator = create_generator(self, self.algorithm, rng=rng, seed=seed)
        generator.run_all()
        return generator


class Cell:
    """
    A single maze cell. Cells handed out by a Grid are views over the grid's
    byte array, a Cell built on its own keeps a private byte.
    """

    __slots__ = ('row', 'col', '_grid', '_store', '_idx')

    def __init__(self, row: int, col: int, grid: Grid = None):
        self.row = row
        self.col = col
        self._grid = grid
        if grid is not None:
            self._store = grid.cells
            self._idx = grid.get_index(row, col)
        else:
            self._store = array('B', [Grid.ALL_WALLS])
            self._idx = 0

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        if self._grid is not None:
            return self._grid is other._grid and (self.row, self.col) == (other.row, other.col)
        return self is other

    def __hash__(self):
        return hash((id(self._grid), self.row, self.col))

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, walls={self.wall_mask:04b}, state={self.state.value})"

    @property
    def wall_mask(self) -> int:
        return self._store[self._idx] & Grid.ALL_WALLS

    @property
    def walls(self) -> Dict[str, bool]:
        val = self._store[self._idx]
        return {name: (val & bit) != 0 for name, bit in Grid.WALL_BITS.items()}

    def remove_wall(self, direction: str):
        dir_bit = Grid.WALL_BITS.get(direction)
        if dir_bit is None:
            return
        if self._grid is not None:
            self._grid.remove_wall(self.row, self.col, dir_bit)
        else:
            self._store[self._idx] &= ~dir_bit

    def has_wall(self, direction: str) -> bool:
        dir_bit = Grid.WALL_BITS.get(direction)
        if dir_bit is None:
            return False
        return (self._store[self._idx] & dir_bit) != 0

    @property
    def visited(self) -> bool:
        return (self._store[self._idx] & Grid.VISITED) != 0

    def mark_visited(self):
        self._store[self._idx] |= Grid.VISITED

    @property
    def state(self) -> CellState:
        val = self._store[self._idx]
        if val & Grid.DEADEND:
            return CellState.DEADEND
        if val & Grid.EXPLORED:
            return CellState.EXPLORED
        return CellState.UNEXPLORED

    def set_state(self, state):
        # Anything outside the three known states is ignored
        try:
            state = CellState(state)
        except ValueError:
            return
        val = self._store[self._idx] & ~Grid.STATE_MASK & 0xFF
        self._store[self._idx] = val | Grid.STATE_BITS[state]

    def reset(self):
        self._store[self._idx] &= ~(Grid.VISITED | Grid.STATE_MASK) & 0xFF
