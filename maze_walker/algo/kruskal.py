from typing import Iterator, List, Tuple
from maze_walker.core.grid import Grid
from maze_walker.core.union_find import DisjointSet
from maze_walker.algo.base import Generator

class KruskalAlgorithm(Generator):
    def run(self) -> Iterator[str]:
        grid = self.grid
        size = grid.size
        sets = DisjointSet(size * size)

        for row in range(size):
            for col in range(size):
                grid.set_visited(row, col)

        # Every inner wall once: (row, col, dir_bit) with EAST or SOUTH
        walls: List[Tuple[int, int, int]] = []
        for row in range(size):
            for col in range(size):
                if col < size - 1:
                    walls.append((row, col, Grid.EAST))
                if row < size - 1:
                    walls.append((row, col, Grid.SOUTH))

        self.rng.shuffle(walls)
        target = size * size - 1

        for row, col, dir_bit in walls:
            if self.step_count == target:
                break
            a = row * size + col
            b = a + 1 if dir_bit == Grid.EAST else a + size
            if sets.union(a, b):
                grid.carve_path(row, col, dir_bit)
                self.step_count += 1

                if self.step_count % 100 == 0:
                    yield f"Components: {sets.components}"

        yield "Done"
