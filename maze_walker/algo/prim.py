from typing import Iterator, List, Tuple
from maze_walker.algo.base import Generator

# (row, col) inside the tree, (row, col) on the other side
WallRecord = Tuple[int, int, int, int]

class PrimsAlgorithm(Generator):
    def run(self) -> Iterator[str]:
        grid = self.grid

        start_row, start_col = self.random_cell()
        grid.set_visited(start_row, start_col)

        # Frontier of wall records. Duplicates are allowed, a record whose
        # far side got visited in the meantime is simply discarded.
        frontier: List[WallRecord] = []
        self.add_walls(start_row, start_col, frontier)

        while frontier:
            # Pick random wall, swap remove for O(1)
            idx = self.rng.randrange(len(frontier))
            r1, c1, r2, c2 = frontier[idx]
            frontier[idx] = frontier[-1]
            frontier.pop()

            v1 = grid.is_visited(r1, c1)
            v2 = grid.is_visited(r2, c2)
            if v1 == v2:
                continue

            dir_bit = grid.direction_between(r1, c1, r2, c2)
            grid.carve_path(r1, c1, dir_bit)

            nr, nc = (r2, c2) if v1 else (r1, c1)
            grid.set_visited(nr, nc)
            self.step_count += 1
            self.add_walls(nr, nc, frontier)

            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier)}"

        yield "Done"

    def add_walls(self, row: int, col: int, frontier: List[WallRecord]):
        for nr, nc, _ in self.grid.get_neighbors(row, col):
            if not self.grid.is_visited(nr, nc):
                frontier.append((row, col, nr, nc))
