from typing import Iterator, List, Tuple
from maze_walker.algo.base import Generator

class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        # Random seed cell
        start_row, start_col = self.random_cell()
        self.grid.set_visited(start_row, start_col)

        # Stack of (row, col)
        stack: List[Tuple[int, int]] = [(start_row, start_col)]

        while stack:
            cr, cc = stack[-1]

            # Find unvisited neighbors
            neighbors = []
            for nr, nc, dir_bit in self.grid.get_neighbors(cr, cc):
                if not self.grid.is_visited(nr, nc):
                    neighbors.append((nr, nc, dir_bit))

            if neighbors:
                # Choose random neighbor
                nr, nc, dir_bit = self.rng.choice(neighbors)

                # Carve
                self.grid.carve_path(cr, cc, dir_bit)
                self.grid.set_visited(nr, nc)

                stack.append((nr, nc))
                self.step_count += 1

                # Yield every N steps to keep UI responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack
                stack.pop()

        yield "Done"
