from maze_walker.core.grid import Grid

class MazeStats:
    @staticmethod
    def popcount_walls(val: int) -> int:
        c = 0
        if val & Grid.NORTH: c += 1
        if val & Grid.EAST: c += 1
        if val & Grid.SOUTH: c += 1
        if val & Grid.WEST: c += 1
        return c

    @staticmethod
    def calculate(grid: Grid):
        """
        Classifies every cell by its wall count.
        3 walls = dead end, 2 = corridor (or bend), 0-1 = intersection.
        A lone cell of a 1x1 grid has 4 walls and is counted nowhere.
        """
        dead_ends = 0
        intersections = 0
        corridors = 0

        for val in grid.cells:
            walls = MazeStats.popcount_walls(val)
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1

        total = grid.size * grid.size
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "open_walls": grid.open_wall_count(),
        }
