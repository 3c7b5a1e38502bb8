from typing import List, Optional
from maze_walker.core.grid import CellState, Grid

AGENT_GLYPHS = {"up": "^", "down": "v", "left": "<", "right": ">"}
STATE_GLYPHS = {CellState.UNEXPLORED: " ", CellState.EXPLORED: ".", CellState.DEADEND: "x"}

def render_ascii(grid: Grid, navigator=None) -> str:
    """
    Draws the maze as text, one 3-char wide slot per cell:

        +---+---+
        | S     |
        +---+---+
    """
    size = grid.size
    lines: List[str] = []

    for row in range(size):
        top = ["+"]
        mid = ["|" if grid.has_wall(row, 0, Grid.WEST) else " "]
        for col in range(size):
            top.append("---" if grid.has_wall(row, col, Grid.NORTH) else "   ")
            top.append("+")
            mid.append(f" {cell_glyph(grid, row, col, navigator)} ")
            mid.append("|" if grid.has_wall(row, col, Grid.EAST) else " ")
        lines.append("".join(top))
        lines.append("".join(mid))

    bottom = ["+"]
    for col in range(size):
        bottom.append("---" if grid.has_wall(size - 1, col, Grid.SOUTH) else "   ")
        bottom.append("+")
    lines.append("".join(bottom))
    return "\n".join(lines)

def cell_glyph(grid: Grid, row: int, col: int, navigator: Optional[object] = None) -> str:
    if navigator is not None and navigator.is_at(row, col):
        return AGENT_GLYPHS[navigator.heading.value]
    if (row, col) == grid.exit_cell:
        return "E"
    if (row, col) == grid.start_cell:
        return "S"
    return STATE_GLYPHS[grid.get_cell(row, col).state]
