from typing import Iterable, List, Tuple

from maze_engine.core.grid import Direction, GridView


def render_ascii(view: GridView, stack: Iterable[Tuple[int, int]] = ()) -> str:
    """
    Draws the maze as text, two characters per cell:

        +--+--+
        |  |  |
        +  +--+

    Unvisited cells are filled with '##', cells on the active path with '..'.
    """
    on_stack = set(stack)
    lines: List[str] = []

    rows = view.rows()
    for row in rows:
        top = ["+"]
        mid = []
        for cell in row:
            top.append("--+" if cell.has_wall(Direction.NORTH) else "  +")

            if cell.x == 0:
                mid.append("|" if cell.has_wall(Direction.WEST) else " ")
            if not cell.visited:
                body = "##"
            elif (cell.x, cell.y) in on_stack:
                body = ".."
            else:
                body = "  "
            mid.append(body)
            mid.append("|" if cell.has_wall(Direction.EAST) else " ")
        lines.append("".join(top))
        lines.append("".join(mid))

    # Bottom border comes from the last row's south walls
    bottom = ["+"]
    for cell in rows[-1]:
        bottom.append("--+" if cell.has_wall(Direction.SOUTH) else "  +")
    lines.append("".join(bottom))

    return "\n".join(lines) + "\n"
