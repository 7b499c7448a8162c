from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

from maze_engine.core.errors import InvalidDimension


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def bit(self) -> int:
        return 1 << self.value

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 2) % 4)

    @property
    def dx(self) -> int:
        return _DX[self.value]

    @property
    def dy(self) -> int:
        return _DY[self.value]


_DX = (0, 1, 0, -1)
_DY = (-1, 0, 1, 0)

# All walls present by default (N|E|S|W) = 15
ALL_WALLS = 0b1111


class Cell:
    __slots__ = ('_x', '_y', 'walls', 'visited')

    def __init__(self, x: int, y: int):
        self._x = x
        self._y = y
        self.walls = ALL_WALLS
        self.visited = False

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def id(self) -> str:
        return f"{self._y}_{self._x}"

    def has_wall(self, direction: Direction) -> bool:
        return (self.walls & Direction(direction).bit) != 0

    def __repr__(self):
        return f"Cell(x={self._x}, y={self._y}, walls={self.walls:04b}, visited={self.visited})"


@dataclass(frozen=True)
class CellState:
    """Immutable copy of a cell, handed out to renderers and tests."""
    x: int
    y: int
    walls: int
    visited: bool

    @property
    def id(self) -> str:
        return f"{self.y}_{self.x}"

    def has_wall(self, direction: Direction) -> bool:
        return (self.walls & Direction(direction).bit) != 0


class Grid:
    __slots__ = ('size', 'cells')

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidDimension(size)
        self.size = size
        # Row-major: cells[y][x]
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(size)] for y in range(size)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Cell:
        if self.in_bounds(x, y):
            return self.cells[y][x]
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def neighbor(self, x: int, y: int, direction: Direction) -> Optional[Cell]:
        """
        Returns the adjacent cell in 'direction', or None at the grid edge.
        """
        direction = Direction(direction)
        nx, ny = x + direction.dx, y + direction.dy
        if not self.in_bounds(nx, ny):
            return None
        return self.cells[ny][nx]

    def neighbors(self, x: int, y: int) -> List[Optional[Cell]]:
        """Four slots indexed by Direction; None where the grid ends."""
        return [self.neighbor(x, y, d) for d in Direction]

    def remove_wall(self, cell: Cell, direction: Direction):
        cell.walls &= ~Direction(direction).bit

    def reset(self):
        for row in self.cells:
            for cell in row:
                cell.walls = ALL_WALLS
                cell.visited = False

    def view(self) -> "GridView":
        return GridView(self)


class GridView:
    """
    Read-only window onto a Grid. Every accessor returns CellState copies,
    so callers cannot corrupt the wall or visited state in between steps.
    """
    __slots__ = ('_grid',)

    def __init__(self, grid: Grid):
        self._grid = grid

    @property
    def size(self) -> int:
        return self._grid.size

    def cell(self, x: int, y: int) -> CellState:
        c = self._grid.cell(x, y)
        return CellState(c.x, c.y, c.walls, c.visited)

    def rows(self) -> Tuple[Tuple[CellState, ...], ...]:
        return tuple(
            tuple(CellState(c.x, c.y, c.walls, c.visited) for c in row)
            for row in self._grid.cells
        )

    def __iter__(self) -> Iterator[CellState]:
        for row in self._grid.cells:
            for c in row:
                yield CellState(c.x, c.y, c.walls, c.visited)

    def __len__(self) -> int:
        return self._grid.size * self._grid.size

    def walls_bytes(self) -> bytes:
        """Row-major wall nibbles, one byte per cell."""
        return bytes(c.walls for row in self._grid.cells for c in row)

    def visited_count(self) -> int:
        return sum(1 for row in self._grid.cells for c in row if c.visited)
