from typing import List, Tuple

from maze_engine.core.grid import Cell, Direction
from maze_engine.algo.base import Generator, StepAction


class RecursiveBacktracker(Generator):
    def __init__(self, grid, seed=None, rng=None):
        super().__init__(grid, seed=seed, rng=rng)
        # Current depth-first path, bottom = start cell
        self.stack: List[Cell] = []

    def _start(self):
        # Start at (0,0)
        start = self.grid.cell(0, 0)
        start.visited = True
        self.stack.append(start)

    def _step(self) -> StepAction:
        cell = self.stack.pop()

        # Find unvisited neighbors
        candidates = []
        for direction, neighbor in zip(Direction, self.grid.neighbors(cell.x, cell.y)):
            if neighbor is not None and not neighbor.visited:
                candidates.append((direction, neighbor))

        if not candidates:
            # Backtrack
            return StepAction.BACKTRACK

        # It may still have other unvisited neighbors later
        self.stack.append(cell)

        direction, neighbor = self.rng.choice(candidates)

        # Carve
        self.grid.remove_wall(cell, direction)
        self.grid.remove_wall(neighbor, direction.opposite)
        neighbor.visited = True

        self.stack.append(neighbor)
        return StepAction.CARVE

    def _finished(self) -> bool:
        return not self.stack

    def _reset(self):
        self.stack.clear()

    def stack_cells(self) -> Tuple[Tuple[int, int], ...]:
        """(x, y) of every cell on the current path, bottom to top."""
        return tuple((c.x, c.y) for c in self.stack)
