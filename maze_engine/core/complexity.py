from collections import deque
from typing import Dict, Any

from maze_engine.core.grid import Direction, GridView


class MazeAnalyzer:
    @staticmethod
    def popcount_walls(walls: int) -> int:
        c = 0
        for d in Direction:
            if walls & d.bit:
                c += 1
        return c

    @staticmethod
    def calculate_stats(view: GridView) -> Dict[str, Any]:
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        for cell in view:
            walls = MazeAnalyzer.popcount_walls(cell.walls)
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1

        total = len(view)
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def count_passages(view: GridView) -> int:
        """
        Counts carved passages between adjacent cells. Each passage is counted
        once, from its west or north side.
        """
        size = view.size
        passages = 0
        for cell in view:
            if cell.x < size - 1 and not cell.has_wall(Direction.EAST):
                passages += 1
            if cell.y < size - 1 and not cell.has_wall(Direction.SOUTH):
                passages += 1
        return passages

    @staticmethod
    def is_symmetric(view: GridView) -> bool:
        """True if every removed wall is also removed on the far side."""
        size = view.size
        rows = view.rows()
        for row in rows:
            for cell in row:
                for d in Direction:
                    nx, ny = cell.x + d.dx, cell.y + d.dy
                    if not (0 <= nx < size and 0 <= ny < size):
                        continue
                    if cell.has_wall(d) != rows[ny][nx].has_wall(d.opposite):
                        return False
        return True

    @staticmethod
    def verify_perfect(view: GridView) -> Dict[str, Any]:
        """
        Verify that a maze is perfect (fully connected, no loops).

        A perfect maze must satisfy:
        1. Connectivity: every cell reachable from (0, 0) through carved passages
        2. Acyclicity: exactly (n - 1) passages for n cells
        """
        size = view.size
        rows = view.rows()

        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            x, y = queue.popleft()
            cell = rows[y][x]
            for d in Direction:
                nx, ny = x + d.dx, y + d.dy
                if cell.has_wall(d) or not (0 <= nx < size and 0 <= ny < size):
                    continue
                if (nx, ny) not in seen:
                    seen.add((nx, ny))
                    queue.append((nx, ny))

        total_cells = size * size
        passage_count = MazeAnalyzer.count_passages(view)
        expected_passages = total_cells - 1

        is_connected = len(seen) == total_cells
        is_no_loops = passage_count == expected_passages
        is_symmetric = MazeAnalyzer.is_symmetric(view)

        return {
            "is_perfect": is_connected and is_no_loops and is_symmetric,
            "is_connected": is_connected,
            "is_no_loops": is_no_loops,
            "is_symmetric": is_symmetric,
            "visited_cells": view.visited_count(),
            "total_cells": total_cells,
            "passage_count": passage_count,
            "expected_passages": expected_passages,
        }
