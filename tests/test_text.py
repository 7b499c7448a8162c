import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_engine.core.grid import Direction, Grid
from maze_engine.algo.dfs import RecursiveBacktracker
from maze_engine.viz.text import render_ascii

class TestAsciiRenderer(unittest.TestCase):
    def test_unvisited_grid(self):
        text = render_ascii(Grid(2).view())
        self.assertEqual(text, (
            "+--+--+\n"
            "|##|##|\n"
            "+--+--+\n"
            "|##|##|\n"
            "+--+--+\n"
        ))

    def test_carved_passage(self):
        grid = Grid(2)
        a, b = grid.cell(0, 0), grid.cell(1, 0)
        grid.remove_wall(a, Direction.EAST)
        grid.remove_wall(b, Direction.WEST)
        a.visited = b.visited = True
        text = render_ascii(grid.view(), stack=[(1, 0)])
        self.assertEqual(text.splitlines()[1], "|   ..|")

    def test_shape(self):
        view = RecursiveBacktracker(6, seed=1).generate()
        lines = render_ascii(view).splitlines()
        self.assertEqual(len(lines), 2 * 6 + 1)
        self.assertTrue(all(len(line) == 3 * 6 + 1 for line in lines))
        self.assertNotIn("#", "".join(lines))

if __name__ == '__main__':
    unittest.main()
