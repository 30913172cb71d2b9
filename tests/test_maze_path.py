import unittest

from tests.helpers import RecordingDrawer, open_maze
from grid_core import Maze
from maze_path import MazePath
import constants as const


class TestMazePathAdd(unittest.TestCase):
    def setUp(self):
        self.maze = open_maze(3, 3, closed={(1, 1)})
        self.path = MazePath(self.maze)

    def cell(self, r, c):
        return self.maze.get_cell(r, c)

    def test_first_cell_can_be_any_open_cell(self):
        self.path.add(self.cell(2, 1))
        self.assertEqual(len(self.path), 1)
        self.assertEqual(self.path.get_position(self.cell(2, 1)), 0)

    def test_closed_cell_rejected(self):
        self.path.add(self.cell(1, 1))
        self.assertEqual(len(self.path), 0)

    def test_append_requires_adjacency(self):
        self.path.add(self.cell(0, 0))
        self.path.add(self.cell(0, 2))
        self.assertEqual(len(self.path), 1)
        self.path.add(self.cell(0, 1))
        self.path.add(self.cell(0, 2))
        self.assertEqual([c.coords for c in self.path], [(0, 0), (0, 1), (0, 2)])

    def test_duplicate_add_is_noop(self):
        self.path.add(self.cell(0, 0))
        self.path.add(self.cell(0, 1))
        self.path.add(self.cell(0, 0))
        self.path.add(self.cell(0, 1))
        self.assertEqual(self.path.get_length(), 2)

    def test_cell_from_other_maze_rejected(self):
        other = open_maze(3, 3)
        self.path.add(other.get_cell(0, 0))
        self.assertEqual(len(self.path), 0)
        self.path.add(self.cell(0, 0))
        self.path.add(other.get_cell(0, 1))
        self.assertEqual(len(self.path), 1)
        self.assertEqual(self.path.get_position(other.get_cell(0, 0)), -1)
        self.assertFalse(self.path.is_in_path(other.get_cell(0, 0)))

    def test_none_is_ignored(self):
        self.path.add(None)
        self.path.remove(None)
        self.assertEqual(self.path.get_position(None), const.NOT_IN_PATH)


class TestMazePathRemove(unittest.TestCase):
    def setUp(self):
        self.maze = open_maze(3, 3, closed={(1, 1)})
        self.drawer = RecordingDrawer()
        self.path = MazePath(self.maze, self.drawer)
        for coords in [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]:
            self.path.add(self.maze.get_cell(*coords))

    def test_remove_truncates_at_position(self):
        removed = [self.maze.get_cell(*c) for c in [(0, 2), (1, 2), (2, 2)]]
        self.path.remove(self.maze.get_cell(0, 2))
        self.assertEqual(len(self.path), 2)
        for cell in removed:
            self.assertEqual(self.path.get_position(cell), -1)
        self.assertEqual(self.path.last_cell().coords, (0, 1))

    def test_removed_cells_can_be_added_again(self):
        self.path.remove(self.maze.get_cell(0, 1))
        self.path.add(self.maze.get_cell(1, 0))
        self.assertEqual([c.coords for c in self.path], [(0, 0), (1, 0)])

    def test_remove_first_cell_empties_path(self):
        self.path.remove(self.maze.get_cell(0, 0))
        self.assertEqual(len(self.path), 0)
        self.assertIsNone(self.path.last_cell())

    def test_remove_cell_not_in_path(self):
        self.path.remove(self.maze.get_cell(2, 0))
        self.assertEqual(len(self.path), 5)

    def test_drawer_notifications(self):
        self.drawer.calls.clear()
        self.path.remove(self.maze.get_cell(1, 2))
        self.assertEqual(
            self.drawer.calls,
            [(1, 2, False), (2, 2, False), (0, 2, True)],
        )
        self.drawer.calls.clear()
        self.path.add(self.maze.get_cell(1, 2))
        self.assertEqual(self.drawer.calls, [(0, 2, True), (1, 2, True)])


class TestMazePathQueries(unittest.TestCase):
    def setUp(self):
        self.maze = open_maze(2, 3)
        self.path = MazePath(self.maze)
        for coords in [(0, 0), (0, 1), (1, 1), (1, 2)]:
            self.path.add(self.maze.get_cell(*coords))

    def test_get_cell(self):
        self.assertEqual(self.path.get_cell(2).coords, (1, 1))
        self.assertIsNone(self.path.get_cell(4))
        self.assertIsNone(self.path.get_cell(-1))

    def test_is_complete(self):
        self.assertTrue(self.path.is_complete())
        self.path.remove(self.maze.get_cell(1, 2))
        self.assertFalse(self.path.is_complete())

    def test_empty_path_is_incomplete(self):
        self.assertFalse(MazePath(self.maze).is_complete())

    def test_single_cell_path(self):
        path = MazePath(self.maze)
        path.add(self.maze.get_cell(0, 0))
        self.assertFalse(path.is_complete())
        single = Maze(1, 1)
        path = MazePath(single)
        path.add(single.get_cell(0, 0))
        self.assertTrue(path.is_complete())

    def test_segment_directions(self):
        self.assertEqual(self.path.segment_directions(self.maze.get_cell(0, 0)), [const.DIR_RIGHT])
        self.assertEqual(
            self.path.segment_directions(self.maze.get_cell(0, 1)),
            [const.DIR_LEFT, const.DIR_DOWN],
        )
        self.assertEqual(self.path.segment_directions(self.maze.get_cell(1, 2)), [const.DIR_LEFT])
        self.assertEqual(self.path.segment_directions(self.maze.get_cell(0, 2)), [])

    def test_is_endpoint(self):
        self.assertTrue(self.path.is_endpoint(self.maze.get_cell(1, 2)))
        self.assertFalse(self.path.is_endpoint(self.maze.get_cell(0, 0)))


if __name__ == '__main__':
    unittest.main()
