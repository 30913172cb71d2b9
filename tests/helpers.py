import os
import sys
from collections import deque

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from grid_core import Maze


def open_maze(rows, columns, closed=()):
    """Builds an ungenerated maze with every cell open except the given ones."""
    maze = Maze(rows, columns)
    for cell in maze.get_all_cells():
        cell.set_open(cell.coords not in closed)
    return maze


def bfs_distances(maze):
    """Independent BFS over open cells from (0, 0): coords -> hop count."""
    if not maze.is_open(0, 0):
        return {}
    distances = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < maze.rows and 0 <= nc < maze.columns \
                    and maze.is_open(nr, nc) and (nr, nc) not in distances:
                distances[(nr, nc)] = distances[(r, c)] + 1
                queue.append((nr, nc))
    return distances


class RecordingDrawer:
    def __init__(self):
        self.calls = []
        self.full_redraws = []

    def draw_cell(self, row, column, maze_path=None):
        self.calls.append((row, column, maze_path is not None))

    def draw_maze(self, maze_path=None):
        self.full_redraws.append(maze_path)
