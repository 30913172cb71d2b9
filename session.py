# session.py
import time
from typing import Callable, Optional

# Import from other project modules
import constants as const
from grid_core import Cell, Maze
from maze_path import MazePath
from solver import solve


class MazeGame:
    """
    One timed attempt at solving a maze by dragging a path through it.

    Holds all per-game state (pointer state, path, timing, outcome) so event
    handlers only need a reference to the game they belong to. The path
    starts at the top-left cell. A drawer, if given, needs draw_cell (see
    MazePath) and draw_maze(maze_path) for redrawing the solution.
    """

    def __init__(
        self,
        maze: Maze,
        drawer=None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.maze = maze
        self.drawer = drawer
        self._clock = clock
        self.maze_path = MazePath(maze, drawer)
        self.maze_path.add(maze.origin)
        self.is_pointer_down = False
        self.solved = False
        self.gave_up = False
        self.start_time = clock()
        self.finish_time: Optional[float] = None

    @property
    def is_over(self) -> bool:
        return self.solved or self.gave_up

    def pointer_down(self):
        self.is_pointer_down = True

    def pointer_up(self):
        self.is_pointer_down = False

    def elapsed(self) -> float:
        """Seconds since the game started, frozen once the game is over."""
        end = self.finish_time if self.finish_time is not None else self._clock()
        return end - self.start_time

    def point_at(self, row: int, column: int) -> bool:
        """
        Handles the pointer moving over a cell during a drag.

        Pointing at a cell already on the path cuts the path back to it.
        Pointing at an open cell next to a path cell cuts the path back to
        that neighbour first. The cell is then appended if it can be.
        Returns True if this move completed the maze.
        """
        if not self.is_pointer_down or self.is_over:
            return False

        cell = self.maze.get_cell(row, column)
        if cell is None or not cell.is_open():
            return False

        path = self.maze_path
        if path.is_in_path(cell):
            path.remove(path.get_cell(path.get_position(cell) + 1))
        else:
            for neighbour in self.maze.neighbours(cell):
                position = path.get_position(neighbour)
                if position != const.NOT_IN_PATH:
                    path.remove(path.get_cell(position + 1))

        path.add(cell)

        if cell is self.maze.destination and path.is_complete():
            self.solved = True
            self.finish_time = self._clock()
            return True
        return False

    def point_at_cell(self, cell: Cell) -> bool:
        return self.point_at(cell.row, cell.column)

    def give_up(self) -> float:
        """
        Ends the game and replaces the user's path with the solver's.
        Returns the seconds spent before giving up.
        """
        if not self.is_over:
            self.gave_up = True
            self.finish_time = self._clock()
            self.maze_path = solve(self.maze)
            if self.drawer is not None:
                self.drawer.draw_maze(self.maze_path)
        return self.elapsed()
