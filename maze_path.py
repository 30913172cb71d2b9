# maze_path.py
from typing import Iterator, List, Optional

import numpy as np

# Import from other project modules
import constants as const
from grid_core import Cell, Maze
from utils import direction_between


class MazePath:
    """
    An ordered path of cells through one maze.

    The path always satisfies:
      1. No cell appears twice.
      2. Every cell is open.
      3. Consecutive cells are neighbours in the maze.
      4. Every cell belongs to the maze the path was created for.

    Positions are kept in a rows x columns index array so position and
    membership queries are O(1). Queries with cells from another maze or
    out-of-range positions return sentinels (-1 / None), never raise.

    The optional drawer is told which cells to re-render whenever the path
    changes. It only needs a draw_cell(row, column, maze_path=None) method;
    passing maze_path means the cell should be drawn with path decoration.
    """

    def __init__(self, maze: Maze, drawer=None):
        self._maze = maze
        self._drawer = drawer
        self._path: List[Cell] = []
        self._positions = np.full(
            (maze.rows, maze.columns), const.NOT_IN_PATH, dtype=np.int64
        )

    @property
    def maze(self) -> Maze:
        return self._maze

    def _belongs(self, cell: Optional[Cell]) -> bool:
        return cell is not None and cell.maze is self._maze

    def _draw(self, cell: Cell, decorated: bool = True):
        if self._drawer is not None:
            self._drawer.draw_cell(cell.row, cell.column, self if decorated else None)

    def add(self, cell: Optional[Cell]):
        """
        Appends the cell if it is open, in this path's maze, not already on
        the path and (for a non-empty path) next to the current last cell.
        Otherwise the path is left unchanged.
        """
        if not self._belongs(cell) or not cell.is_open() or self.is_in_path(cell):
            return

        if not self._path:
            self._positions[cell.row, cell.column] = 0
            self._path.append(cell)
            self._draw(cell)
            return

        last_cell = self._path[-1]
        if not self._maze.are_neighbours(last_cell, cell):
            return

        self._positions[cell.row, cell.column] = len(self._path)
        self._path.append(cell)
        self._draw(last_cell)
        self._draw(cell)

    def remove(self, cell: Optional[Cell]):
        """
        Removes the cell and every cell after it. Does nothing if the cell is
        not on the path.
        """
        if not self._belongs(cell):
            return
        position = self.get_position(cell)
        if position == const.NOT_IN_PATH:
            return

        removed = self._path[position:]
        del self._path[position:]
        for removed_cell in removed:
            self._positions[removed_cell.row, removed_cell.column] = const.NOT_IN_PATH
            self._draw(removed_cell, decorated=False)

        if self._path:
            self._draw(self._path[-1])

    def get_position(self, cell: Optional[Cell]) -> int:
        """Returns the cell's index on the path, or -1 if it is not on it."""
        if not self._belongs(cell):
            return const.NOT_IN_PATH
        return int(self._positions[cell.row, cell.column])

    def get_cell(self, position: int) -> Optional[Cell]:
        """Returns the cell at the given position, or None."""
        if 0 <= position < len(self._path):
            return self._path[position]
        return None

    def get_length(self) -> int:
        return len(self._path)

    def last_cell(self) -> Optional[Cell]:
        return self._path[-1] if self._path else None

    def is_in_path(self, cell: Optional[Cell]) -> bool:
        return self.get_position(cell) != const.NOT_IN_PATH

    def is_endpoint(self, cell: Optional[Cell]) -> bool:
        """True if the cell is the current end of the path."""
        return self._belongs(cell) and self.last_cell() is cell

    def is_complete(self) -> bool:
        """
        True iff the path is a valid route ending at the maze's bottom-right
        cell. An empty path is never complete; a single cell is complete only
        when it is both origin and destination (a 1x1 maze).
        """
        if not self._path:
            return False

        for current, following in zip(self._path, self._path[1:]):
            if not current.is_open() or not self._maze.are_neighbours(current, following):
                return False

        last_cell = self._path[-1]
        return last_cell.is_open() and last_cell is self._maze.destination

    def segment_directions(self, cell: Optional[Cell]) -> List[str]:
        """
        Returns the directions in which path segments leave the given cell:
        towards its predecessor and towards its successor on the path.
        Empty for cells that are not on the path.
        """
        position = self.get_position(cell)
        if position == const.NOT_IN_PATH:
            return []
        directions = []
        for other in (self.get_cell(position - 1), self.get_cell(position + 1)):
            if other is not None:
                direction = direction_between(cell.coords, other.coords)
                if direction is not None:
                    directions.append(direction)
        return directions

    def __len__(self) -> int:
        return len(self._path)

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._path))

    def __repr__(self) -> str:
        return f"MazePath({self._maze!r}, length={len(self._path)})"
