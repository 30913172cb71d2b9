# grid_core.py
from typing import Iterator, List, Optional, Tuple

import numpy as np

# Import from other project modules
import constants as const
from utils import manhattan_distance


class InvalidDimensionsError(ValueError):
    """Raised when a maze is constructed with a zero or overflowing area."""


class Cell:
    """
    Represents a single cell in the rectangular maze grid.

    Every cell is either open or closed. An open cell can be part of a maze
    path, a closed cell is a wall. Row and column never change after
    construction; the open state only changes while the owning maze is
    being generated.
    """

    __slots__ = ("_row", "_column", "_open", "_maze")

    def __init__(self, row: int, column: int, open: bool, maze: "Maze" = None):
        if row < 0:
            raise ValueError(f"Cell row must be non-negative, got {row}.")
        if column < 0:
            raise ValueError(f"Cell column must be non-negative, got {column}.")
        self._row = row
        self._column = column
        self._open = bool(open)
        self._maze = maze  # Non-owning back-reference

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def coords(self) -> Tuple[int, int]:
        return (self._row, self._column)

    @property
    def maze(self) -> Optional["Maze"]:
        """The maze this cell belongs to (None for free-standing cells)."""
        return self._maze

    def is_open(self) -> bool:
        return self._open

    def set_open(self, open: bool):
        """Marks this cell as open or closed. Only allowed before the maze is frozen."""
        if self._maze is not None and self._maze.is_frozen():
            raise RuntimeError(
                f"Cell {self.coords} belongs to a generated maze and cannot change."
            )
        self._open = bool(open)

    def get_neighbours(self) -> List["Cell"]:
        """Returns the neighbouring cells in the owning maze."""
        if self._maze is None:
            return []
        return self._maze.neighbours(self)

    def is_neighbour(self, other: Optional["Cell"]) -> bool:
        """Checks if the other cell is adjacent to this one in the same maze."""
        if other is None or self._maze is None or other.maze is not self._maze:
            return False
        return self._maze.are_neighbours(self, other)

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"Cell({self._row},{self._column},{state})"

    def __eq__(self, other):
        return (
            isinstance(other, Cell)
            and self._row == other._row
            and self._column == other._column
            and self._open == other._open
        )

    def __hash__(self):
        return hash((self._row, self._column))


class Maze:
    """
    A rows x columns grid of open or closed cells.

    The maze owns every Cell on its board and is the only place neighbours
    are computed. A freshly constructed maze holds the skeleton pattern:
    a cell starts open when its row is even or the last row AND its
    column is even or the last column. Passages are carved by
    maze_gen.generate_maze, after which the maze is frozen.
    """

    def __init__(self, rows: int, columns: int):
        if rows < 1 or columns < 1:
            raise InvalidDimensionsError(
                f"Maze needs at least one row and one column, got {rows}x{columns}."
            )
        if rows > const.MAX_MAZE_SIZE // columns:
            raise InvalidDimensionsError(
                f"Maze size {rows}x{columns} exceeds {const.MAX_MAZE_SIZE} cells."
            )

        self._rows = rows
        self._columns = columns
        self._frozen = False
        self._board: List[List[Cell]] = self._init_board()

    def _init_board(self) -> List[List[Cell]]:
        """Creates the skeleton board of open cells separated by walls."""
        last_row = self._rows - 1
        last_column = self._columns - 1
        open_columns = [
            column % 2 == 0 or column == last_column for column in range(self._columns)
        ]
        board = []
        for row in range(self._rows):
            row_open = row % 2 == 0 or row == last_row
            board.append(
                [
                    Cell(row, column, row_open and open_columns[column], self)
                    for column in range(self._columns)
                ]
            )
        return board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def origin(self) -> Cell:
        """The top-left cell, where paths start."""
        return self._board[0][0]

    @property
    def destination(self) -> Cell:
        """The bottom-right cell, where paths end."""
        return self._board[self._rows - 1][self._columns - 1]

    def size(self) -> int:
        """Returns the total number of cells in the maze."""
        return self._rows * self._columns

    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        """Locks the open/closed pattern. Called once generation has finished."""
        self._frozen = True

    def is_open(self, row: int, column: int) -> bool:
        return self._board[row][column].is_open()

    def get_cell(self, row: int, column: int) -> Optional[Cell]:
        """Safely retrieves a cell by row and column, None when out of bounds."""
        if 0 <= row < self._rows and 0 <= column < self._columns:
            return self._board[row][column]
        return None

    def neighbours(self, cell: Cell) -> List[Cell]:
        """
        Returns the cells directly above, below, left and right of the given
        cell, clipped at the maze boundary.
        """
        row, column = cell.row, cell.column
        result = []
        for offset in (-1, 1):
            if 0 <= row + offset < self._rows:
                result.append(self._board[row + offset][column])
            if 0 <= column + offset < self._columns:
                result.append(self._board[row][column + offset])
        return result

    def are_neighbours(self, cell_one: Cell, cell_two: Cell) -> bool:
        """True iff both cells are in this maze and one step apart."""
        if self.contains(cell_one) and self.contains(cell_two):
            return manhattan_distance(cell_one.coords, cell_two.coords) == 1
        return False

    def contains(self, cell: Optional[Cell]) -> bool:
        """True iff an equal cell sits at the same position in this maze."""
        if cell is None:
            return False
        board_cell = self.get_cell(cell.row, cell.column)
        return board_cell is not None and board_cell == cell

    def get_all_cells(self) -> Iterator[Cell]:
        """Returns an iterator over all cells, row by row."""
        for row in self._board:
            yield from row

    def count_open(self) -> int:
        return sum(1 for cell in self.get_all_cells() if cell.is_open())

    def to_array(self) -> np.ndarray:
        """Returns the open/closed pattern as a rows x columns bool array."""
        return np.array(
            [[cell.is_open() for cell in row] for row in self._board], dtype=bool
        )

    def __repr__(self) -> str:
        return f"Maze({self._rows}x{self._columns})"
