# serialization.py
"""
Plain transport format for mazes.

A maze travels as {"rows": int, "columns": int, "board": [[...], ...]}
where each board entry is either a bool (open or not) or a cell record
{"row": int, "column": int, "open": bool}. Reading a payload validates
everything before a Maze is built, so a rejected payload never leaves a
half-built maze behind.
"""
import json
from typing import Any, Dict, List

# Import from other project modules
from grid_core import InvalidDimensionsError, Maze


class DeserializationError(ValueError):
    """Raised when a maze payload is malformed."""


def maze_to_dict(maze: Maze) -> Dict[str, Any]:
    """Returns the transport structure for the maze."""
    return {
        "rows": maze.rows,
        "columns": maze.columns,
        "board": maze.to_array().tolist(),
    }


def maze_to_json(maze: Maze, **json_kwargs) -> str:
    return json.dumps(maze_to_dict(maze), **json_kwargs)


def _is_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid coordinate
    return isinstance(value, int) and not isinstance(value, bool)


def _read_entry(entry: Any, row: int, column: int) -> bool:
    """Returns the open state stored in one board entry."""
    if isinstance(entry, bool):
        return entry
    if not isinstance(entry, dict):
        raise DeserializationError(
            f"Board entry at ({row}, {column}) must be a bool or a cell record."
        )
    for key in ("row", "column", "open"):
        if key not in entry:
            raise DeserializationError(
                f"Cell record at ({row}, {column}) is missing '{key}'."
            )
    entry_row, entry_column, is_open = entry["row"], entry["column"], entry["open"]
    if not _is_int(entry_row) or not _is_int(entry_column):
        raise DeserializationError(
            f"Cell record at ({row}, {column}) has non-integer coordinates."
        )
    if entry_row < 0 or entry_column < 0:
        raise DeserializationError(
            f"Cell record at ({row}, {column}) has negative coordinates."
        )
    if (entry_row, entry_column) != (row, column):
        raise DeserializationError(
            f"Cell record ({entry_row}, {entry_column}) found at position ({row}, {column})."
        )
    if not isinstance(is_open, bool):
        raise DeserializationError(
            f"Cell record at ({row}, {column}) has a non-boolean 'open' value."
        )
    return is_open


def maze_from_dict(payload: Any) -> Maze:
    """
    Rebuilds a Maze from its transport structure.

    Raises DeserializationError for any malformed payload.
    """
    if not isinstance(payload, dict):
        raise DeserializationError("Maze payload must be an object.")
    for key in ("rows", "columns", "board"):
        if key not in payload:
            raise DeserializationError(f"Maze payload is missing '{key}'.")

    rows, columns, board = payload["rows"], payload["columns"], payload["board"]
    if not _is_int(rows) or not _is_int(columns):
        raise DeserializationError("Maze 'rows' and 'columns' must be integers.")
    if not isinstance(board, list) or len(board) != rows:
        raise DeserializationError(f"Maze 'board' must be a list of {rows} rows.")

    open_states: List[List[bool]] = []
    for row, board_row in enumerate(board):
        if not isinstance(board_row, list) or len(board_row) != columns:
            raise DeserializationError(
                f"Board row {row} must be a list of {columns} entries."
            )
        open_states.append(
            [_read_entry(entry, row, column) for column, entry in enumerate(board_row)]
        )

    try:
        maze = Maze(rows, columns)
    except InvalidDimensionsError as e:
        raise DeserializationError(str(e)) from e

    for cell in maze.get_all_cells():
        cell.set_open(open_states[cell.row][cell.column])
    maze.freeze()
    return maze


def maze_from_json(text: str) -> Maze:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Maze payload is not valid JSON: {e}") from e
    return maze_from_dict(payload)
