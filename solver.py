# solver.py
from collections import deque
from typing import Dict, List, Optional, Tuple

import numpy as np

# Import from other project modules
from grid_core import Cell, Maze
from maze_path import MazePath


def _breadth_first_search(maze: Maze) -> Tuple[Dict[Tuple[int, int], Cell], bool]:
    """
    Runs BFS over open cells from the origin until the destination is
    discovered. Returns the parent map and whether the destination was reached.
    """
    origin = maze.origin
    destination = maze.destination
    came_from: Dict[Tuple[int, int], Cell] = {}
    if not origin.is_open():
        return came_from, False
    if origin is destination:
        return came_from, True

    visited = np.zeros((maze.rows, maze.columns), dtype=bool)
    visited[origin.row, origin.column] = True
    frontier = deque([origin])

    while frontier:
        current_cell = frontier.popleft()
        for neighbour in maze.neighbours(current_cell):
            if neighbour.is_open() and not visited[neighbour.row, neighbour.column]:
                visited[neighbour.row, neighbour.column] = True
                came_from[neighbour.coords] = current_cell
                if neighbour is destination:
                    return came_from, True
                frontier.append(neighbour)

    return came_from, False


def solve(maze: Maze, drawer=None) -> MazePath:
    """
    Finds a shortest path from the top-left to the bottom-right cell using
    Breadth-First Search.

    If the destination is unreachable the returned path holds only the
    origin and is therefore not complete; callers should check
    is_complete().
    """
    print(f"--- Solving {maze!r} (BFS) ---")
    came_from, path_found = _breadth_first_search(maze)
    maze_path = MazePath(maze, drawer)

    if not path_found:
        print("  Path not found!")
        maze_path.add(maze.origin)
        return maze_path

    # Reconstruct path, stopping at the first cell without a parent
    path_cells: List[Cell] = []
    current: Optional[Cell] = maze.destination
    while current is not None:
        path_cells.append(current)
        current = came_from.get(current.coords)
    path_cells.reverse()

    for cell in path_cells:
        maze_path.add(cell)

    print(f"  Path found! Length: {len(maze_path)} cells.")
    return maze_path


def shortest_path_length(maze: Maze) -> int:
    """Returns the number of moves on a shortest route, or -1 if there is none."""
    came_from, path_found = _breadth_first_search(maze)
    if not path_found:
        return -1
    moves = 0
    current = maze.destination
    while current is not maze.origin:
        current = came_from[current.coords]
        moves += 1
    return moves
