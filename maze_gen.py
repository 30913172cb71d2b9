# maze_gen.py
from typing import Optional, Union

import numpy as np

# Import from other project modules
import constants as const
from grid_core import Cell, Maze
from priority_queue import PriorityQueue

RandomSource = Union[None, int, np.random.Generator]


def generate_weights(rows: int, columns: int, rng: RandomSource = None) -> np.ndarray:
    """
    Returns a rows x columns array holding a random permutation of
    0 .. rows * columns - 1, one weight per cell.

    The permutation is a Fisher-Yates shuffle over the linear index
    row * columns + column.
    """
    rng = np.random.default_rng(rng)
    size = rows * columns
    weights = np.arange(size, dtype=np.int64)
    for i in range(size - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        weights[i], weights[j] = weights[j], weights[i]
    return weights.reshape(rows, columns)


def update_queue(
    maze: Maze, cell: Cell, queue: PriorityQueue, weights: np.ndarray
) -> int:
    """
    Inserts the closed neighbours of the given cell into the queue, keyed by
    their weights. Returns the number of walls inserted.
    """
    inserted = 0
    for neighbour in maze.neighbours(cell):
        if not neighbour.is_open():
            queue.insert(neighbour, int(weights[neighbour.row, neighbour.column]))
            inserted += 1
    return inserted


def generate_maze(
    maze: Maze,
    rng: RandomSource = None,
    loop_probability: float = const.LOOP_PROBABILITY,
):
    """
    Carves passages into the maze skeleton using a randomized Prim's algorithm.

    Walls are taken from a priority queue in order of their random weight.
    A wall with an unvisited open cell on one side is knocked down and that
    cell's walls join the queue. A wall whose open sides were both visited
    already is knocked down with probability loop_probability, which adds
    the occasional cycle. The maze is frozen afterwards.
    """
    if maze.is_frozen():
        raise RuntimeError(f"{maze!r} has already been generated.")

    print(f"--- Starting Maze Generation (Randomized Prim's, {maze.rows}x{maze.columns}) ---")
    rng = np.random.default_rng(rng)
    weights = generate_weights(maze.rows, maze.columns, rng)
    queue: PriorityQueue[Cell] = PriorityQueue()
    visited = np.zeros((maze.rows, maze.columns), dtype=bool)

    visited[0, 0] = True
    update_queue(maze, maze.origin, queue, weights)

    carved = 0
    loops = 0
    while queue:
        wall = queue.remove_min()
        next_cell: Optional[Cell] = None

        for neighbour in maze.neighbours(wall):
            # A wall separates at most one unvisited open cell from the
            # visited region, so the first match is the only one.
            if neighbour.is_open() and not visited[neighbour.row, neighbour.column]:
                next_cell = neighbour
                break

        if next_cell is not None:
            wall.set_open(True)
            visited[wall.row, wall.column] = True
            visited[next_cell.row, next_cell.column] = True
            update_queue(maze, next_cell, queue, weights)
            carved += 1
        elif not wall.is_open() and rng.random() < loop_probability:
            wall.set_open(True)
            visited[wall.row, wall.column] = True
            loops += 1

    maze.freeze()
    print(
        f"--- Maze Generation Complete: carved {carved} walls, {loops} loops, "
        f"{maze.count_open()}/{maze.size()} cells open. ---"
    )


def create_maze(
    rows: int = const.DEFAULT_ROWS,
    columns: int = const.DEFAULT_COLUMNS,
    seed: RandomSource = None,
    loop_probability: float = const.LOOP_PROBABILITY,
) -> Maze:
    """Builds a maze of the given size and carves it."""
    maze = Maze(rows, columns)
    generate_maze(maze, seed, loop_probability)
    return maze
