# visualization.py
import matplotlib

matplotlib.use("Agg")  # File output only
import matplotlib.pyplot as plt
import numpy as np
from typing import Optional, Tuple

# Import from other project modules
from grid_core import Maze
from maze_path import MazePath
import constants as const


class MazeDrawer:
    """
    Renders a maze into an RGB image with one pixel per cell.

    This is the drawer MazePath and MazeGame report changes to: draw_cell
    repaints a single cell, plain or as part of the given path.
    """

    def __init__(self, maze: Maze):
        self.maze = maze
        self.image = np.zeros((maze.rows, maze.columns, 3), dtype=float)
        self.draw_count = 0
        self.draw_maze()

    def get_maze(self) -> Maze:
        return self.maze

    def draw_maze(self, maze_path: Optional[MazePath] = None):
        """Repaints every cell."""
        self.image[...] = const.VIS_CLOSED_COLOR
        self.image[self.maze.to_array()] = const.VIS_OPEN_COLOR
        if maze_path is not None:
            for cell in maze_path:
                self.image[cell.row, cell.column] = const.VIS_PATH_COLOR
        self.draw_count += 1

    def draw_cell(self, row: int, column: int, maze_path: Optional[MazePath] = None):
        """Repaints one cell, with path colour if it is on the given path."""
        cell = self.maze.get_cell(row, column)
        if cell is None:
            return
        if maze_path is not None and maze_path.is_in_path(cell):
            color = const.VIS_PATH_COLOR
        elif cell.is_open():
            color = const.VIS_OPEN_COLOR
        else:
            color = const.VIS_CLOSED_COLOR
        self.image[row, column] = color
        self.draw_count += 1

    def _figure_size(self) -> Tuple[float, float]:
        return (
            max(2.0, self.maze.columns * const.VIS_CELL_INCHES),
            max(2.0, self.maze.rows * const.VIS_CELL_INCHES),
        )

    def save(self, filename: str, maze_path: Optional[MazePath] = None, title: str = ""):
        """Writes the current image to a file, overlaying the path as a line."""
        fig, ax = plt.subplots(figsize=self._figure_size())
        try:
            ax.imshow(self.image, interpolation="nearest")
            if maze_path is not None and len(maze_path) > 0:
                rows = [cell.row for cell in maze_path]
                columns = [cell.column for cell in maze_path]
                ax.plot(
                    columns,
                    rows,
                    const.VIS_PATH_LINE_STYLE,
                    lw=const.VIS_PATH_LINE_LW,
                    alpha=const.VIS_PATH_LINE_ALPHA,
                )
                ax.plot(columns[0], rows[0], const.VIS_START_MARKER,
                        markersize=const.VIS_START_MARKER_SIZE)
                ax.plot(columns[-1], rows[-1], const.VIS_ENDPOINT_MARKER,
                        markersize=const.VIS_ENDPOINT_MARKER_SIZE)
            ax.set_xticks([])
            ax.set_yticks([])
            if title:
                ax.set_title(title)
            fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
        finally:
            plt.close(fig)


def visualize_maze(
    maze: Maze, maze_path: Optional[MazePath] = None, filename: str = "maze.png"
) -> bool:
    """Renders the maze (and optional path) to an image file."""
    print(f"--- Generating Maze Visualization: {filename} ---")
    try:
        drawer = MazeDrawer(maze)
        if maze_path is not None:
            drawer.draw_maze(maze_path)
        if maze_path is None:
            title = f"Maze {maze.rows}x{maze.columns}"
        else:
            status = "complete" if maze_path.is_complete() else "incomplete"
            title = f"Maze {maze.rows}x{maze.columns} - path of {len(maze_path)} cells ({status})"
        drawer.save(filename, maze_path, title=title)
        print(f"  Visualization saved to {filename}")
        return True
    except Exception as e:
        print(f"ERROR during visualization: {e}")
        return False
