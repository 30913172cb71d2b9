# --- Maze Dimensions ---
DEFAULT_ROWS = 25
DEFAULT_COLUMNS = 51
MAX_MAZE_SIZE = 2**31 - 1  # Upper bound for rows * columns

# --- Maze Generation ---
LOOP_PROBABILITY = 0.03  # Chance of knocking through a wall between two visited regions

# --- Maze Path ---
NOT_IN_PATH = -1  # Position sentinel for cells that are not on a path

# --- Cell Directions ---
DIR_UP = "up"
DIR_DOWN = "down"
DIR_LEFT = "left"
DIR_RIGHT = "right"

# (row delta, column delta) -> direction
DIRECTION_OFFSETS = {
    (-1, 0): DIR_UP,
    (1, 0): DIR_DOWN,
    (0, -1): DIR_LEFT,
    (0, 1): DIR_RIGHT,
}

# --- Visualization ---
VIS_OPEN_COLOR = (1.0, 1.0, 1.0)  # white
VIS_CLOSED_COLOR = (0.0, 0.0, 0.0)  # black
VIS_PATH_COLOR = (0.0, 1.0, 0.0)  # green
VIS_PATH_LINE_STYLE = "b-"
VIS_PATH_LINE_LW = 2.0
VIS_PATH_LINE_ALPHA = 0.9
VIS_ENDPOINT_MARKER = "ro"
VIS_ENDPOINT_MARKER_SIZE = 6
VIS_START_MARKER = "go"
VIS_START_MARKER_SIZE = 6
VIS_DPI = 150
VIS_CELL_INCHES = 0.2  # Figure size per cell

# --- Output ---
DEFAULT_OUTPUT_DIR = "output"
