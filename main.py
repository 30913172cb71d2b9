# main.py
import argparse
import os
import time
import traceback
from typing import List, Optional

# Import project modules
import constants as const
from maze_gen import create_maze
from serialization import maze_to_json
from solver import solve
from visualization import visualize_maze


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid maze generator and solver")
    parser.add_argument("rows", nargs="?", type=int, default=const.DEFAULT_ROWS,
                        help="number of rows in the maze")
    parser.add_argument("columns", nargs="?", type=int, default=const.DEFAULT_COLUMNS,
                        help="number of columns in the maze")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for a reproducible maze")
    parser.add_argument("--loop-probability", type=float, default=const.LOOP_PROBABILITY,
                        help="chance of opening a wall between two visited regions")
    parser.add_argument("--solve", action="store_true",
                        help="also write the BFS solution")
    parser.add_argument("--output", default=const.DEFAULT_OUTPUT_DIR,
                        help="directory for the generated files")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    start_time = time.time()
    args = parse_args(argv)
    os.makedirs(args.output, exist_ok=True)

    print("\n--- Configuration ---")
    print(f"  Size: {args.rows}x{args.columns}, Seed: {args.seed}, "
          f"Loop probability: {args.loop_probability}")
    print(f"  Output directory: {args.output}")

    try:
        maze = create_maze(args.rows, args.columns, args.seed, args.loop_probability)
    except Exception as e:
        print(f"ERROR during maze generation: {e}")
        traceback.print_exc()
        return 1

    # --- Export ---
    json_file = os.path.join(args.output, "maze.json")
    try:
        with open(json_file, "w") as f:
            f.write(maze_to_json(maze))
        print(f"  Maze exported to {json_file}")
    except Exception as e:
        print(f"ERROR during export: {e}")
        traceback.print_exc()

    visualize_maze(maze, filename=os.path.join(args.output, "maze.png"))

    exit_code = 0
    if args.solve:
        try:
            solution = solve(maze)
            if not solution.is_complete():
                raise RuntimeError("Solver returned an incomplete path.")
            visualize_maze(maze, solution,
                           filename=os.path.join(args.output, "maze_solution.png"))
        except Exception as e:
            print(f"ERROR during solving: {e}")
            traceback.print_exc()
            exit_code = 1

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(run())
