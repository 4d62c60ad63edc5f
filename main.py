# main.py
import argparse
import sys
import time
import traceback
from typing import List, Optional

# Import project modules
import constants as const
from maze_gen import Maze
from utils import MazeError, make_rng, validate_seed
from visualization import save_to_file, visualize_maze


def seed_value(arg: str) -> int:
    """Parse an unsigned 64-bit seed."""
    try:
        seed = int(arg)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{arg}' is not an integer seed")
    try:
        validate_seed(seed)
    except MazeError as e:
        raise argparse.ArgumentTypeError(str(e))
    return seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=const.PROGRAM_NAME.lower(),
        description=const.PROGRAM_DESCRIPTION,
        add_help=False,
    )
    parser.add_argument("-o", "--out", default=const.DEFAULT_OUTFILE,
        help="File to save the rendered image to.")
    parser.add_argument("-s", "--seed", type=seed_value, default=None,
        help="Seed for the RNG. If unspecified, the RNG is seeded from OS entropy.")
    parser.add_argument("-w", "--width", type=int, default=const.DEFAULT_WIDTH,
        help="Width of the rendered image in pixels.")
    parser.add_argument("-h", "--height", type=int, default=const.DEFAULT_HEIGHT,
        help="Height of the rendered image in pixels.")
    parser.add_argument("-p", "--preview", default=None,
        help="Also save a labelled preview figure to this file.")
    parser.add_argument("-V", "--version", action="version",
        version=f"{const.PROGRAM_NAME} {const.PROGRAM_VERSION}")
    parser.add_argument("--help", action="help",
        help="Show this help message and exit.")
    return parser


def run_maze_generation(argv: Optional[List[str]] = None) -> int:
    """Generates a maze from command line arguments. Returns the exit status."""
    args = build_parser().parse_args(argv)
    start_time = time.time()

    print("\n--- Configuration ---")
    print(f"  Output: {args.out}")
    print(f"  Size: {args.width}x{args.height}")
    print(f"  Seed: {args.seed if args.seed is not None else 'entropy'}")

    try:
        maze = Maze(args.width, args.height)
        rng = make_rng(args.seed)
        maze.populate(rng)
    except MazeError as e:
        print(f"ERROR during maze generation: {e}")
        traceback.print_exc()
        return 1

    print("\n--- Saving Maze ---")
    try:
        save_to_file(maze, args.out)
    except (MazeError, OSError) as e:
        print(f"ERROR saving maze to {args.out}: {e}")
        traceback.print_exc()
        return 1

    if args.preview:
        try:
            visualize_maze(maze, args.preview)
        except (ValueError, OSError) as e:
            print(f"ERROR saving preview to {args.preview}: {e}")
            traceback.print_exc()
            return 1

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return 0


if __name__ == "__main__":
    sys.exit(run_maze_generation())
