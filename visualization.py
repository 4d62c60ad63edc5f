# visualization.py
import io
import os
from typing import Union

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.patches import Patch
import numpy as np
from PIL import Image

# Import from other project modules
from grid_core import TILE_COLORS, TileState
from maze_gen import Maze
from utils import EncodingError
import constants as const

PathLike = Union[str, "os.PathLike[str]"]

# Row i holds the colour of the tile whose code is i
_PALETTE = np.array(
    [TILE_COLORS[state] for state in sorted(TileState)], dtype=np.uint8
)


def tiles_to_rgb(maze: Maze) -> np.ndarray:
    """Maps every tile to its colour. Returns a (height, width, 3) uint8 array."""
    return _PALETTE[maze.tiles]


def encode_png(maze: Maze) -> bytes:
    """Encodes the maze as an 8-bit RGB PNG, one pixel per tile."""
    pixels = tiles_to_rgb(maze)
    buffer = io.BytesIO()
    try:
        image = Image.fromarray(pixels)
        image.save(buffer, format=const.IMAGE_FORMAT)
    except (ValueError, TypeError, OSError) as e:
        raise EncodingError(f"Failed to encode the {maze.width}x{maze.height} maze as PNG: {e}") from e
    return buffer.getvalue()


def save_to_file(maze: Maze, path: PathLike):
    """
    Writes the maze to path as a PNG.

    The image is encoded in memory first, so an encoding failure never touches
    the file system. OSError propagates if the file cannot be created or written.
    """
    data = encode_png(maze)
    print(f"  Exporting maze ({maze.width}x{maze.height}px, {len(data)} bytes) to {path}...")
    with open(path, "wb") as f:
        f.write(data)


def visualize_maze(maze: Maze, filename: PathLike):
    """Saves a labelled matplotlib preview of the maze tiles to filename."""
    print(f"--- Visualizing Maze to {filename} ---")
    colors = [np.array(TILE_COLORS[state]) / 255.0 for state in sorted(TileState)]
    cmap = ListedColormap(colors)

    fig, ax = plt.subplots(figsize=const.VIS_FIGURE_SIZE)
    try:
        ax.imshow(
            maze.tiles,
            cmap=cmap,
            vmin=min(TileState),
            vmax=max(TileState),
            interpolation="nearest",
        )
        ax.set_title(f"{const.PROGRAM_NAME} {maze.width}x{maze.height}")
        ax.axis("off")
        ax.legend(
            handles=[
                Patch(facecolor=colors[TileState.START], edgecolor="black", label=const.VIS_START_LABEL),
                Patch(facecolor=colors[TileState.END], edgecolor="black", label=const.VIS_END_LABEL),
            ],
            loc="upper right",
        )
        fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    print(f"  Preview saved to {filename}")
