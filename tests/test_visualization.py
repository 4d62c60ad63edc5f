import importlib
import os
import shutil
import tempfile
import unittest
from unittest import mock

import numpy as np
from PIL import Image

from grid_core import TileState
from maze_gen import Maze
from utils import EncodingError, make_rng
from visualization import encode_png, save_to_file, tiles_to_rgb, visualize_maze
import visualization

# 5x5, seed 0: # wall, . passage, S start, E end
LAYOUT_5X5_SEED_0 = [
    "S#...",
    "...#.",
    ".####",
    ".#...",
    "...#E",
]
LAYOUT_COLORS = {
    "#": TileState.WALL.color,
    ".": TileState.EMPTY.color,
    "S": TileState.START.color,
    "E": TileState.END.color,
}


def generated_maze(width, height, seed):
    maze = Maze(width, height)
    maze.populate(make_rng(seed))
    return maze


class ExportTests(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def test_tiles_to_rgb_colours(self):
        maze = Maze(4, 2)
        maze._data.set(0, 0, TileState.EMPTY)
        maze._data.set(1, 0, TileState.START)
        maze._data.set(3, 1, TileState.END)
        pixels = tiles_to_rgb(maze)
        self.assertEqual(pixels.shape, (2, 4, 3))
        self.assertEqual(pixels.dtype, np.uint8)
        self.assertEqual(tuple(pixels[0, 0]), (255, 255, 255))
        self.assertEqual(tuple(pixels[0, 1]), (0, 255, 0))
        self.assertEqual(tuple(pixels[1, 3]), (255, 0, 0))
        self.assertEqual(tuple(pixels[1, 0]), (0, 0, 0))

    def test_saved_png_matches_tiles(self):
        maze = generated_maze(9, 6, seed=2)
        path = os.path.join(self.tmp_dir, "maze.png")
        save_to_file(maze, path)

        with Image.open(path) as image:
            self.assertEqual(image.format, "PNG")
            self.assertEqual(image.mode, "RGB")
            self.assertEqual(image.size, (9, 6))
            for y in range(maze.height):
                for x in range(maze.width):
                    self.assertEqual(image.getpixel((x, y)), maze.tile(x, y).color)

    def test_5x5_seed_0_image(self):
        data = encode_png(generated_maze(5, 5, seed=0))
        path = os.path.join(self.tmp_dir, "maze.png")
        with open(path, "wb") as f:
            f.write(data)
        with Image.open(path) as image:
            pixels = np.asarray(image)
        expected = np.array(
            [[LAYOUT_COLORS[c] for c in row] for row in LAYOUT_5X5_SEED_0], dtype=np.uint8
        )
        np.testing.assert_array_equal(pixels, expected)

    def test_same_seed_gives_identical_bytes(self):
        first = encode_png(generated_maze(5, 5, seed=0))
        second = encode_png(generated_maze(5, 5, seed=0))
        self.assertEqual(first, second)

    def test_missing_parent_directory_raises_oserror(self):
        maze = generated_maze(5, 5, seed=0)
        path = os.path.join(self.tmp_dir, "missing", "maze.png")
        with self.assertRaises(OSError):
            save_to_file(maze, path)
        self.assertFalse(os.path.exists(path))

    def test_encoding_failure_leaves_no_file(self):
        maze = generated_maze(5, 5, seed=0)
        path = os.path.join(self.tmp_dir, "maze.png")
        with mock.patch("visualization.Image.fromarray", side_effect=ValueError("bad data")):
            with self.assertRaises(EncodingError):
                save_to_file(maze, path)
        self.assertFalse(os.path.exists(path))

    def test_visualize_maze_writes_figure(self):
        maze = generated_maze(10, 10, seed=4)
        path = os.path.join(self.tmp_dir, "preview.png")
        visualize_maze(maze, path)
        self.assertGreater(os.path.getsize(path), 0)


class BackendTests(unittest.TestCase):
    def test_import_leaves_matplotlib_backend_alone(self):
        with mock.patch("matplotlib.use") as use:
            importlib.reload(visualization)
        use.assert_not_called()


if __name__ == "__main__":
    unittest.main()
