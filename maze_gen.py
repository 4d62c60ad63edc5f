# maze_gen.py
import random
from typing import List, Tuple

import numpy as np

# Import from other project modules
from grid_core import Direction, Grid, TileState
from utils import validate_dimensions

# Candidate steps in the order they are listed before shuffling: N, E, S, W
_CANDIDATE_STEPS = [(*direction.delta, direction) for direction in Direction]


class Maze:
    """
    A width x height tile maze carved by a randomized depth first search.

    Carved passages are one cell wide and never touch another branch, either
    side by side or corner to corner, so the carved cells form a tree.
    """

    def __init__(self, width: int, height: int):
        width, height = validate_dimensions(width, height)
        self.width = width
        self.height = height
        self._data = Grid(width, height)
        self._visited = Grid.init(width, height, False)

    def populate(self, rng: random.Random) -> int:
        """
        Carves the maze in place using the given random source.
        Returns the number of visited cells, all of which end up carved.
        """
        print(f"--- Starting Maze Generation (Randomized DFS, {self.width}x{self.height}) ---")
        start_x = rng.randrange(self.width)
        start_y = rng.randrange(self.height)
        print(f"  Starting maze generation at cell: ({start_x}, {start_y})")

        stack: List[Tuple[int, int]] = [(start_x, start_y)]
        self._visited.set_unchecked(start_x, start_y, True)
        visited_count = 1

        while stack:
            x, y = stack[-1]

            neighbours = [(x + dx, y + dy, direction) for dx, dy, direction in _CANDIDATE_STEPS]
            rng.shuffle(neighbours)

            if not self._data.in_bounds(x, y):
                stack.pop()
                continue

            next_cell = None
            for nx, ny, direction in neighbours:
                if self.is_valid_neighbour(nx, ny, direction):
                    next_cell = (nx, ny)
                    break

            self._data.set(x, y, TileState.EMPTY)
            if next_cell is not None:
                self._visited.set_unchecked(*next_cell, True)
                stack.append(next_cell)
                visited_count += 1
            else:
                # Dead end, backtrack
                stack.pop()

        self._place_start_and_end()

        print(
            f"--- Maze Generation Complete: Carved {visited_count}/{len(self._data)} cells. ---"
        )
        return visited_count

    def _place_start_and_end(self):
        # Scan from the top left for the start, then from the bottom right for the end.
        # With a single carved cell the end overwrites the start.
        start = self._data.first_index(TileState.EMPTY)
        if start is not None:
            self._data.set_unchecked(*start, TileState.START)

        end = self._data.last_index(TileState.EMPTY)
        if end is None:
            end = start
        if end is not None:
            self._data.set_unchecked(*end, TileState.END)
        print(f"  Start cell set to: {start}, End cell set to: {end}")

    def is_valid_neighbour(self, x: int, y: int, direction: Direction) -> bool:
        """
        A cell reached by stepping in direction is valid to carve if it is
        unvisited and surrounded by walls or the grid edge, ignoring the side
        the step came from.
        """
        visited = self._visited.get(x, y)
        if visited is None or visited:
            return False
        return self._data.all_around(x, y, direction.checked_offsets, TileState.WALL)

    def tile(self, x: int, y: int) -> TileState:
        """Returns the tile at (x, y). Raises IndexError outside the maze."""
        value = self._data.get(x, y)
        if value is None:
            raise IndexError(f"Tile ({x}, {y}) is outside the {self.width}x{self.height} maze.")
        return TileState(int(value))

    @property
    def tiles(self) -> np.ndarray:
        """Copy of the tile codes as a (height, width) array, row y holding tiles (*, y)."""
        return self._data.to_array()

    def count(self, state: TileState) -> int:
        return self._data.count(state)

    def __repr__(self) -> str:
        return f"Maze({self.width}x{self.height})"
