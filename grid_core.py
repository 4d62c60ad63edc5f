# grid_core.py
import enum
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

# Import from other project modules
import constants as const


class TileState(enum.IntEnum):
    """State of a single maze tile. Values are what the tile grid stores."""

    WALL = const.TILE_WALL
    EMPTY = const.TILE_EMPTY
    START = const.TILE_START
    END = const.TILE_END

    @property
    def color(self) -> Tuple[int, int, int]:
        return TILE_COLORS[self]


TILE_COLORS = {
    TileState.WALL: const.COLOR_WALL,
    TileState.EMPTY: const.COLOR_EMPTY,
    TileState.START: const.COLOR_START,
    TileState.END: const.COLOR_END,
}


class Direction(enum.Enum):
    """Direction of a single step between orthogonally adjacent cells."""

    # Declaration order is the order candidates are listed in before shuffling
    NORTH = const.DIR_NORTH
    EAST = const.DIR_EAST
    SOUTH = const.DIR_SOUTH
    WEST = const.DIR_WEST

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) of one step in this direction."""
        return _DIRECTION_DELTAS[self]

    @property
    def checked_offsets(self) -> Tuple[Tuple[int, int], ...]:
        """Surrounding offsets that do not face back along this step."""
        return _CHECKED_OFFSETS[self]

    def step(self, x: int, y: int) -> Tuple[int, int]:
        dx, dy = self.delta
        return x + dx, y + dy

    def faces_back(self, dx: int, dy: int) -> bool:
        """
        True if the offset (dx, dy), taken from the cell this step arrives at,
        points back towards the side the step came from. That covers the
        cell the step started on and the two diagonals flanking it.
        """
        step_x, step_y = self.delta
        return dx * step_x + dy * step_y < 0


_DIRECTION_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

# The 8 cells surrounding a cell: 4 orthogonal and 4 diagonal
SURROUNDING_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (1, 1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (1, -1),
    (-1, -1),
)

_CHECKED_OFFSETS = {
    direction: tuple(
        offset for offset in SURROUNDING_OFFSETS if not direction.faces_back(*offset)
    )
    for direction in Direction
}


class Grid:
    """
    Fixed-size 2D container addressed by (x, y).

    Cells live in a flat row-major list: row y holds the cells (0, y) ..
    (width - 1, y), and iteration walks rows top to bottom, left to right
    within a row. to_array() hands the cells over to numpy.
    """

    def __init__(
        self,
        width: int,
        height: int,
        fill_value: Any = TileState.WALL,
        dtype: Any = np.uint8,
    ):
        if width < 0 or height < 0:
            raise ValueError(
                f"Grid dimensions must be non-negative, got {width}x{height}."
            )
        self.width = width
        self.height = height
        self.dtype = np.dtype(dtype)
        self._cells: List[Any] = [fill_value] * (width * height)

    @classmethod
    def init(cls, width: int, height: int, value: Any) -> "Grid":
        """Creates a grid with every cell set to value, dtype inferred from it."""
        return cls(width, height, fill_value=value, dtype=np.asarray(value).dtype)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[Any]:
        """Returns the cell value, or None if (x, y) lies outside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self._cells[y * self.width + x]

    def set(self, x: int, y: int, value: Any) -> bool:
        """Writes the cell if (x, y) lies inside the grid. Returns whether it did."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        self._cells[y * self.width + x] = value
        return True

    # Callers must already know (x, y) is in bounds: out of range x wraps into another row.
    def get_unchecked(self, x: int, y: int) -> Any:
        return self._cells[y * self.width + x]

    def set_unchecked(self, x: int, y: int, value: Any):
        self._cells[y * self.width + x] = value

    def all_around(
        self, x: int, y: int, offsets: Sequence[Tuple[int, int]], value: Any
    ) -> bool:
        """True if every in-grid cell at the given offsets from (x, y) equals value."""
        width, height, cells = self.width, self.height, self._cells
        for dx, dy in offsets:
            nx = x + dx
            ny = y + dy
            if 0 <= nx < width and 0 <= ny < height and cells[ny * width + nx] != value:
                return False
        return True

    def first_index(self, value: Any) -> Optional[Tuple[int, int]]:
        """(x, y) of the first cell equal to value in storage order."""
        try:
            return self._coords_of(self._cells.index(value))
        except ValueError:
            return None

    def last_index(self, value: Any) -> Optional[Tuple[int, int]]:
        """(x, y) of the last cell equal to value in storage order."""
        for flat_index in range(len(self._cells) - 1, -1, -1):
            if self._cells[flat_index] == value:
                return self._coords_of(flat_index)
        return None

    def count(self, value: Any) -> int:
        return self._cells.count(value)

    def _coords_of(self, flat_index: int) -> Tuple[int, int]:
        y, x = divmod(flat_index, self.width)
        return x, y

    def to_array(self) -> np.ndarray:
        """Returns the cells as a new (height, width) array."""
        return np.array(self._cells, dtype=self.dtype).reshape(self.height, self.width)

    def __iter__(self) -> Iterator[Any]:
        """Iterates over cell values in storage order."""
        return iter(self._cells)

    def __len__(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, dtype={self.dtype})"
