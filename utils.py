# utils.py
import operator
import random
from typing import Optional, Tuple

import constants as const


class MazeError(Exception):
    """Base class for errors raised while generating or exporting a maze."""


class ConfigurationError(MazeError, ValueError):
    """Raised for dimensions or seeds the generator cannot work with."""


class EncodingError(MazeError, RuntimeError):
    """Raised when the tile data cannot be encoded as an image."""


def validate_dimensions(width: int, height: int) -> Tuple[int, int]:
    """
    Rejects grids with no cells before any random sampling happens.
    Accepts any integer type (numpy integers included) and returns plain ints.
    """
    try:
        width, height = operator.index(width), operator.index(height)
    except TypeError:
        raise ConfigurationError(
            f"Maze dimensions must be integers, got width={width!r}, height={height!r}."
        ) from None
    if width <= 0 or height <= 0:
        raise ConfigurationError(
            f"Maze dimensions must be positive, got {width}x{height}."
        )
    return width, height


def validate_seed(seed: int) -> None:
    if not (0 <= seed < const.MAX_SEED):
        raise ConfigurationError(
            f"Seed ({seed}) must be an unsigned 64-bit integer."
        )


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Builds the random source threaded through maze generation.
    A seed gives a reproducible sequence; None seeds from OS entropy.
    """
    if seed is None:
        return random.Random()
    validate_seed(seed)
    return random.Random(seed)
