# --- Program Metadata ---
PROGRAM_NAME = "Labyrinth"
PROGRAM_DESCRIPTION = "Maze generation program."
PROGRAM_VERSION = "0.0.1"

# --- CLI Defaults ---
DEFAULT_OUTFILE = "maze.png"
DEFAULT_WIDTH = 500  # One cell maps to exactly one pixel
DEFAULT_HEIGHT = 500
MAX_SEED = 2**64  # Seeds are unsigned 64-bit values

# --- Tile States (stored as uint8 in the tile grid) ---
TILE_WALL = 0
TILE_EMPTY = 1
TILE_START = 2
TILE_END = 3

# --- Cell Directions ---
DIR_NORTH = "NORTH"  # y + 1
DIR_SOUTH = "SOUTH"  # y - 1
DIR_EAST = "EAST"  # x + 1
DIR_WEST = "WEST"  # x - 1

# --- Tile Colours (8-bit RGB) ---
COLOR_WALL = (0x00, 0x00, 0x00)
COLOR_EMPTY = (0xFF, 0xFF, 0xFF)
COLOR_START = (0x00, 0xFF, 0x00)
COLOR_END = (0xFF, 0x00, 0x00)

# --- Image Export ---
IMAGE_FORMAT = "PNG"

# --- Visualization ---
VIS_FIGURE_SIZE = (8, 8)
VIS_DPI = 100
VIS_START_LABEL = "Start"
VIS_END_LABEL = "End"
