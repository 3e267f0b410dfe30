"""
Rail Ink - Board Constants

Board dimensions, region bounds and the scoring table shared by the
scoring engine, board files, renderer and tools.
"""

# Board dimensions (cells). The playable interior is surrounded by a
# one-cell border ring that holds the map exits.
BOARD_SIZE = 7
GRID_SIZE = BOARD_SIZE + 2

# Center region (inclusive bounds, both axes)
CENTER_MIN = 3
CENTER_MAX = 5

# Exits sit on the border ring at these offsets along each side
EXIT_OFFSETS = (2, 4, 6)

# Edge type letters per exit, in increasing coordinate order.
# North/south sides alternate road-rail-road, east/west rail-road-rail.
EXIT_LAYOUT = {
    "N": "RTR",
    "S": "RTR",
    "E": "TRT",
    "W": "TRT",
}

# Scoring table
MAX_EXIT_GROUP = len(EXIT_OFFSETS) * 4  # every exit in one network
MAX_EXIT_GROUP_POINTS = 45
POINTS_PER_EXTRA_EXIT = 4
