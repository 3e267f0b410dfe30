"""
Rail Ink - Colors and Render Dimensions

Shared colors and pixel sizes for board rendering.
"""

from typing import Dict, Tuple

from .edge import EdgeType

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

# Pixel size of one cell
CELL_SIZE = 48
# Width of the stroke drawn for an edge
EDGE_WIDTH = 8
# Gap between cells
GRID_GAP = 1

COLOR_BACKGROUND: RGBColor = (0x30, 0x30, 0x30)
COLOR_CELL: RGBColor = (0xF4, 0xF0, 0xE6)
COLOR_BORDER: RGBColor = (0xB0, 0xB0, 0xB0)
COLOR_CENTER: RGBColor = (0xE0, 0xD4, 0xB8)
COLOR_SIGNAL: RGBColor = (0xFF, 0xD8, 0x00)
COLOR_ROUND: RGBColor = (0x40, 0x40, 0x40)

EDGE_COLORS: Dict[EdgeType, RGBColor] = {
    EdgeType.ROAD: (0x20, 0x20, 0x20),
    EdgeType.RAIL: (0xA0, 0x30, 0x30),
    EdgeType.LAKE: (0x30, 0x80, 0xD0),
    EdgeType.FOREST: (0x20, 0x80, 0x30),
}
