"""Numeric constants shared by the scale table and the CRS.

These values model the conventions of the map viewer the CRS feeds:
- screens are assumed to render at 96 dots per inch
- tiles are square with a fixed edge length in pixels
- the earth is treated as a sphere for distance calculations
"""

# Screen resolution used to turn a unitless map scale into pixels per meter
DOTS_PER_INCH = 96

# Length of one inch in meters
METERS_PER_INCH = 0.0254

# Multiplier applied to explicit scales and scale denominators
DEVICE_SCALE_FACTOR = DOTS_PER_INCH / METERS_PER_INCH

# Edge length of a tile in pixels; the whole bounds fit one tile at zoom 0
TILE_SIZE = 256

# Number of zoom levels synthesized from bounds (levels 0..22)
DEFAULT_ZOOM_LEVELS = 23

# Mean earth radius in meters
EARTH_RADIUS = 6371000
