"""
Group Transform - Constants and Configuration

This module contains all constant values used throughout the engine:
- Default node geometry
- Default group policy flags
- Resize handle indices and minimum sizes
- Angle conversion constants
- Logging format

Coordinates are canvas pixels, center-based. Rotations are radians.
"""

import math

# ======================================================================
# DEFAULT NODE GEOMETRY
# ======================================================================

DEFAULT_NODE_WIDTH = 100.0
DEFAULT_NODE_HEIGHT = 80.0
DEFAULT_NODE_ROTATION = 0.0  # radians

# Groups start larger so a handful of children fit inside
DEFAULT_GROUP_WIDTH = 300.0
DEFAULT_GROUP_HEIGHT = 200.0

# ======================================================================
# GROUP POLICY DEFAULTS
# ======================================================================

# Rotate and resize move together with the container
DEFAULT_TRANSFORM_WITH_CONTAINER = True

# Restricted groups may not shrink below their children's footprint.
# Cascading is unsupported in this mode.
DEFAULT_IS_RESTRICT = False

# ======================================================================
# RESIZE HANDLES
# ======================================================================
# Corner grips, clockwise from top-left

HANDLE_LEFT_TOP = 0
HANDLE_RIGHT_TOP = 1
HANDLE_RIGHT_BOTTOM = 2
HANDLE_LEFT_BOTTOM = 3

RESIZE_HANDLES = (
    HANDLE_LEFT_TOP,
    HANDLE_RIGHT_TOP,
    HANDLE_RIGHT_BOTTOM,
    HANDLE_LEFT_BOTTOM,
)

# Smallest size a node may be resized to
MIN_NODE_WIDTH = 4.0
MIN_NODE_HEIGHT = 4.0

# ======================================================================
# ANGLES
# ======================================================================

DEGREES_PER_TURN = 360.0
RADIANS_TO_DEGREES = 180.0 / math.pi
DEGREES_TO_RADIANS = math.pi / 180.0

# ======================================================================
# LOGGING
# ======================================================================

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
