"""
Group Transform - Resize Math Utilities

Pure geometry for resizing a single node by dragging one of its corner
handles. The dragged corner follows the pointer delta while the opposite
corner stays fixed, so the center moves by half the delta.

These functions have no graph or event dependencies.
"""

from group_transform.constants import RESIZE_HANDLES

# (width sign, height sign) per handle, in RESIZE_HANDLES order
_HANDLE_SIGNS = dict(zip(RESIZE_HANDLES, (
    (-1.0, -1.0),  # left-top
    (1.0, -1.0),   # right-top
    (1.0, 1.0),    # right-bottom
    (-1.0, 1.0),   # left-bottom
)))


def resize_by_handle(x, y, width, height, delta_x, delta_y, handle_index):
    """Compute node geometry after a handle drag

    Args:
        x, y: Current center
        width, height: Current size
        delta_x, delta_y: Pointer movement of the dragged handle
        handle_index: 0 left-top, 1 right-top, 2 right-bottom, 3 left-bottom

    Returns:
        Tuple of (new_x, new_y, new_width, new_height)

    Raises:
        ValueError: If handle_index is not a known handle
    """
    signs = _HANDLE_SIGNS.get(handle_index)
    if signs is None:
        raise ValueError(f"Unknown resize handle index: {handle_index}")
    sign_w, sign_h = signs

    new_width = width + sign_w * delta_x
    new_height = height + sign_h * delta_y

    # Opposite corner is anchored
    new_x = x + delta_x / 2.0
    new_y = y + delta_y / 2.0

    return new_x, new_y, new_width, new_height
