"""Distance calculations for the galaxy map and orbital positions."""

import math


def distance_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate Euclidean distance between two points in the plane.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Straight-line distance between the two points

    Examples:
        >>> distance_2d(0, 0, 3, 4)
        5.0
    """
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def distance_3d(
    x1: float, y1: float, z1: float, x2: float, y2: float, z2: float
) -> float:
    """Calculate Euclidean distance between two points in space."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2 + (z2 - z1) ** 2)


def cardinal_direction(from_x: float, from_y: float, to_x: float, to_y: float) -> str:
    """Cardinal direction from one map point to another.

    The map's y axis grows downward (screen coordinates), so a positive
    y offset points south.

    Returns:
        One of "este", "sur", "oeste", "norte"
    """
    angle = math.degrees(math.atan2(to_y - from_y, to_x - from_x))

    if -45 <= angle < 45:
        return "este"
    if 45 <= angle < 135:
        return "sur"
    if angle >= 135 or angle < -135:
        return "oeste"
    return "norte"
