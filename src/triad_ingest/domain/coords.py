# ABOUTME: World to map coordinate conversion for NPC locations
# ABOUTME: Reproduces the host's conversion from raw placement coordinates to map grid coordinates


def convert_coord_to_human_readable(coord: float, offset: float, size_factor: float) -> float:
    """Convert one raw world axis into the coordinate shown on the in-game map.

    Args:
        coord: Raw world coordinate
        offset: Map offset for this axis
        size_factor: Map size factor in percent (100 = 1.0 scale)

    Returns:
        Map coordinate, 1.0 at the map's top/left edge
    """
    scale = size_factor / 100.0
    shifted = (coord + offset) * scale
    return ((41.0 / scale) * ((shifted + 1024.0) / 2048.0)) + 1


def convert_map_position(
    raw_coords: tuple[float, float, float], offset_x: float, offset_y: float, size_factor: float
) -> tuple[float, float]:
    """Convert a raw (x, y, z) placement into a (x, y) map position.

    The raw y axis is height and is not shown on maps, the raw z axis becomes the map's y.
    """
    raw_x, _, raw_z = raw_coords
    return (
        convert_coord_to_human_readable(raw_x, offset_x, size_factor),
        convert_coord_to_human_readable(raw_z, offset_y, size_factor),
    )
