def is_valid_coordinates(lat: float | None, lng: float | None) -> bool:
    """
    True when both values are present, inside the usual ranges, and not the (0, 0) placeholder.
    """
    if lat is None or lng is None:
        return False
    return -90 <= lat <= 90 and -180 <= lng <= 180 and (lat != 0 or lng != 0)


def format_coordinates(lat: float, lng: float) -> str:
    return f"{lat:.4f}, {lng:.4f}"
