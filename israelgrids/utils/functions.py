"""Module for miscellaneous multi-use functions"""

__all__ = ['in_envelope', 'round_half_up', 'round_to_int']

import math

from israelgrids._const import ENVELOPE_LAT, ENVELOPE_LON


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    scale = 10 ** precision
    return math.floor(value * scale + 0.5) / scale


def round_to_int(value: float) -> int:
    """
    Rounds a grid value to whole meters, halves going up.

    For non-negative values this is the same as adding 0.5 and truncating.

    Args:
        value:
            The value in meters

    Returns:
        int
    """
    return int(math.floor(value + 0.5))


def in_envelope(latitude: float, longitude: float) -> bool:
    """
    Test whether a WGS84 position (decimal degrees) lies within the area the local
    grids are meant to cover.

    Args:
        latitude: (float)
            Latitude, in decimal degrees

        longitude: (float)
            Longitude, in decimal degrees

    Returns:
        bool
    """
    return (
        ENVELOPE_LAT[0] <= latitude <= ENVELOPE_LAT[1] and
        ENVELOPE_LON[0] <= longitude <= ENVELOPE_LON[1]
    )
