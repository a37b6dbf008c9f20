"""
Abridged Molodensky transformation between two reference ellipsoids.

See http://home.hiwaay.net/~taylorc/bookshelf/math-science/geodesy/datum/transform/molodensky/

Points are assumed to lie on the ellipsoid surface (height 0). The result is a linear
approximation, good to a few meters for the datum differences involved here.
"""

__all__ = ['shift_datum']

import math
from typing import Union

from israelgrids._types import LATLON_TYPE
from israelgrids.datums import Ellipsoid, get_ellipsoid


def shift_datum(
    lat: float,
    lon: float,
    from_ellipsoid: Union[Ellipsoid, str],
    to_ellipsoid: Union[Ellipsoid, str],
) -> LATLON_TYPE:
    """
    Move a latitude/longitude from one ellipsoid's frame to another's.

    Args:
        lat:
            Latitude on the source ellipsoid, in radians

        lon:
            Longitude on the source ellipsoid, in radians

        from_ellipsoid:
            The source ellipsoid

        to_ellipsoid:
            The target ellipsoid

    Returns:
        (latitude, longitude) on the target ellipsoid, in radians
    """
    src = get_ellipsoid(from_ellipsoid)
    dst = get_ellipsoid(to_ellipsoid)

    # from->WGS84 - to->WGS84 = from->WGS84 + WGS84->to = from->to
    dx = src.dx - dst.dx
    dy = src.dy - dst.dy
    dz = src.dz - dst.dz

    slat = math.sin(lat)
    clat = math.cos(lat)
    slon = math.sin(lon)
    clon = math.cos(lon)
    ssqlat = slat * slat

    df = dst.f - src.f
    da = dst.a - src.a
    adb = 1.0 / (1.0 - src.f)
    rn = src.a / math.sqrt(1 - src.esq * ssqlat)
    rm = src.a * (1 - src.esq) / math.pow(1 - src.esq * ssqlat, 1.5)
    height = 0.0

    dlat = (
        -dx * slat * clon - dy * slat * slon + dz * clat +
        da * rn * src.esq * slat * clat / src.a +
        df * (rm * adb + rn / adb) * slat * clat
    ) / (rm + height)

    dlon = (-dx * slon + dy * clon) / ((rn + height) * clat)

    return lat + dlat, lon + dlon
