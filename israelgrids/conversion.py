"""
Israel local grids <==> WGS84 conversions

Local grid -> WGS84: the grid position is converted to latitude/longitude on the grid's own
ellipsoid, then moved to WGS84 with a Molodensky transformation.

WGS84 -> local grid: Molodensky from WGS84 to the grid's ellipsoid, then latitude/longitude
to grid.
"""

__all__ = [
    'convert_many', 'ics_to_itm', 'ics_to_wgs84', 'itm_to_ics', 'itm_to_wgs84',
    'wgs84_to_ics', 'wgs84_to_itm',
]

import math
from typing import Callable, Sequence, Tuple

import numpy as np

from israelgrids._const import DEGREE_PRECISION, ICS_TO_ITM_EASTING, ICS_TO_ITM_NORTHING
from israelgrids._types import GRID_TYPE, LATLON_TYPE
from israelgrids.datums import Ellipsoid, Grid
from israelgrids.molodensky import shift_datum
from israelgrids.projection import geographic_to_grid, grid_to_geographic
from israelgrids.utils.functions import in_envelope, round_half_up
from israelgrids.utils.logging import warn_once


_ENVELOPE_WARNING = (
    'Coordinates lie outside the practical extent of the Israeli grids; results are '
    'computed anyway but lose accuracy. (this warning will not repeat)'
)


def _check_envelope(lat: float, lon: float):
    if not in_envelope(lat, lon):
        warn_once(_ENVELOPE_WARNING)


def _grid_to_wgs84(easting: float, northing: float, grid: Grid) -> LATLON_TYPE:
    ellipsoid = grid.ellipsoid
    lat, lon = grid_to_geographic(northing, easting, grid, ellipsoid)
    lat84, lon84 = shift_datum(lat, lon, ellipsoid, Ellipsoid.WGS84)

    lat84 = round_half_up(lat84 * 180 / math.pi, DEGREE_PRECISION)
    lon84 = round_half_up(lon84 * 180 / math.pi, DEGREE_PRECISION)
    _check_envelope(lat84, lon84)

    return lat84, lon84


def _wgs84_to_grid(lat: float, lon: float, grid: Grid) -> GRID_TYPE:
    _check_envelope(lat, lon)
    ellipsoid = grid.ellipsoid
    local_lat, local_lon = shift_datum(
        lat * math.pi / 180,
        lon * math.pi / 180,
        Ellipsoid.WGS84,
        ellipsoid
    )
    return geographic_to_grid(local_lat, local_lon, ellipsoid, grid)


def itm_to_wgs84(easting: float, northing: float) -> LATLON_TYPE:
    """
    Convert an Israel New Grid (ITM) position to WGS84.

    Args:
        easting:
            ITM easting, in meters

        northing:
            ITM northing, in meters

    Returns:
        (latitude, longitude) in decimal degrees, rounded to 7 places
    """
    return _grid_to_wgs84(easting, northing, Grid.ITM)


def wgs84_to_itm(lat: float, lon: float) -> GRID_TYPE:
    """
    Convert a WGS84 position to the Israel New Grid (ITM).

    Args:
        lat:
            Latitude, in decimal degrees

        lon:
            Longitude, in decimal degrees

    Returns:
        (easting, northing) in whole meters
    """
    return _wgs84_to_grid(lat, lon, Grid.ITM)


def ics_to_wgs84(easting: float, northing: float) -> LATLON_TYPE:
    """
    Convert an Israel Old Grid (ICS) position to WGS84.

    Args:
        easting:
            ICS easting, in meters

        northing:
            ICS northing, in meters

    Returns:
        (latitude, longitude) in decimal degrees, rounded to 7 places
    """
    return _grid_to_wgs84(easting, northing, Grid.ICS)


def wgs84_to_ics(lat: float, lon: float) -> GRID_TYPE:
    """
    Convert a WGS84 position to the Israel Old Grid (ICS).

    Args:
        lat:
            Latitude, in decimal degrees

        lon:
            Longitude, in decimal degrees

    Returns:
        (easting, northing) in whole meters
    """
    return _wgs84_to_grid(lat, lon, Grid.ICS)


def ics_to_itm(easting: float, northing: float) -> Tuple[float, float]:
    """
    Apply the nominal offset between the old and new grids, e.g.
    ICS (180000, 1178000) -> ITM (230000, 678000).

    This is a fixed shift of the grid numbering. The grids sit on different ellipsoids, so
    the same nominal point converted to WGS84 through each grid differs by several meters;
    use ics_to_wgs84() followed by wgs84_to_itm() where that matters.

    Args:
        easting:
            ICS easting, in meters

        northing:
            ICS northing, in meters

    Returns:
        (easting, northing) on the ITM grid
    """
    return easting + ICS_TO_ITM_EASTING, northing + ICS_TO_ITM_NORTHING


def itm_to_ics(easting: float, northing: float) -> Tuple[float, float]:
    """Inverse of ics_to_itm()"""
    return easting - ICS_TO_ITM_EASTING, northing - ICS_TO_ITM_NORTHING


def convert_many(
    converter: Callable[[float, float], Tuple],
    points: Sequence[Sequence[float]],
) -> np.ndarray:
    """
    Apply a pairwise converter (e.g. itm_to_wgs84) to many points at once.

    Args:
        converter:
            Any of the conversion functions in this module

        points:
            An (n, 2) array-like, each row being the converter's two arguments

    Returns:
        (n, 2) numpy array of converted points
    """
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2))

    arr = np.atleast_2d(arr)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f'Points must be an (n, 2) array, not an array of shape {arr.shape}')

    return np.array([converter(float(x), float(y)) for x, y in arr])
