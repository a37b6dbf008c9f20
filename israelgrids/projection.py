"""
Conversions between local grid coordinates and latitude/longitude on an ellipsoid.

The formulas are the standard UTM <-> Lat/Lon series (as given by Prof. Steven Dutch,
http://www.uwgb.edu/dutchs/UsefulData/UTMFormulas.htm) evaluated with the local grid's
central meridian, scale factor and false easting/northing in place of the UTM ones.
"""

__all__ = ['geographic_to_grid', 'grid_to_geographic']

import math
from typing import Union

from israelgrids._types import GRID_TYPE, LATLON_TYPE
from israelgrids.datums import Ellipsoid, Grid, get_ellipsoid, get_grid
from israelgrids.utils.functions import round_to_int


def grid_to_geographic(
    northing: float,
    easting: float,
    from_grid: Union[Grid, str],
    to_ellipsoid: Union[Ellipsoid, str],
) -> LATLON_TYPE:
    """
    Convert a local grid position to latitude/longitude on an ellipsoid.

    Args:
        northing:
            Grid northing, in meters

        easting:
            Grid easting, in meters

        from_grid:
            The grid the position is expressed in

        to_ellipsoid:
            The ellipsoid to express the result on (normally the grid's own)

    Returns:
        (latitude, longitude) in radians, unrounded
    """
    grid = get_grid(from_grid)
    datum = get_ellipsoid(to_ellipsoid)

    y = northing + grid.false_n
    x = easting - grid.false_e
    M = y / grid.k0

    a, b, e, esq = datum.a, datum.b, datum.e, datum.esq

    mu = M / (a * (1 - e * e / 4 - 3 * math.pow(e, 4) / 64 - 5 * math.pow(e, 6) / 256))

    ee = math.sqrt(1 - esq)
    e1 = (1 - ee) / (1 + ee)
    j1 = 3 * e1 / 2 - 27 * e1 * e1 * e1 / 32
    j2 = 21 * e1 * e1 / 16 - 55 * e1 * e1 * e1 * e1 / 32
    j3 = 151 * e1 * e1 * e1 / 96
    j4 = 1097 * e1 * e1 * e1 * e1 / 512

    # Footprint latitude
    fp = (
        mu + j1 * math.sin(2 * mu) + j2 * math.sin(4 * mu) +
        j3 * math.sin(6 * mu) + j4 * math.sin(8 * mu)
    )

    sinfp = math.sin(fp)
    cosfp = math.cos(fp)
    tanfp = sinfp / cosfp
    eg = e * a / b
    eg2 = eg * eg
    C1 = eg2 * cosfp * cosfp
    T1 = tanfp * tanfp
    R1 = a * (1 - e * e) / math.pow(1 - (e * sinfp) * (e * sinfp), 1.5)
    N1 = a / math.sqrt(1 - (e * sinfp) * (e * sinfp))
    D = x / (N1 * grid.k0)

    Q1 = N1 * tanfp / R1
    Q2 = D * D / 2
    Q3 = (5 + 3 * T1 + 10 * C1 - 4 * C1 * C1 - 9 * eg2 * eg2) * (D * D * D * D) / 24
    Q4 = (
        (61 + 90 * T1 + 298 * C1 + 45 * T1 * T1 - 3 * C1 * C1 - 252 * eg2 * eg2) *
        (D * D * D * D * D * D) / 720
    )
    lat = fp - Q1 * (Q2 - Q3 + Q4)

    Q5 = D
    Q6 = (1 + 2 * T1 + C1) * (D * D * D) / 6
    Q7 = (
        (5 - 2 * C1 + 28 * T1 - 3 * C1 * C1 + 8 * eg2 * eg2 + 24 * T1 * T1) *
        (D * D * D * D * D) / 120
    )
    lon = grid.lon0 + (Q5 - Q6 + Q7) / cosfp

    return lat, lon


def geographic_to_grid(
    lat: float,
    lon: float,
    from_ellipsoid: Union[Ellipsoid, str],
    to_grid: Union[Grid, str],
) -> GRID_TYPE:
    """
    Convert latitude/longitude on an ellipsoid to a local grid position.

    Args:
        lat:
            Latitude, in radians

        lon:
            Longitude, in radians

        from_ellipsoid:
            The ellipsoid the latitude/longitude are expressed on

        to_grid:
            The target grid

    Returns:
        (easting, northing) rounded to whole meters
    """
    datum = get_ellipsoid(from_ellipsoid)
    grid = get_grid(to_grid)

    a, b, e = datum.a, datum.b, datum.e

    slat1 = math.sin(lat)
    clat1 = math.cos(lat)
    clat1sq = clat1 * clat1
    tanlat1sq = slat1 * slat1 / clat1sq
    e2 = e * e
    e4 = e2 * e2
    e6 = e4 * e2
    eg = e * a / b
    eg2 = eg * eg

    # Meridional arc
    l1 = 1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256
    l2 = 3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024
    l3 = 15 * e4 / 256 + 45 * e6 / 1024
    l4 = 35 * e6 / 3072
    M = a * (l1 * lat - l2 * math.sin(2 * lat) + l3 * math.sin(4 * lat) - l4 * math.sin(6 * lat))

    nu = a / math.sqrt(1 - (e * slat1) * (e * slat1))
    p = lon - grid.lon0
    k0 = grid.k0

    # northing = K1 + K2p^2 + K3p^4
    K1 = M * k0
    K2 = k0 * nu * slat1 * clat1 / 2
    K3 = (k0 * nu * slat1 * clat1 * clat1sq / 24) * (
        5 - tanlat1sq + 9 * eg2 * clat1sq + 4 * eg2 * eg2 * clat1sq * clat1sq
    )
    Y = K1 + K2 * p * p + K3 * p * p * p * p - grid.false_n

    # easting = K4p + K5p^3
    K4 = k0 * nu * clat1
    K5 = (k0 * nu * clat1 * clat1sq / 6) * (1 - tanlat1sq + eg2 * clat1 * clat1)
    X = K4 * p + K5 * p * p * p + grid.false_e

    return round_to_int(X), round_to_int(Y)
