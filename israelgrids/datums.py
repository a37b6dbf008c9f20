"""
Reference ellipsoids and local grid definitions

Sources for the constants:
    dX, dY, dZ:  http://www.geo.hunter.cuny.edu/gis/docs/geographic_transformations.pdf
    ITM:         http://www.mapi.gov.il/geodesy/itm_ftp.txt
    ICS:         http://www.mapi.gov.il/geodesy/ics_ftp.txt

The ITM false northing is the MAPI false northing (626907.390) subtracted from the
meridional arc at the central latitude (3512424.3388). The ICS false northing is the
value commonly used as the Garmin correction for the old grid.
"""

__all__ = [
    'Ellipsoid', 'EllipsoidParams', 'Grid', 'GridParams',
    'get_ellipsoid', 'get_grid', 'resolve_ellipsoid', 'resolve_grid',
]

from enum import Enum
from typing import Dict, NamedTuple, Union


class EllipsoidParams(NamedTuple):
    """Shape of a reference ellipsoid, plus its origin offset relative to WGS84"""
    a: float  # equatorial radius (meters)
    b: float  # polar radius (meters)
    f: float  # flattening, (a-b)/a
    esq: float  # eccentricity squared, 1-(b*b)/(a*a)
    e: float  # eccentricity
    dx: float
    dy: float
    dz: float


class GridParams(NamedTuple):
    """Projection constants of a local grid"""
    lon0: float  # central meridian (radians)
    lat0: float  # central latitude (radians), not used by the projection
    k0: float  # scale factor
    false_e: float
    false_n: float


class Ellipsoid(Enum):
    """The reference ellipsoids known to israelgrids"""
    WGS84 = 'wgs84'
    GRS80 = 'grs80'
    CLARK80M = 'clark80m'

    @property
    def params(self) -> EllipsoidParams:
        return _ELLIPSOIDS[self]


class Grid(Enum):
    """
    The Israeli local grids.

    ITM (the "new" grid) is a Transverse Mercator projection of the GRS80 ellipsoid.
    ICS (the "old" grid) is a Cassini-Soldner grid on the modified Clark 1880 ellipsoid.
    """
    ICS = 'ics'
    ITM = 'itm'

    @property
    def params(self) -> GridParams:
        return _GRIDS[self]

    @property
    def ellipsoid(self) -> Ellipsoid:
        """The ellipsoid the grid is defined on"""
        return _GRID_ELLIPSOIDS[self]


_ELLIPSOIDS: Dict[Ellipsoid, EllipsoidParams] = {
    Ellipsoid.WGS84: EllipsoidParams(
        a=6378137.0,
        b=6356752.3142,
        f=0.00335281066474748,  # 1/298.257223563
        esq=0.006694380004260807,
        e=0.0818191909289062,
        dx=0.,
        dy=0.,
        dz=0.,
    ),
    Ellipsoid.GRS80: EllipsoidParams(
        a=6378137.0,
        b=6356752.3141,
        f=0.0033528106811823,  # 1/298.257222101
        esq=0.00669438002290272,
        e=0.0818191910428276,
        dx=-48.,
        dy=55.,
        dz=52.,
    ),
    Ellipsoid.CLARK80M: EllipsoidParams(
        a=6378300.789,
        b=6356566.4116309,
        f=0.003407549767264,  # 1/293.466
        esq=0.006803488139112318,
        e=0.08248325975076590,
        dx=-235.,
        dy=-85.,
        dz=264.,
    ),
}

_GRIDS: Dict[Grid, GridParams] = {
    Grid.ICS: GridParams(
        lon0=0.6145667421719,  # 35°12'43.490"
        lat0=0.5538644768276276,  # 31°44'02.749"
        k0=1.00000,
        false_e=170251.555,
        false_n=2385259.0,
    ),
    Grid.ITM: GridParams(
        lon0=0.614434732254689,  # 35°12'16.261"
        lat0=0.5538696546377418,  # 31°44'03.817"
        k0=1.0000067,
        false_e=219529.584,
        false_n=2885516.9488,  # 3512424.3388 - 626907.390
    ),
}

_GRID_ELLIPSOIDS: Dict[Grid, Ellipsoid] = {
    Grid.ICS: Ellipsoid.CLARK80M,
    Grid.ITM: Ellipsoid.GRS80,
}


def _resolve(enum_cls, value):
    if isinstance(value, enum_cls):
        return value

    try:
        return enum_cls[str(value).upper()]
    except KeyError:
        raise ValueError(
            f'Unknown {enum_cls.__name__.lower()} {value!r}; '
            f'expected one of {", ".join(x.name for x in enum_cls)}'
        ) from None


def resolve_ellipsoid(ellipsoid: Union[Ellipsoid, str]) -> Ellipsoid:
    """Returns the Ellipsoid for a member or its name (case-insensitive)"""
    return _resolve(Ellipsoid, ellipsoid)


def resolve_grid(grid: Union[Grid, str]) -> Grid:
    """Returns the Grid for a member or its name (case-insensitive)"""
    return _resolve(Grid, grid)


def get_ellipsoid(ellipsoid: Union[Ellipsoid, str]) -> EllipsoidParams:
    """
    Look up the parameters of a reference ellipsoid.

    Args:
        ellipsoid:
            An Ellipsoid, or its name (case-insensitive), e.g. 'grs80'

    Returns:
        EllipsoidParams
    """
    return resolve_ellipsoid(ellipsoid).params


def get_grid(grid: Union[Grid, str]) -> GridParams:
    """
    Look up the projection constants of a local grid.

    Args:
        grid:
            A Grid, or its name (case-insensitive), e.g. 'itm'

    Returns:
        GridParams
    """
    return resolve_grid(grid).params
