from israelgrids._version import __version__  # noqa: F401
from israelgrids.utils.logging import LOGGER
from israelgrids.datums import (
    Ellipsoid, EllipsoidParams, Grid, GridParams, get_ellipsoid, get_grid,
    resolve_ellipsoid, resolve_grid
)
from israelgrids.coordinates import GeoCoordinate, GridCoordinate
from israelgrids.conversion import (
    convert_many, ics_to_itm, ics_to_wgs84, itm_to_ics, itm_to_wgs84,
    wgs84_to_ics, wgs84_to_itm
)
from israelgrids.molodensky import shift_datum
from israelgrids.projection import geographic_to_grid, grid_to_geographic

__all__ = [
    'Ellipsoid',
    'EllipsoidParams',
    'GeoCoordinate',
    'Grid',
    'GridCoordinate',
    'GridParams',
    'LOGGER',
    'convert_many',
    'geographic_to_grid',
    'get_ellipsoid',
    'get_grid',
    'grid_to_geographic',
    'ics_to_itm',
    'ics_to_wgs84',
    'itm_to_ics',
    'itm_to_wgs84',
    'resolve_ellipsoid',
    'resolve_grid',
    'shift_datum',
    'wgs84_to_ics',
    'wgs84_to_itm',
]
