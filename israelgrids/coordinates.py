"""
Representation of points on an ellipsoid and on a local grid
"""

from __future__ import annotations

__all__ = ['GeoCoordinate', 'GridCoordinate']

import math
from typing import Optional, Tuple, Union

from pydantic import validate_call

from israelgrids._types import Degrees, Radians
from israelgrids.datums import Ellipsoid, Grid, resolve_ellipsoid, resolve_grid
from israelgrids.molodensky import shift_datum
from israelgrids.projection import geographic_to_grid, grid_to_geographic
from israelgrids.utils.functions import round_half_up

_DMS_TYPE = Tuple[int, int, float, str]


class GeoCoordinate:
    """
    A latitude/longitude pair, in radians, on a specific ellipsoid.

    The same latitude/longitude denotes different places on different ellipsoids, so the
    ellipsoid travels with the values.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        latitude: float,
        longitude: float,
        ellipsoid: Union[Ellipsoid, str] = Ellipsoid.WGS84,
    ):
        self.latitude = Radians(latitude)
        self.longitude = Radians(longitude)
        self.ellipsoid = resolve_ellipsoid(ellipsoid)

    def __eq__(self, other):
        if not isinstance(other, GeoCoordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.ellipsoid))

    def __repr__(self):
        return f'<GeoCoordinate({self.latitude}, {self.longitude}, {self.ellipsoid.name})>'

    @classmethod
    def from_degrees(
        cls,
        latitude: float,
        longitude: float,
        ellipsoid: Union[Ellipsoid, str] = Ellipsoid.WGS84
    ) -> GeoCoordinate:
        """Creates a GeoCoordinate from decimal degrees"""
        return cls(latitude * math.pi / 180, longitude * math.pi / 180, ellipsoid)

    @classmethod
    def from_dms(
        cls,
        lat: _DMS_TYPE,
        lon: _DMS_TYPE,
        ellipsoid: Union[Ellipsoid, str] = Ellipsoid.WGS84
    ) -> GeoCoordinate:
        """
        Creates a GeoCoordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            ellipsoid:
                The ellipsoid the values refer to

        Returns:
            GeoCoordinate
        """
        def convert(dms: _DMS_TYPE) -> float:
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls.from_degrees(convert(lat), convert(lon), ellipsoid)

    def to_degrees(self) -> Tuple[Degrees, Degrees]:
        """Returns (latitude, longitude) in decimal degrees"""
        return (
            Degrees(self.latitude * 180 / math.pi),
            Degrees(self.longitude * 180 / math.pi),
        )

    def to_dms(self) -> Tuple[_DMS_TYPE, _DMS_TYPE]:
        """
        Convert to degrees, minutes, seconds, hemisphere. Seconds are kept to 3 decimal
        places (a few centimeters).

        Returns:
            ((degrees, minutes, seconds, 'N'/'S'), (degrees, minutes, seconds, 'E'/'W'))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            # Round the total first so 59.9996" carries into the next minute
            minutes, seconds = divmod(round_half_up(abs(dd) * 3600, 3), 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 3)

        lat, lon = self.to_degrees()
        return (
            (*convert(lat), 'N' if lat >= 0 else 'S'),
            (*convert(lon), 'E' if lon >= 0 else 'W'),
        )

    def shift(self, ellipsoid: Union[Ellipsoid, str]) -> GeoCoordinate:
        """
        Express this position on another ellipsoid (abridged Molodensky).

        Args:
            ellipsoid:
                The target ellipsoid

        Returns:
            GeoCoordinate
        """
        ellipsoid = resolve_ellipsoid(ellipsoid)
        if ellipsoid == self.ellipsoid:
            return self

        return GeoCoordinate(
            *shift_datum(self.latitude, self.longitude, self.ellipsoid, ellipsoid),
            ellipsoid
        )

    def to_grid(self, grid: Union[Grid, str]) -> GridCoordinate:
        """
        Project this position onto a local grid, first moving it to the grid's
        own ellipsoid if necessary.

        Args:
            grid:
                The target grid

        Returns:
            GridCoordinate
        """
        grid = resolve_grid(grid)
        local = self.shift(grid.ellipsoid)
        return GridCoordinate(
            *geographic_to_grid(local.latitude, local.longitude, local.ellipsoid, grid),
            grid
        )


class GridCoordinate:
    """An easting/northing pair, in meters, on a local grid"""

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        easting: Union[int, float],
        northing: Union[int, float],
        grid: Union[Grid, str],
    ):
        self.easting = easting
        self.northing = northing
        self.grid = resolve_grid(grid)

    def __eq__(self, other):
        if not isinstance(other, GridCoordinate):
            return False

        return (
            self.easting == other.easting and
            self.northing == other.northing and
            self.grid == other.grid
        )

    def __hash__(self):
        return hash((self.easting, self.northing, self.grid))

    def __repr__(self):
        return f'<GridCoordinate({self.easting}, {self.northing}, {self.grid.name})>'

    def to_geographic(self, ellipsoid: Optional[Union[Ellipsoid, str]] = None) -> GeoCoordinate:
        """
        Convert to latitude/longitude.

        Args:
            ellipsoid:
                (Default None) The ellipsoid to express the result on. Defaults to the
                grid's own ellipsoid.

        Returns:
            GeoCoordinate
        """
        ellipsoid = resolve_ellipsoid(ellipsoid or self.grid.ellipsoid)
        return GeoCoordinate(
            *grid_to_geographic(self.northing, self.easting, self.grid, ellipsoid),
            ellipsoid
        )

    def to_wgs84(self) -> GeoCoordinate:
        """Convert to latitude/longitude on WGS84"""
        return self.to_geographic().shift(Ellipsoid.WGS84)

    def to_tuple(self) -> Tuple[Union[int, float], Union[int, float]]:
        """Returns (easting, northing)"""
        return self.easting, self.northing
