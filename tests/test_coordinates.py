import math

import pytest

from israelgrids import Ellipsoid, GeoCoordinate, Grid, GridCoordinate
from israelgrids.utils.functions import round_half_up

from tests.functions import assert_geocoordinates_equal


def test_geocoordinate_init():
    c = GeoCoordinate(0.5, 0.6)
    assert c.latitude == 0.5
    assert c.longitude == 0.6
    assert c.ellipsoid == Ellipsoid.WGS84

    c = GeoCoordinate('0.5', '0.6', 'grs80')
    assert c.latitude == 0.5
    assert c.ellipsoid == Ellipsoid.GRS80

    with pytest.raises(ValueError):
        GeoCoordinate(0.5, 0.6, 'airy1830')


def test_geocoordinate_eq():
    assert GeoCoordinate(0.5, 0.6) == GeoCoordinate(0.5, 0.6)
    assert GeoCoordinate(0.5, 0.6) != GeoCoordinate(0.5, 0.6, Ellipsoid.GRS80)
    assert GeoCoordinate(0.5, 0.6) != (0.5, 0.6)


def test_geocoordinate_hash():
    coords = [
        GeoCoordinate(0.5, 0.6),
        GeoCoordinate(0.5, 0.6),
        GeoCoordinate(0.5, 0.6, Ellipsoid.CLARK80M),
    ]
    assert len(set(coords)) == 2


def test_geocoordinate_repr():
    assert repr(GeoCoordinate(0.5, 0.6)) == '<GeoCoordinate(0.5, 0.6, WGS84)>'


def test_geocoordinate_degrees():
    c = GeoCoordinate.from_degrees(32., 35.)
    assert c.latitude == 32. * math.pi / 180
    lat, lon = c.to_degrees()
    assert lat == pytest.approx(32.)
    assert lon == pytest.approx(35.)


def test_geocoordinate_from_dms():
    assert GeoCoordinate.from_dms((32, 0, 0., 'N'), (35, 0, 0., 'E')) == \
        GeoCoordinate.from_degrees(32., 35.)
    assert GeoCoordinate.from_dms((32, 30, 0., 'S'), (35, 15, 0., 'W')) == \
        GeoCoordinate.from_degrees(-32.5, -35.25)


def test_geocoordinate_to_dms():
    c = GeoCoordinate.from_dms((32, 11, 43.945, 'N'), (35, 18, 58.782, 'E'))
    assert c.to_dms() == ((32, 11, 43.945, 'N'), (35, 18, 58.782, 'E'))

    c = GeoCoordinate.from_dms((32, 11, 43.945, 'S'), (35, 18, 58.782, 'W'))
    assert c.to_dms() == ((32, 11, 43.945, 'S'), (35, 18, 58.782, 'W'))


def test_geocoordinate_shift():
    c = GeoCoordinate.from_degrees(32., 35.)
    assert c.shift(Ellipsoid.WGS84) is c

    shifted = c.shift(Ellipsoid.GRS80)
    assert shifted.ellipsoid == Ellipsoid.GRS80
    assert_geocoordinates_equal(shifted.shift(Ellipsoid.WGS84), c, abs_tol=1e-7)


def test_geocoordinate_to_grid():
    assert GeoCoordinate.from_degrees(32., 35.).to_grid(Grid.ITM) == \
        GridCoordinate(200131, 656329, Grid.ITM)
    assert GeoCoordinate.from_degrees(29.553036125579155, 34.943337203496604).to_grid(Grid.ICS) == \
        GridCoordinate(144140, 885060, Grid.ICS)


def test_gridcoordinate_init():
    c = GridCoordinate(200131, 656329, 'itm')
    assert c.grid == Grid.ITM
    assert c.to_tuple() == (200131, 656329)

    with pytest.raises(ValueError):
        GridCoordinate(200131, 656329, 'utm')


def test_gridcoordinate_eq_hash_repr():
    assert GridCoordinate(1, 2, Grid.ITM) == GridCoordinate(1, 2, Grid.ITM)
    assert GridCoordinate(1, 2, Grid.ITM) != GridCoordinate(1, 2, Grid.ICS)
    assert GridCoordinate(1, 2, Grid.ITM) != (1, 2)
    assert len({GridCoordinate(1, 2, Grid.ITM), GridCoordinate(1, 2, Grid.ITM)}) == 1
    assert repr(GridCoordinate(1, 2, Grid.ITM)) == '<GridCoordinate(1, 2, ITM)>'


def test_gridcoordinate_to_geographic():
    itm = Grid.ITM.params
    c = GridCoordinate(itm.false_e, -itm.false_n, Grid.ITM)
    assert c.to_geographic() == GeoCoordinate(0., itm.lon0, Ellipsoid.GRS80)

    geo = GridCoordinate(194140, 385060, Grid.ITM).to_geographic(Ellipsoid.CLARK80M)
    assert geo.ellipsoid == Ellipsoid.CLARK80M


def test_gridcoordinate_to_wgs84():
    lat, lon = GridCoordinate(194140, 385060, Grid.ITM).to_wgs84().to_degrees()
    assert (round_half_up(lat, 7), round_half_up(lon, 7)) == (29.5531035, 34.9432931)

    lat, lon = GridCoordinate(144140, 885060, Grid.ICS).to_wgs84().to_degrees()
    assert (round_half_up(lat, 7), round_half_up(lon, 7)) == (29.5530361, 34.9433372)


def test_geocoordinate_to_dms_carries_seconds():
    c = GeoCoordinate.from_degrees(32 + 11 / 60 + 59.9996 / 3600, 35.)
    assert c.to_dms() == ((32, 12, 0.0, 'N'), (35, 0, 0.0, 'E'))


def test_identifiers_by_name():
    assert GeoCoordinate(0.5, 0.6, 'GRS80').ellipsoid == Ellipsoid.GRS80
    assert GridCoordinate(1, 2, 'ITM').grid == Grid.ITM

    c = GeoCoordinate.from_degrees(32., 35.)
    assert c.to_grid('itm') == GridCoordinate(200131, 656329, Grid.ITM)
    assert c.to_grid('ICS') == c.to_grid(Grid.ICS)
    assert c.shift('Clark80M') == c.shift(Ellipsoid.CLARK80M)
    assert c.shift('wgs84') is c

    geo = GridCoordinate(194140, 385060, 'itm').to_geographic('CLARK80M')
    assert geo.ellipsoid == Ellipsoid.CLARK80M

    with pytest.raises(ValueError):
        c.to_grid('utm')
