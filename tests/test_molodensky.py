import math

import pytest

from israelgrids.datums import Ellipsoid
from israelgrids.molodensky import *


_LAT, _LON = math.radians(32.), math.radians(35.)


@pytest.mark.parametrize('ellipsoid', list(Ellipsoid))
def test_shift_datum_same_ellipsoid(ellipsoid):
    assert shift_datum(_LAT, _LON, ellipsoid, ellipsoid) == (_LAT, _LON)


@pytest.mark.parametrize('src, dst', [
    (Ellipsoid.GRS80, Ellipsoid.WGS84),
    (Ellipsoid.WGS84, Ellipsoid.CLARK80M),
    (Ellipsoid.GRS80, Ellipsoid.CLARK80M),
])
def test_shift_datum_reverses(src, dst):
    lat, lon = shift_datum(*shift_datum(_LAT, _LON, src, dst), dst, src)
    assert lat == pytest.approx(_LAT, abs=1e-7)
    assert lon == pytest.approx(_LON, abs=1e-7)


def test_shift_datum_moves_point():
    # A few hundred meters at most, i.e. well under 1e-4 radians
    for dst in (Ellipsoid.GRS80, Ellipsoid.CLARK80M):
        lat, lon = shift_datum(_LAT, _LON, Ellipsoid.WGS84, dst)
        assert (lat, lon) != (_LAT, _LON)
        assert abs(lat - _LAT) < 1e-4
        assert abs(lon - _LON) < 1e-4


def test_shift_datum_composes_through_wgs84():
    direct = shift_datum(_LAT, _LON, Ellipsoid.GRS80, Ellipsoid.CLARK80M)
    via = shift_datum(
        *shift_datum(_LAT, _LON, Ellipsoid.GRS80, Ellipsoid.WGS84),
        Ellipsoid.WGS84, Ellipsoid.CLARK80M
    )
    assert direct[0] == pytest.approx(via[0], abs=1e-7)
    assert direct[1] == pytest.approx(via[1], abs=1e-7)


def test_shift_datum_accepts_names():
    assert shift_datum(_LAT, _LON, 'grs80', 'wgs84') == \
        shift_datum(_LAT, _LON, Ellipsoid.GRS80, Ellipsoid.WGS84)
