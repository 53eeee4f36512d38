import pytest

from curtain_map.services.curtain_service import Curtain

from tests.fakes import FakeFeature, FakeHost, FakeLayer


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def curtain(host):
    return Curtain(host)


@pytest.fixture
def add_point(curtain, host):
    def _add(name, lon, lat):
        layer = FakeLayer(host, name)
        return curtain.add(layer, FakeFeature(lon, lat)), layer
    return _add
