import pytest

from curtain_map.models.item import Bounds, ItemState, RefreshResult, UnknownItemError
from curtain_map.services.curtain_service import Curtain

from tests.fakes import FakeFeature, FakeHost, FakeLayer, point_feature


def _assert_suppressed_detached(curtain):
    def _check(layer, feature, handle):
        if curtain.is_suppressed(handle):
            assert not layer.is_attached()
    curtain.all(_check)


def test_new_item_starts_withheld(curtain, add_point, host):
    handle, layer = add_point("a", 5, 5)
    assert curtain.state(handle) is ItemState.WITHHELD
    assert not curtain.is_suppressed(handle)
    assert host.calls == []


def test_refresh_and_pan_scenario(curtain, add_point, host):
    a, layer_a = add_point("a", 5, 5)
    b, layer_b = add_point("b", 15, 15)

    assert curtain.refresh() == RefreshResult(attached=1, detached=0)
    assert layer_a.is_attached()
    assert not layer_b.is_attached()

    host.pan((10, 10), (20, 20))
    assert curtain.refresh() == RefreshResult(attached=1, detached=1)
    assert not layer_a.is_attached()
    assert layer_b.is_attached()
    assert curtain.state(a) is ItemState.WITHHELD
    assert curtain.state(b) is ItemState.DISPLAYED


def test_second_refresh_makes_no_host_calls(curtain, add_point, host):
    add_point("a", 5, 5)
    add_point("b", 15, 15)
    add_point("c", 2, 8)
    curtain.refresh()
    calls = list(host.calls)

    assert curtain.refresh() == RefreshResult(0, 0)
    assert host.calls == calls


def test_refresh_attaches_in_registry_order(curtain, add_point, host):
    add_point("first", 1, 1)
    add_point("outside", 50, 50)
    add_point("second", 9, 9)
    curtain.refresh()
    assert [layer.name for layer in host.attached] == ["first", "second"]


def test_is_in_viewport_is_strict(curtain):
    curtain.update_bounds()
    assert curtain.is_in_viewport(FakeFeature(5, 5))
    assert not curtain.is_in_viewport(FakeFeature(5, 10))
    assert not curtain.is_in_viewport(FakeFeature(5, 0))
    assert not curtain.is_in_viewport(FakeFeature(0, 5))
    assert not curtain.is_in_viewport(FakeFeature(10, 5))


def test_is_in_viewport_uses_cached_bounds(curtain, host):
    curtain.update_bounds()
    host.pan((20, 20), (30, 30))
    assert curtain.is_in_viewport(FakeFeature(5, 5))
    curtain.update_bounds()
    assert not curtain.is_in_viewport(FakeFeature(5, 5))


def test_is_in_viewport_without_snapshot(curtain):
    assert curtain.bounds is None
    assert not curtain.is_in_viewport(FakeFeature(5, 5))


def test_is_in_viewport_reads_geojson_features(curtain):
    curtain.update_bounds()
    assert curtain.is_in_viewport(point_feature(1, 5, 5))
    assert not curtain.is_in_viewport(point_feature(2, 5, 15))


def test_boundary_item_detached_on_refresh(curtain, add_point, host):
    handle, layer = add_point("edge", 5, 10)
    host.add_layer(layer)
    curtain.refresh()
    assert not layer.is_attached()


def test_suppression_overrides_geometry(curtain, add_point, host):
    c, layer = add_point("c", 5, 5)
    curtain.set_suppressed(c, True)
    curtain.refresh()
    assert not layer.is_attached()
    assert curtain.state(c) is ItemState.SUPPRESSED
    _assert_suppressed_detached(curtain)


def test_suppress_detaches_displayed_item(curtain, add_point, host):
    c, layer = add_point("c", 5, 5)
    curtain.refresh()
    assert layer.is_attached()

    curtain.set_suppressed(c, True)
    assert not layer.is_attached()
    assert host.calls[-1] == ("remove", "c")

    calls = list(host.calls)
    curtain.set_suppressed(c, True)
    assert host.calls == calls


def test_release_forces_attach_without_viewport_test(curtain, add_point, host):
    far, layer = add_point("far", 50, 50)
    curtain.update_bounds()
    curtain.set_suppressed(far, True)

    curtain.set_suppressed(far, False)
    assert layer.is_attached()
    assert curtain.state(far) is ItemState.DISPLAYED

    curtain.refresh()
    assert not layer.is_attached()


def test_release_of_displayed_item_does_not_reattach(curtain, add_point, host):
    a, layer = add_point("a", 5, 5)
    curtain.refresh()
    calls = list(host.calls)
    curtain.set_suppressed(a, False)
    assert host.calls == calls
    assert host.attached.count(layer) == 1


@pytest.mark.parametrize("lon, lat, expected", [(5, 5, True), (50, 50, False)])
def test_deferred_release_follows_geometry(curtain, add_point, host, lon, lat, expected):
    handle, layer = add_point("x", lon, lat)
    curtain.set_suppressed(handle, True)

    curtain.set_suppressed(handle, False, defer_attach=True)
    assert not layer.is_attached()
    assert curtain.state(handle) is ItemState.WITHHELD

    curtain.refresh()
    assert layer.is_attached() is expected


def test_deferred_release_of_displayed_item_is_noop(curtain, add_point, host):
    a, layer = add_point("a", 5, 5)
    curtain.refresh()
    curtain.set_suppressed(a, False, defer_attach=True)
    assert curtain.state(a) is ItemState.DISPLAYED


def test_turn_on_and_off_aliases(curtain, add_point, host):
    a, layer = add_point("a", 50, 50)
    curtain.turn_off(a)
    assert curtain.is_suppressed(a)
    curtain.turn_on(a, skip_adding_layer=True)
    assert not curtain.is_suppressed(a)
    assert not layer.is_attached()
    curtain.turn_on(a)
    assert layer.is_attached()


def test_refresh_tolerates_host_side_changes(curtain, add_point, host):
    a, layer = add_point("a", 5, 5)
    curtain.refresh()
    host.remove_layer(layer)

    assert curtain.refresh() == RefreshResult(1, 0)
    assert layer.is_attached()


def test_all_visits_every_item_with_handles(curtain, add_point, host):
    a, _ = add_point("a", 5, 5)
    b, _ = add_point("b", 50, 50)
    c, _ = add_point("c", 6, 6)
    curtain.set_suppressed(c, True)

    seen = []
    curtain.all(lambda layer, feature, handle: seen.append((layer.name, handle)))
    assert seen == [("a", a), ("b", b), ("c", c)]


def test_all_resnapshots_bounds(curtain, host):
    host.pan((1, 2), (3, 4))
    curtain.all(lambda *args: None)
    assert curtain.bounds == Bounds((1, 2), (3, 4))


def test_each_visible_reports_host_attachment(curtain, add_point, host):
    add_point("a", 5, 5)
    add_point("b", 50, 50)
    c, _ = add_point("c", 6, 6)
    curtain.refresh()
    curtain.set_suppressed(c, True)

    # Pan without refreshing: attachment lags geometry.
    host.pan((40, 40), (60, 60))
    visible = []
    curtain.each_visible(lambda layer, feature: visible.append(layer.name))
    assert visible == ["a"]
    assert curtain.bounds == Bounds((40, 40), (60, 60))


def test_foreign_handle_is_rejected(curtain, add_point):
    other_host = FakeHost()
    other = Curtain(other_host)
    foreign = other.add(FakeLayer(other_host, "x"), FakeFeature(1, 1))
    with pytest.raises(UnknownItemError):
        curtain.set_suppressed(foreign, True)
    with pytest.raises(UnknownItemError):
        curtain.state("not a handle")


def test_handles_are_stable(curtain, add_point):
    a, _ = add_point("a", 5, 5)
    for i in range(20):
        add_point(f"n{i}", i, i)
    curtain.set_suppressed(a, True)
    assert curtain.is_suppressed(a)
    assert len(curtain) == 21


def test_invariant_holds_across_mixed_operations(curtain, add_point, host):
    handles = [add_point(f"p{i}", i * 3, i * 3)[0] for i in range(8)]
    curtain.refresh()
    curtain.set_suppressed(handles[1], True)
    _assert_suppressed_detached(curtain)
    curtain.set_suppressed(handles[6], True)
    host.pan((5, 5), (25, 25))
    curtain.refresh()
    _assert_suppressed_detached(curtain)
    curtain.set_suppressed(handles[1], False, defer_attach=True)
    curtain.refresh()
    _assert_suppressed_detached(curtain)

    visible = []
    curtain.each_visible(lambda layer, feature: visible.append(layer.name))
    attached = [layer.name for layer in host.attached]
    assert sorted(visible) == sorted(attached)
