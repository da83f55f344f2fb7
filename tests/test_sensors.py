import pytest

from ttytemp.demo import DEMO_ZONES, DemoSource
from ttytemp.sensors import (
    SensorReadError,
    ThermalZoneSource,
    discover_zones,
    millidegrees_to_degrees,
)

from tests.helpers import make_thermal_dir


@pytest.fixture
def thermal_dir(tmp_path):
    return make_thermal_dir(tmp_path, {
        "thermal_zone0": ("45000\n", "acpitz"),
        "thermal_zone10": ("52500\n", "x86_pkg_temp"),
        "thermal_zone2": ("38999\n", None),
    })


def test_zones_are_in_natural_order(thermal_dir):
    zones = discover_zones(thermal_dir)
    assert [z.name for z in zones] == ["thermal_zone0", "thermal_zone2", "thermal_zone10"]
    assert [z.label for z in zones] == ["acpitz", "thermal_zone2", "x86_pkg_temp"]


def test_unrelated_entries_are_ignored(thermal_dir):
    (thermal_dir / "cooling_device0").mkdir()
    (thermal_dir / "thermal_zone_extra").mkdir()
    assert len(discover_zones(thermal_dir)) == 3


def test_read_converts_to_whole_degrees(thermal_dir):
    sample = ThermalZoneSource(thermal_dir).read()
    assert sample.values == (45, 38, 52)
    assert sample.max_value == 52


def test_millidegree_conversion_truncates_toward_zero():
    assert millidegrees_to_degrees(38999) == 38
    assert millidegrees_to_degrees(-1500) == -1
    assert millidegrees_to_degrees(0) == 0


def test_zone_selection_by_name_or_label_keeps_order(thermal_dir):
    source = ThermalZoneSource(thermal_dir, only=["x86_pkg_temp", "thermal_zone0"])
    assert [z.name for z in source.zones()] == ["thermal_zone10", "thermal_zone0"]
    assert source.read().values == (52, 45)


def test_unknown_zone_selection_fails(thermal_dir):
    with pytest.raises(SensorReadError, match="nvme"):
        ThermalZoneSource(thermal_dir, only=["nvme"])


def test_no_zones_fails(tmp_path):
    with pytest.raises(SensorReadError, match="No thermal zones"):
        ThermalZoneSource(tmp_path)


def test_unreadable_zone_fails_whole_sample(thermal_dir):
    source = ThermalZoneSource(thermal_dir)
    (thermal_dir / "thermal_zone2" / "temp").unlink()
    with pytest.raises(SensorReadError, match="thermal_zone2"):
        source.read()


def test_non_numeric_zone_fails(thermal_dir):
    source = ThermalZoneSource(thermal_dir)
    (thermal_dir / "thermal_zone0" / "temp").write_text("N/A\n", encoding="utf-8")
    with pytest.raises(SensorReadError, match="non-numeric"):
        source.read()


def test_sensor_read_error_is_an_os_error():
    assert issubclass(SensorReadError, OSError)


def test_demo_source_is_reproducible():
    a, b = DemoSource(seed=1), DemoSource(seed=1)
    first = [a.read().values for _ in range(5)]
    second = [b.read().values for _ in range(5)]
    assert first == second


def test_demo_source_shape():
    source = DemoSource()
    assert len(source.zones()) == len(DEMO_ZONES)
    for _ in range(20):
        sample = source.read()
        assert len(sample.values) == len(DEMO_ZONES)
        assert all(v >= 0 for v in sample.values)
