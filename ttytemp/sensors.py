"""Temperature source backed by the sysfs thermal zones."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol, Sequence

from .i18n import t
from .models import Sample, ZoneInfo

logger = logging.getLogger(__name__)

_ZONE_PATTERN = re.compile(r"^thermal_zone(\d+)$")


class SensorReadError(OSError):
    """A sensor could not be read for this cycle."""


class SampleSource(Protocol):
    """Anything that can produce a Sample on demand."""

    def zones(self) -> list[ZoneInfo]:
        ...

    def read(self) -> Sample:
        ...


def _read_strip(path: Path) -> str:
    with open(path, "r", encoding="utf-8", errors="ignore") as handle:
        return handle.read().strip()


def _zone_sort_key(path: Path) -> int:
    match = _ZONE_PATTERN.match(path.name)
    return int(match.group(1)) if match else -1


def discover_zones(thermal_dir: Path) -> list[ZoneInfo]:
    """List thermal zones in natural order (thermal_zone2 before thermal_zone10)."""
    try:
        candidates = [p for p in thermal_dir.glob("thermal_zone*") if _ZONE_PATTERN.match(p.name)]
    except OSError as e:
        raise SensorReadError(t("err_no_zones", path=thermal_dir)) from e

    zones = []
    for zone_dir in sorted(candidates, key=_zone_sort_key):
        try:
            label = _read_strip(zone_dir / "type") or zone_dir.name
        except OSError:
            label = zone_dir.name
        zones.append(ZoneInfo(name=zone_dir.name, label=label, path=zone_dir / "temp"))
    return zones


def millidegrees_to_degrees(raw: int) -> int:
    """Convert a sysfs millidegree reading to whole degrees, truncating toward zero."""
    return -(-raw // 1000) if raw < 0 else raw // 1000


class ThermalZoneSource:
    """Reads /sys/class/thermal/thermal_zone*/temp.

    The set of zones is fixed when the source is created so every sample has
    the same number of series. Any zone failing to read fails the whole
    sample.
    """

    def __init__(self, thermal_dir: Path, only: Optional[Sequence[str]] = None) -> None:
        self._thermal_dir = Path(thermal_dir)
        zones = discover_zones(self._thermal_dir)

        if only:
            by_name = {z.name: z for z in zones}
            by_label = {z.label: z for z in zones}
            selected = []
            missing = []
            for name in only:
                zone = by_name.get(name) or by_label.get(name)
                if zone is None:
                    missing.append(name)
                else:
                    selected.append(zone)
            if missing:
                raise SensorReadError(t("err_zones_missing", names=missing))
            zones = selected

        if not zones:
            raise SensorReadError(t("err_no_zones", path=self._thermal_dir))

        self._zones = zones
        logger.info(
            "Monitoring %d thermal zones: %s",
            len(zones),
            ", ".join(f"{z.name} ({z.label})" for z in zones),
        )

    def zones(self) -> list[ZoneInfo]:
        return list(self._zones)

    def read(self) -> Sample:
        """Read every zone once and build a Sample."""
        values = []
        for zone in self._zones:
            try:
                raw = _read_strip(zone.path)
            except OSError as e:
                raise SensorReadError(t("err_zone_unreadable", zone=zone.name, error=e)) from e
            try:
                values.append(millidegrees_to_degrees(int(raw)))
            except ValueError as e:
                raise SensorReadError(t("err_zone_not_number", zone=zone.name, value=raw)) from e

        sample = Sample(values=tuple(values), timestamp=datetime.now())
        logger.debug("Read sample: %s", sample.values)
        return sample
