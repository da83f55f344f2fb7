"""Builders for samples and fake sysfs trees."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

from ttytemp.models import Sample

BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


def make_samples(*rows: tuple[int, ...], start: datetime = BASE_TIME) -> list[Sample]:
    """One Sample per tuple, one second apart."""
    return [
        Sample(values=values, timestamp=start + timedelta(seconds=i))
        for i, values in enumerate(rows)
    ]


def make_thermal_dir(root: Path, zones: dict[str, tuple[str, str | None]]) -> Path:
    """Build a fake sysfs thermal directory.

    ``zones`` maps a zone directory name to (temp file content, type label);
    a None label leaves the type file out.
    """
    for name, (temp, label) in zones.items():
        zone_dir = root / name
        zone_dir.mkdir(parents=True)
        (zone_dir / "temp").write_text(temp, encoding="utf-8")
        if label is not None:
            (zone_dir / "type").write_text(label + "\n", encoding="utf-8")
    return root
