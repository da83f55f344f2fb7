"""Data models for ttytemp."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_INTERVAL_SECONDS = 4
MIN_INTERVAL_SECONDS = 1
DEFAULT_THERMAL_DIR = Path("/sys/class/thermal")


@dataclass(frozen=True)
class Sample:
    """Snapshot of every monitored sensor taken at one instant.

    Readings are whole degrees, one per zone, in a fixed order for the
    lifetime of the process.
    """

    values: tuple[int, ...]
    timestamp: datetime = field(default_factory=datetime.now)
    min_value: int = field(init=False)
    max_value: int = field(init=False)
    avg_value: int = field(init=False)

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if not values:
            raise ValueError("Sample needs at least one reading")
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Sample readings must be whole degrees, got {value!r}")
        # frozen dataclass: derived fields are set once, here
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "min_value", min(values))
        object.__setattr__(self, "max_value", max(values))
        object.__setattr__(self, "avg_value", round(sum(values) / len(values)))

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class ProjectedSample:
    """Row positions of one Sample under the current display scale."""

    heights: tuple[int, ...]
    min_height: int
    avg_height: int
    max_height: int


@dataclass(frozen=True)
class WindowSummary:
    """Window-wide aggregates shown in the header."""

    min_value: int
    avg_value: float
    max_value: int
    latest: datetime


@dataclass(frozen=True)
class ZoneInfo:
    """A thermal zone discovered under the sysfs thermal directory."""

    name: str
    label: str
    path: Path


@dataclass
class Layout:
    """Validated screen geometry derived from the terminal size."""

    rows: int
    columns: int
    chart_rows: int
    capacity: int


@dataclass
class AppConfig:
    """Application configuration (config file merged with CLI flags)."""

    interval: int = DEFAULT_INTERVAL_SECONDS
    monochrome: bool = False
    rows: Optional[int] = None
    columns: Optional[int] = None
    thermal_dir: Path = DEFAULT_THERMAL_DIR
    language: str = "en"
    zones: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Minimum is silently clamped
        self.interval = max(MIN_INTERVAL_SECONDS, int(self.interval))
        self.thermal_dir = Path(self.thermal_dir)
