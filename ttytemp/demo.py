"""Demo mode: synthetic temperatures so the chart runs without sysfs."""

from __future__ import annotations

import math
import random
from datetime import datetime
from pathlib import Path
from typing import Optional

from .models import Sample, ZoneInfo

# ── Demo zone definitions ────────────────────────────────────────────

# (type label, base temperature, swing)
DEMO_ZONES = [
    ("x86_pkg_temp", 52.0, 9.0),
    ("acpitz", 44.0, 3.0),
    ("iwlwifi_1", 38.0, 2.0),
    ("pch_cannonlake", 47.0, 5.0),
]


class DemoSource:
    """Stand-in for ThermalZoneSource with smoothly drifting readings."""

    def __init__(self, seed: Optional[int] = 42) -> None:
        # Reproducible output
        self._random = random.Random(seed)
        self._tick = 0
        self._zones = [
            ZoneInfo(name=f"thermal_zone{i}", label=label, path=Path(f"demo/thermal_zone{i}/temp"))
            for i, (label, _, _) in enumerate(DEMO_ZONES)
        ]

    def zones(self) -> list[ZoneInfo]:
        return list(self._zones)

    def read(self) -> Sample:
        """Next sample: a slow sine wave per zone plus a little noise."""
        self._tick += 1
        values = []
        for i, (_, base, swing) in enumerate(DEMO_ZONES):
            wave = math.sin(self._tick / (6.0 + 2 * i)) * swing
            noise = self._random.uniform(-1.0, 1.0)
            values.append(max(0, round(base + wave + noise)))
        return Sample(values=tuple(values), timestamp=datetime.now())
