"""Configuration loading from YAML and screen layout validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .i18n import SUPPORTED_LANGUAGES, t
from .models import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_THERMAL_DIR,
    AppConfig,
    Layout,
)

logger = logging.getLogger(__name__)

# Header and blank line above the chart; timeline, legend and cursor line
# below, plus a little slack
HEIGHT_PADDING = 7
# Scale labels on the left plus a margin on the right
WIDTH_PADDING = 14
MIN_CHART_ROWS = 6
MIN_CHART_COLUMNS = 6
MIN_ROWS = HEIGHT_PADDING + MIN_CHART_ROWS
MIN_COLUMNS = WIDTH_PADDING + MIN_CHART_COLUMNS

_KNOWN_KEYS = frozenset(
    {"interval", "monochrome", "rows", "columns", "thermal_dir", "language", "zones"}
)


class ConfigError(Exception):
    """Configuration is unusable; reported before the dashboard starts."""


def _positive_int(data: dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s value: %s", key, value)
        return None
    if number < 1:
        logger.warning("Invalid %s value: %s", key, value)
        return None
    return number


def _thermal_dir(data: dict[str, Any]) -> Path:
    value = data.get("thermal_dir")
    if value is None:
        return DEFAULT_THERMAL_DIR
    if not isinstance(value, str) or not value:
        logger.warning("Invalid thermal_dir value: %s", value)
        return DEFAULT_THERMAL_DIR
    return Path(value)


def load_config(config_path: Optional[Path]) -> AppConfig:
    """Load configuration from a YAML file, or defaults when no path is given."""
    if config_path is None:
        return AppConfig()

    if not config_path.exists():
        raise ConfigError(t("err_config_not_found", path=config_path))

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(t("err_config_unreadable", path=config_path, error=e)) from e

    if not data:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(t("err_config_not_mapping", path=config_path))

    for key in sorted(str(k) for k in set(data) - _KNOWN_KEYS):
        logger.warning("Ignoring unknown configuration key: %s", key)

    interval = data.get("interval", DEFAULT_INTERVAL_SECONDS)
    try:
        interval = int(interval)
    except (TypeError, ValueError):
        logger.warning("Invalid interval value: %s", interval)
        interval = DEFAULT_INTERVAL_SECONDS

    raw_zones = data.get("zones") or []
    if not isinstance(raw_zones, list):
        logger.warning("Invalid zones value, expected a list: %s", raw_zones)
        raw_zones = []
    zones = []
    for zone in raw_zones:
        if isinstance(zone, (str, int)):
            zones.append(str(zone))
        else:
            logger.warning("Invalid zone entry: %s", zone)

    language = data.get("language", "en")
    if language not in SUPPORTED_LANGUAGES:
        logger.warning("Unsupported language %s, using English", language)
        language = "en"

    config = AppConfig(
        interval=interval,
        monochrome=bool(data.get("monochrome", False)),
        rows=_positive_int(data, "rows"),
        columns=_positive_int(data, "columns"),
        thermal_dir=_thermal_dir(data),
        language=language,
        zones=zones,
    )
    logger.info("Loaded configuration from %s", config_path)
    return config


def resolve_layout(rows: int, columns: int, prog: str = "ttytemp") -> Layout:
    """Derive chart geometry from the terminal size, refusing tiny terminals."""
    if rows < MIN_ROWS:
        raise ConfigError(t("err_too_few_rows", prog=prog, n=MIN_ROWS))
    if columns < MIN_COLUMNS:
        raise ConfigError(t("err_too_few_cols", prog=prog, n=MIN_COLUMNS))

    layout = Layout(
        rows=rows,
        columns=columns,
        chart_rows=rows - HEIGHT_PADDING - 1,
        capacity=columns - WIDTH_PADDING,
    )
    logger.debug("Layout: %s", layout)
    return layout
