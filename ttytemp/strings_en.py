"""English (en) strings for the ttytemp UI."""

STRINGS: dict = {
    # ── Startup errors ────────────────────────────────────────────────
    "err_too_few_rows": "Sorry, {prog} requires at least {n} rows to run.",
    "err_too_few_cols": "Sorry, {prog} requires at least {n} cols to run.",
    "err_config_not_found": "Configuration file not found: {path}",
    "err_config_unreadable": "Cannot read configuration file {path}: {error}",
    "err_config_not_mapping": "Configuration file {path} must contain a mapping",
    "err_no_zones": "No thermal zones found under {path}",
    "err_zone_unreadable": "Cannot read thermal zone {zone}: {error}",
    "err_zone_not_number": "Thermal zone {zone} returned a non-numeric value: {value!r}",
    "err_zones_missing": lambda names, **_: (
        f"Configured zone not found: {names[0]}"
        if len(names) == 1
        else f"Configured zones not found: {', '.join(names)}"
    ),
    "err_sensor_failed": "Sensor read failed: {error}",
    "err_fatal": "Fatal error: {error}",

    # ── Dashboard ─────────────────────────────────────────────────────
    "tui_quit_hint": "q/Esc: quit",
    "tui_demo_tag": "demo",
}
