"""Finnish (fi) strings for the ttytemp UI."""

STRINGS: dict = {
    # ── Startup errors ────────────────────────────────────────────────
    "err_too_few_rows": "Valitettavasti {prog} tarvitsee vähintään {n} riviä.",
    "err_too_few_cols": "Valitettavasti {prog} tarvitsee vähintään {n} saraketta.",
    "err_config_not_found": "Asetustiedostoa ei löydy: {path}",
    "err_config_unreadable": "Asetustiedostoa {path} ei voi lukea: {error}",
    "err_config_not_mapping": "Asetustiedoston {path} pitää sisältää avain-arvo-rakenne",
    "err_no_zones": "Lämpövyöhykkeitä ei löytynyt hakemistosta {path}",
    "err_zone_unreadable": "Lämpövyöhykettä {zone} ei voi lukea: {error}",
    "err_zone_not_number": "Lämpövyöhyke {zone} palautti ei-numeerisen arvon: {value!r}",
    "err_zones_missing": lambda names, **_: (
        f"Määritettyä vyöhykettä ei löydy: {names[0]}"
        if len(names) == 1
        else f"Määritettyjä vyöhykkeitä ei löydy: {', '.join(names)}"
    ),
    "err_sensor_failed": "Anturin luku epäonnistui: {error}",
    "err_fatal": "Vakava virhe: {error}",

    # ── Dashboard ─────────────────────────────────────────────────────
    "tui_quit_hint": "q/Esc: lopeta",
    "tui_demo_tag": "demo",
}
