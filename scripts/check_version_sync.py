#!/usr/bin/env python3
"""Check that ttytemp.__version__ matches the version in pyproject.toml."""

import re
import sys
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def package_version() -> str:
    text = (ROOT / "ttytemp" / "__init__.py").read_text(encoding="utf-8")
    match = re.search(r'__version__\s*=\s*"([^"]+)"', text)
    return match.group(1) if match else ""


def project_version() -> str:
    with open(ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f).get("project", {}).get("version", "")


def main() -> int:
    pkg = package_version()
    proj = project_version()

    if not pkg:
        print("ERROR: no __version__ in ttytemp/__init__.py")
        return 1
    if not proj:
        print("ERROR: no [project] version in pyproject.toml")
        return 1
    if pkg != proj:
        print(f"VERSION MISMATCH: ttytemp={pkg} pyproject={proj}")
        return 1

    print(f"version OK: {pkg}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
