#!/usr/bin/env python3
"""Validate the UI string tables.

Checks that strings_en.py and strings_fi.py define the same keys and that
every t("...") lookup in the package refers to a defined key.
Exit code 0 = all OK, 1 = problems found.
"""

import ast
import sys
from pathlib import Path

PACKAGE = Path(__file__).resolve().parent.parent / "ttytemp"


def table_keys(filepath: Path) -> set[str]:
    """Keys of the STRINGS dict literal in a strings module."""
    tree = ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))

    for node in ast.walk(tree):
        if isinstance(node, ast.AnnAssign):
            target, value = node.target, node.value
        elif isinstance(node, ast.Assign) and len(node.targets) == 1:
            target, value = node.targets[0], node.value
        else:
            continue

        if isinstance(target, ast.Name) and target.id == "STRINGS" and isinstance(value, ast.Dict):
            return {
                key.value
                for key in value.keys
                if isinstance(key, ast.Constant) and isinstance(key.value, str)
            }

    return set()


def used_keys(package: Path) -> dict[str, set[str]]:
    """Literal keys passed to t(), mapped to the files using them."""
    usage: dict[str, set[str]] = {}
    for path in sorted(package.glob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if (
                isinstance(node, ast.Call)
                and isinstance(node.func, ast.Name)
                and node.func.id == "t"
                and node.args
                and isinstance(node.args[0], ast.Constant)
                and isinstance(node.args[0].value, str)
            ):
                usage.setdefault(node.args[0].value, set()).add(path.name)
    return usage


def main() -> int:
    en_keys = table_keys(PACKAGE / "strings_en.py")
    fi_keys = table_keys(PACKAGE / "strings_fi.py")
    if not en_keys or not fi_keys:
        print("String tables not found")
        return 1

    ok = True
    for missing, name in ((en_keys - fi_keys, "strings_fi.py"), (fi_keys - en_keys, "strings_en.py")):
        if missing:
            ok = False
            print(f"Keys missing from {name} ({len(missing)}):")
            for key in sorted(missing):
                print(f"  - {key}")

    undefined = {k: files for k, files in used_keys(PACKAGE).items() if k not in en_keys}
    if undefined:
        ok = False
        print(f"Undefined keys looked up ({len(undefined)}):")
        for key, files in sorted(undefined.items()):
            print(f"  - {key} ({', '.join(sorted(files))})")

    if ok:
        print(f"i18n OK: {len(en_keys)} keys in sync")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
