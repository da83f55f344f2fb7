from __future__ import annotations

import pytest

from ttytemp.i18n import init_lang


@pytest.fixture(autouse=True)
def english_strings():
    init_lang("en")
    yield
    init_lang("en")
