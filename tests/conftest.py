"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from imetext.locales import LocaleCache
from imetext.models import Locale


@pytest.fixture
def locale_cache():
    return LocaleCache()


@pytest.fixture
def english():
    return Locale.parse("en_US")


@pytest.fixture
def resources_file(tmp_path: Path) -> Path:
    """Resource file overriding German and adding Swiss German."""
    path = tmp_path / "resources.json"
    path.write_text(
        json.dumps(
            {
                "resources": {
                    "de": {"symbolsWordConnectors": "'-\u2010"},
                    "de_CH": {
                        "symbolsWordConnectors": "-",
                        "currentLanguageHasSpaces": True,
                    },
                }
            }
        ),
        encoding="utf-8",
    )
    return path
