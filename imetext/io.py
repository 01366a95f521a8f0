"""File I/O helpers for resource files."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path


class ResourceLoadError(Exception):
    """Raised when a resource file cannot be read or validated."""


def load_json(path: Path) -> dict:
    """Load a JSON object from disk.

    Raises:
        ResourceLoadError: If the file is missing, unreadable or not JSON.
    """
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as e:
        raise ResourceLoadError(f"Failed to read '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ResourceLoadError(f"'{path}' is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ResourceLoadError(f"'{path}' is not valid UTF-8: {e}") from e
    if not isinstance(data, dict):
        raise ResourceLoadError(f"'{path}' must contain a JSON object.")
    return data


def iter_lines(path: Path) -> Iterator[str]:
    """Yield the lines of a UTF-8 text file without their line endings.

    Raises:
        ResourceLoadError: If the file is unreadable or not valid UTF-8.
    """
    try:
        with path.open(encoding="utf-8") as handle:
            for line in handle:
                yield line.rstrip("\r\n")
    except OSError as e:
        raise ResourceLoadError(f"Failed to read '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise ResourceLoadError(f"'{path}' is not valid UTF-8: {e}") from e


def count_lines(path: Path) -> int:
    """Count the lines ``iter_lines`` yields for ``path``."""
    return sum(1 for _ in iter_lines(path))
