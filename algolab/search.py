"""Linear search."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to target, or None if absent."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None