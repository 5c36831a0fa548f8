"""Coercion helpers for loosely-typed Gamma API fields."""

from __future__ import annotations

import json
import math
from typing import Any


def normalize_array_field(value: object) -> list[Any]:
    """Return an array-typed upstream field as a list.

    Gamma returns fields such as `outcomes` and `outcomePrices` either as real
    arrays or as JSON-encoded strings (`'["Yes", "No"]'`). This function is total:

    - lists (and tuples) are returned unchanged
    - strings are decoded; anything that is not a JSON array decodes to `[]`
    - every other input (None, numbers, objects) yields `[]`
    """
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            return []
        return decoded if isinstance(decoded, list) else []
    return []


def coerce_optional_float(value: object) -> float | None:
    """Coerce a numeric or numeric-string field to float, or None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None
