"""Raw form input → validated composition.

Form controls deliver strings (or nothing).  Anything missing, unparsable
or negative becomes 0 before it reaches the engine.  Counts are capped at
``MAX_COUNT``, rates at 100.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from ambassador_sim.config.composition import NetworkComposition

_INT_PREFIX = re.compile(r"^\s*([+-]?)0*([0-9]+)")

# Largest count accepted from a form; larger values are clamped.
MAX_COUNT = 1_000_000_000

COMPOSITION_FIELDS = (
    "businesses",
    "users",
    "providers",
    "user_activity_rate",
    "provider_activity_rate",
    "premium_rate",
    "match_rate",
)
RATE_FIELDS = frozenset(COMPOSITION_FIELDS[3:])


def parse_count(raw: Any) -> int:
    """Integer ≥ 0 from a raw field value.

    Strings are read up to the first non-digit (``"12.7"`` → 12,
    ``"30%"`` → 30); anything else unreadable is 0.  Values above
    ``MAX_COUNT`` are clamped to it.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            return 0
        value = int(raw)
    else:
        m = _INT_PREFIX.match(str(raw))
        if m is None or m.group(1) == "-":
            return 0
        digits = m.group(2)
        if len(digits) > len(str(MAX_COUNT)):
            return MAX_COUNT
        value = int(digits)
    return min(MAX_COUNT, max(0, value))


def parse_rate(raw: Any) -> int:
    """Percentage in [0, 100] from a raw field value."""
    return min(100, parse_count(raw))


def composition_from_form(form: Mapping[str, Any]) -> NetworkComposition:
    """Build a composition from raw form fields; missing fields read as 0."""
    values: dict[str, int] = {}
    for name in COMPOSITION_FIELDS:
        raw = form.get(name)
        values[name] = parse_rate(raw) if name in RATE_FIELDS else parse_count(raw)
    return NetworkComposition(**values)
