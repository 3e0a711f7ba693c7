import math
import re
from datetime import datetime, timezone

import numpy as np

from .constants import CURRENCIES

# Leading numeric prefix, so "12.5 g" reads as 12.5 and "abc" does not parse.
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number_or(value, default: float = 0.0) -> float:
    """Coerce a form value to a finite float, returning ``default`` when it can't be read."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float, np.integer, np.floating)):
        v = float(value)
        return v if math.isfinite(v) else default
    m = _NUMBER_PREFIX.match(str(value))
    if not m:
        return default
    v = float(m.group(1))
    return v if math.isfinite(v) else default


def is_number(value) -> bool:
    sentinel = object()
    return parse_number_or(value, sentinel) is not sentinel


def round2(x: float) -> float:
    return float(np.round(float(x), 2))


def fmt_money(x, currency: str = "EUR") -> str:
    symbol = CURRENCIES.get(currency, currency)
    try:
        return f"{symbol}{float(x):,.2f}"
    except (TypeError, ValueError):
        return str(x)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")
