"""Time-based guest ids."""

from __future__ import annotations

import string
import time

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    """Render a non-negative integer in base 36 using 0-9a-z."""
    if value < 0:
        raise ValueError("to_base36 expects a non-negative integer")
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_BASE36_DIGITS[rem])
    return "".join(reversed(out))


def gen_unique_id() -> str:
    """
    Return "?" followed by the current Unix time in milliseconds, in base 36.

    Ids are only unique per millisecond; two calls within the same
    millisecond return the same string.
    """
    return "?" + to_base36(time.time_ns() // 1_000_000)
