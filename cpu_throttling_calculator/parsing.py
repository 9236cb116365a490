"""Coerce user-entered text into a BenchmarkIndex."""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_PREFIXED = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = re.compile(r"[+-]?Infinity")


def parse_benchmark_index(value: str | float | None) -> float | None:
    """Parse a BenchmarkIndex the way the calculator's input field does.

    Text is trimmed and read as a number.  Empty, unparseable and zero
    values all mean "no input yet" and return ``None``.

    Parameters
    ----------
    value : str | float | None
        Raw text from the input field, or an already numeric value.

    Returns
    -------
    float | None
        The score, or ``None`` when there is nothing to estimate.  May be
        infinite; :func:`~cpu_throttling_calculator.estimate.estimate_multiplier`
        treats that as absent too.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, (int, float)):
        number = _to_float(value)
    else:
        number = _parse_text(value)
    if number == 0 or math.isnan(number):
        return None
    return number


def _parse_text(text: str) -> float:
    """Return the numeric value of *text*, ``nan`` when it is not a number."""
    stripped = text.strip()
    if not stripped:
        return 0.0
    if _DECIMAL.fullmatch(stripped):
        return float(stripped)
    if _PREFIXED.fullmatch(stripped):
        return _to_float(int(stripped, 0))
    if _INFINITY.fullmatch(stripped):
        return float(stripped.replace("Infinity", "inf"))
    logger.debug("Ignoring non-numeric BenchmarkIndex input %r", text)
    return math.nan


def _to_float(value: int | float) -> float:
    """Convert to float, saturating integers beyond the float range to infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
