"""Render estimates as terminal text or an HTML fragment."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path
from typing import Any

import jinja2

from cpu_throttling_calculator.config import CalculatorConfig
from cpu_throttling_calculator.models import DeviceWarning, Estimate, Prediction

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Numbers at or above this magnitude are written in exponent notation.
_FIXED_NOTATION_LIMIT = 1e21


def to_fixed(value: float, digits: int = 1) -> str:
    """Format *value* with *digits* decimals, rounding half away from zero.

    Matches JavaScript's ``Number.prototype.toFixed``: the exact binary
    value is rounded, so ``to_fixed(1.25)`` gives ``"1.3"`` where
    ``f"{1.25:.1f}"`` gives ``"1.2"``.

    Parameters
    ----------
    value : float
        Number to format.
    digits : int
        Digits after the decimal point.

    Returns
    -------
    str
    """
    if math.isnan(value):
        return "NaN"
    if abs(value) >= _FIXED_NOTATION_LIMIT:
        return repr(value).replace("inf", "Infinity")
    if value == 0:
        value = 0.0
    with localcontext() as ctx:
        ctx.prec = 64
        quantum = Decimal(1).scaleb(-digits)
        return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def throttling_command(multiplier: float, config: CalculatorConfig | None = None) -> str:
    """Return the Lighthouse command line that applies *multiplier*."""
    config = config or CalculatorConfig()
    value = to_fixed(multiplier, config.precision)
    return f"{config.command} --throttling.cpuSlowdownMultiplier={value} {config.url_placeholder}"


def render_text(estimate: Estimate | None, config: CalculatorConfig | None = None) -> str:
    """Render *estimate* for a terminal.

    Parameters
    ----------
    estimate : Prediction | DeviceWarning | None
        Estimator output.  ``None`` renders as an empty string.
    config : CalculatorConfig | None
        Formatting options; defaults apply when omitted.

    Returns
    -------
    str

    Raises
    ------
    TypeError
        If *estimate* is not an estimator result.
    """
    if estimate is None:
        return ""
    return _render("result.txt.j2", _variables(estimate, config or CalculatorConfig())).rstrip("\n")


def render_html(estimate: Estimate | None, config: CalculatorConfig | None = None) -> str:
    """Render *estimate* as an autoescaped HTML fragment.

    The fragment is a ``div.message`` block holding either the warning or
    the multiplier, its range, and the suggested command.  ``None`` yields
    the block with no content.
    """
    return _render("result.html.j2", _variables(estimate, config or CalculatorConfig()))


def _variables(estimate: Estimate | None, config: CalculatorConfig) -> dict[str, Any]:
    """Build template variables, pre-formatting every number."""
    if estimate is None or isinstance(estimate, DeviceWarning):
        return {"estimate": estimate}
    if not isinstance(estimate, Prediction):
        msg = f"Cannot render {type(estimate).__name__!r}; expected Prediction or DeviceWarning"
        raise TypeError(msg)
    return {
        "estimate": estimate,
        "multiplier": to_fixed(estimate.multiplier, config.precision),
        "lower": to_fixed(estimate.lower_bound, config.precision),
        "upper": to_fixed(estimate.upper_bound, config.precision),
        "command": throttling_command(estimate.multiplier, config),
    }


def _render(template_name: str, variables: dict[str, Any]) -> str:
    return _environment(template_name).get_template(template_name).render(**variables)


_ENVIRONMENTS: dict[bool, jinja2.Environment] = {}


def _environment(template_name: str) -> jinja2.Environment:
    """Return the (cached) environment for *template_name*, escaping HTML output."""
    autoescape = template_name.endswith(".html.j2")
    if autoescape not in _ENVIRONMENTS:
        _ENVIRONMENTS[autoescape] = jinja2.Environment(
            loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
            autoescape=autoescape,
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _ENVIRONMENTS[autoescape]
