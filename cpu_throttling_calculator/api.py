"""Package-level entry points: calculate() and CalculatorSession."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from cpu_throttling_calculator.config import CalculatorConfig, load_config
from cpu_throttling_calculator.estimate import estimate_multiplier
from cpu_throttling_calculator.models import CalculationResult
from cpu_throttling_calculator.parsing import parse_benchmark_index
from cpu_throttling_calculator.render import render_text

logger = logging.getLogger(__name__)


def _resolve_config(config: CalculatorConfig | str | Path | dict[str, Any] | None) -> CalculatorConfig:
    if isinstance(config, CalculatorConfig):
        return config
    return load_config(config)


def calculate(
    value: str | float | None,
    config: CalculatorConfig | str | Path | dict[str, Any] | None = None,
) -> CalculationResult:
    """Estimate and render the throttling multiplier for one input value.

    Parameters
    ----------
    value : str | float | None
        BenchmarkIndex as typed by the user, or a number.
    config : CalculatorConfig | str | Path | dict | None
        Rendering configuration, or a source accepted by
        :func:`~cpu_throttling_calculator.config.load_config`.

    Returns
    -------
    CalculationResult
        Parsed score, estimate, and rendered text.  Absent input yields
        ``estimate=None`` and empty text.

    Examples
    --------
    >>> calculate("1000").text.splitlines()[0]
    '2.4x'
    """
    config = _resolve_config(config)
    benchmark_index = parse_benchmark_index(value)
    estimate = estimate_multiplier(benchmark_index)
    result = CalculationResult(
        benchmark_index=benchmark_index,
        estimate=estimate,
        text=render_text(estimate, config),
    )

    logger.debug(
        "Calculated benchmark_index=%s kind=%s",
        benchmark_index,
        estimate.kind if estimate is not None else "absent",
    )
    return result


class CalculatorSession:
    """Owns the current BenchmarkIndex and recomputes on every change.

    Parameters
    ----------
    config : CalculatorConfig | str | Path | dict | None
        Rendering configuration shared by all updates.
    """

    def __init__(self, config: CalculatorConfig | str | Path | dict[str, Any] | None = None) -> None:
        self.config = _resolve_config(config)
        self._result = CalculationResult(benchmark_index=None, estimate=None)

    @property
    def benchmark_index(self) -> float | None:
        return self._result.benchmark_index

    @property
    def result(self) -> CalculationResult:
        return self._result

    def update(self, value: str | float | None) -> CalculationResult:
        """Replace the current input with *value* and return the new result."""
        self._result = calculate(value, self.config)
        return self._result

    def clear(self) -> CalculationResult:
        """Reset to the absent state."""
        return self.update(None)
