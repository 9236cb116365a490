"""Shared data models for the throttling calculator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union


@dataclass(frozen=True)
class Prediction:
    """Estimated CPU slowdown multiplier with its confidence band.

    Parameters
    ----------
    multiplier : float
        Best estimate of the ``cpuSlowdownMultiplier`` for the device.
    range : tuple[float, float]
        ``(lower, upper)`` bounds of the multiplier the device might need.
        ``lower <= multiplier <= upper`` always holds.
    """

    multiplier: float
    range: tuple[float, float]
    kind: Literal["prediction"] = field(default="prediction", init=False)

    @property
    def lower_bound(self) -> float:
        return self.range[0]

    @property
    def upper_bound(self) -> float:
        return self.range[1]

    @property
    def confidence_range(self) -> float:
        """Full width of the confidence band."""
        return self.range[1] - self.range[0]


@dataclass(frozen=True)
class DeviceWarning:
    """The device cannot be throttled to match the target device.

    Parameters
    ----------
    message : str
        Human-readable explanation shown in place of a prediction.
    """

    message: str
    kind: Literal["warning"] = field(default="warning", init=False)


Estimate = Union[Prediction, DeviceWarning]


@dataclass(frozen=True)
class CalculationResult:
    """Output of a single calculator run.

    Parameters
    ----------
    benchmark_index : float | None
        Parsed score, or ``None`` when the input was absent.
    estimate : Prediction | DeviceWarning | None
        Estimator output; ``None`` when there is nothing to show.
    text : str
        Rendered output for the estimate (empty for ``None``).
    """

    benchmark_index: float | None
    estimate: Estimate | None
    text: str = ""
