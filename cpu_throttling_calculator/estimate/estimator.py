"""Piecewise-linear mapping from BenchmarkIndex to CPU slowdown multiplier."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cpu_throttling_calculator.models import DeviceWarning, Estimate, Prediction

SLOW_DEVICE_MESSAGE = "This device is too slow to accurately emulate the target Lighthouse device."


@dataclass(frozen=True)
class Bracket:
    """One linear segment of the estimator.

    Parameters
    ----------
    threshold : float
        Inclusive lower bound of the BenchmarkIndex for this segment.
    base_multiplier : float
        Multiplier at ``threshold``.
    index_per_step : float
        BenchmarkIndex increase that adds ``1.0`` to the multiplier.
    confidence_range : float | None
        Fixed width of the confidence band.  ``None`` means the width scales
        with the estimate (see :func:`_scaled_confidence_range`).
    """

    threshold: float
    base_multiplier: float
    index_per_step: float
    confidence_range: float | None = None

    def excess(self, score: float) -> float:
        return (score - self.threshold) / self.index_per_step


# Ordered highest threshold first.
#   2000 = 6x, 1766 = 5x, 1533 = 4x, 1300 = 3x, 800 = 2x, 150 = 1x
BRACKETS: tuple[Bracket, ...] = (
    Bracket(threshold=1300, base_multiplier=3, index_per_step=233),
    Bracket(threshold=800, base_multiplier=2, index_per_step=500, confidence_range=1.5),
    Bracket(threshold=150, base_multiplier=1, index_per_step=650, confidence_range=0.5),
)

MIN_BENCHMARK_INDEX = BRACKETS[-1].threshold


def _scaled_confidence_range(excess: float, multiplier: float) -> float:
    """Band width for the open-ended top segment: never narrower than 1.5x."""
    return max(excess, 1.5, multiplier * 0.3)


def estimate_multiplier(score: float | None) -> Estimate | None:
    """Estimate the ``cpuSlowdownMultiplier`` for a device's BenchmarkIndex.

    Parameters
    ----------
    score : float | None
        BenchmarkIndex reported by Lighthouse for the device.

    Returns
    -------
    Prediction | DeviceWarning | None
        ``None`` when *score* is missing or not finite; a
        :class:`DeviceWarning` when it is below ``MIN_BENCHMARK_INDEX``;
        otherwise a :class:`Prediction` from the first bracket whose
        threshold the score reaches.

    Examples
    --------
    >>> estimate_multiplier(1000)
    Prediction(multiplier=2.4, range=(1.65, 3.15), kind='prediction')
    """
    if score is None or not math.isfinite(score):
        return None

    for bracket in BRACKETS:
        if score < bracket.threshold:
            continue
        excess = bracket.excess(score)
        multiplier = bracket.base_multiplier + excess
        if bracket.confidence_range is None:
            confidence_range = _scaled_confidence_range(excess, multiplier)
        else:
            confidence_range = bracket.confidence_range
        lower_bound = multiplier - confidence_range / 2
        upper_bound = multiplier + confidence_range / 2
        return Prediction(multiplier=multiplier, range=(lower_bound, upper_bound))

    return DeviceWarning(message=SLOW_DEVICE_MESSAGE)
