"""Estimator: BenchmarkIndex to CPU slowdown multiplier."""

from cpu_throttling_calculator.estimate.estimator import (
    BRACKETS,
    MIN_BENCHMARK_INDEX,
    SLOW_DEVICE_MESSAGE,
    Bracket,
    estimate_multiplier,
)

__all__ = ["BRACKETS", "MIN_BENCHMARK_INDEX", "SLOW_DEVICE_MESSAGE", "Bracket", "estimate_multiplier"]
