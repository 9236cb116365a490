"""Convert a Lighthouse BenchmarkIndex into a CPU slowdown multiplier."""

from cpu_throttling_calculator.api import CalculatorSession, calculate
from cpu_throttling_calculator.config import CalculatorConfig, ResourceLink, load_config
from cpu_throttling_calculator.estimate import SLOW_DEVICE_MESSAGE, estimate_multiplier
from cpu_throttling_calculator.models import CalculationResult, DeviceWarning, Estimate, Prediction
from cpu_throttling_calculator.parsing import parse_benchmark_index
from cpu_throttling_calculator.render import render_html, render_text, throttling_command, to_fixed

__all__ = [
    "SLOW_DEVICE_MESSAGE",
    "CalculationResult",
    "CalculatorConfig",
    "CalculatorSession",
    "DeviceWarning",
    "Estimate",
    "Prediction",
    "ResourceLink",
    "calculate",
    "estimate_multiplier",
    "load_config",
    "parse_benchmark_index",
    "render_html",
    "render_text",
    "throttling_command",
    "to_fixed",
]
