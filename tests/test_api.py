"""Tests for calculate() and CalculatorSession."""

import pytest

from cpu_throttling_calculator.api import CalculatorSession, calculate
from cpu_throttling_calculator.config import CalculatorConfig
from cpu_throttling_calculator.models import DeviceWarning, Prediction


def test_calculate_text_input():
    result = calculate("1000")
    assert result.benchmark_index == 1000.0
    assert isinstance(result.estimate, Prediction)
    assert result.text.splitlines()[0] == "2.4x"


def test_calculate_numeric_input():
    result = calculate(1766)
    assert result.estimate.multiplier == pytest.approx(5.0)


def test_calculate_warning():
    result = calculate("100")
    assert isinstance(result.estimate, DeviceWarning)
    assert result.text.startswith("Warning\n")


@pytest.mark.parametrize("value", ["", "abc", "0", None, "Infinity"])
def test_calculate_absent(value):
    result = calculate(value)
    assert result.estimate is None
    assert result.text == ""


def test_calculate_with_dict_config():
    result = calculate("1000", {"command": "npx lighthouse"})
    assert result.text.endswith("npx lighthouse --throttling.cpuSlowdownMultiplier=2.4 <url>")


def test_calculate_with_config_object():
    result = calculate("1000", CalculatorConfig(precision=3))
    assert result.text.splitlines()[0] == "2.400x"


def test_calculate_idempotent():
    assert calculate("1533") == calculate("1533")


class TestCalculatorSession:
    def test_starts_absent(self):
        session = CalculatorSession()
        assert session.benchmark_index is None
        assert session.result.estimate is None

    def test_update_replaces_state(self):
        session = CalculatorSession()
        first = session.update("2000")
        second = session.update("500")
        assert first.estimate.multiplier == pytest.approx(6.0, abs=0.01)
        assert session.benchmark_index == 500.0
        assert session.result is second

    def test_invalid_update_clears_estimate(self):
        session = CalculatorSession()
        session.update("1000")
        result = session.update("not a number")
        assert result.estimate is None
        assert session.benchmark_index is None

    def test_updates_are_independent(self):
        session = CalculatorSession()
        session.update("100")
        assert session.update("1000") == calculate("1000")

    def test_clear(self):
        session = CalculatorSession()
        session.update("1000")
        assert session.clear().estimate is None
        assert session.benchmark_index is None

    def test_config_source(self, config_yaml):
        session = CalculatorSession(config_yaml)
        assert session.config.precision == 2
        assert session.update("1000").text.splitlines()[0] == "2.40x"
