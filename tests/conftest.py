"""Shared fixtures for calculator tests."""

import pytest

from cpu_throttling_calculator.config import CalculatorConfig

CONFIG_ENV_VARS = ("CALCULATOR_COMMAND", "CALCULATOR_URL_PLACEHOLDER", "CALCULATOR_PRECISION")


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    """Keep the developer's environment from leaking into config tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def default_config():
    return CalculatorConfig()


@pytest.fixture()
def config_yaml(tmp_path):
    """YAML config file overriding every field."""
    path = tmp_path / "calculator.yaml"
    path.write_text(
        "command: npx lighthouse\n"
        "url_placeholder: https://example.com\n"
        "precision: 2\n"
        "links:\n"
        "  - title: Docs\n"
        "    url: https://example.com/docs\n"
        "    description: Example docs.\n",
        encoding="utf-8",
    )
    return path
