"""Tests for the command-line front end."""

import io

import pytest

from cpu_throttling_calculator.cli import main
from cpu_throttling_calculator.estimate import SLOW_DEVICE_MESSAGE


def test_one_shot(capsys):
    assert main(["1000"]) == 0
    out = capsys.readouterr().out
    assert out == "2.4x\n1.6x - 3.1x\nlighthouse --throttling.cpuSlowdownMultiplier=2.4 <url>\n"


def test_one_shot_warning(capsys):
    assert main(["100"]) == 0
    assert SLOW_DEVICE_MESSAGE in capsys.readouterr().out


def test_one_shot_negative_value(capsys):
    assert main(["-5"]) == 0
    assert "Warning" in capsys.readouterr().out


def test_one_shot_absent(capsys):
    assert main(["abc"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Not a BenchmarkIndex: 'abc'" in captured.err


def test_html(capsys):
    assert main(["1000", "--html"]) == 0
    assert '<div class="multiplier"' in capsys.readouterr().out


def test_links(capsys):
    assert main(["1000", "--links"]) == 0
    out = capsys.readouterr().out
    assert "Throttling: https://github.com/GoogleChrome/lighthouse/blob/master/docs/throttling.md" in out
    assert "Variability:" in out


def test_config_file(capsys, config_yaml):
    assert main(["1000", "--config", str(config_yaml)]) == 0
    assert "npx lighthouse --throttling.cpuSlowdownMultiplier=2.40 https://example.com" in capsys.readouterr().out


def test_invalid_config(capsys, monkeypatch):
    monkeypatch.setenv("CALCULATOR_PRECISION", "99")
    assert main(["1000"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_interactive(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1000\n\n100\nexit\n1533\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "2.4x" in out
    assert SLOW_DEVICE_MESSAGE in out
    assert "4.0x" not in out


def test_interactive_ends_on_eof(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1533\n"))
    assert main([]) == 0
    assert "4.0x" in capsys.readouterr().out


def test_interactive_survives_oversized_literal(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0x" + "f" * 300 + "\n1533\n"))
    assert main([]) == 0
    assert "4.0x" in capsys.readouterr().out


def test_one_shot_oversized_literal(capsys):
    assert main(["0x" + "f" * 300]) == 1
    assert "Not a BenchmarkIndex" in capsys.readouterr().err


def test_malformed_config_file(capsys, tmp_path):
    path = tmp_path / "calculator.yaml"
    path.write_text("links:\n  - title: Docs\n", encoding="utf-8")
    assert main(["1000", "--config", str(path)]) == 2
    assert "Invalid configuration: links[0]" in capsys.readouterr().err


def test_non_string_command_config(capsys, tmp_path):
    path = tmp_path / "calculator.yaml"
    path.write_text("command: 123\n", encoding="utf-8")
    assert main(["1000", "--config", str(path)]) == 2
    assert "command must be a non-empty string" in capsys.readouterr().err


def test_negative_exponent_value_after_separator(capsys):
    assert main(["--", "-1e3"]) == 0
    assert "Warning" in capsys.readouterr().out


def test_help_mentions_separator(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0
    assert "'--'" in capsys.readouterr().out
