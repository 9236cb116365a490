"""Unified configuration for the calculator's presentation layer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

MAX_PRECISION = 20


@dataclass
class ResourceLink:
    """A documentation link shown next to the calculator.

    Parameters
    ----------
    title : str
        Short link label.
    url : str
        Target address.
    description : str
        One-sentence summary of the linked page.
    """

    title: str
    url: str
    description: str = ""


def _default_links() -> list[ResourceLink]:
    return [
        ResourceLink(
            title="Throttling",
            url="https://github.com/GoogleChrome/lighthouse/blob/master/docs/throttling.md#cpu-throttling",
            description="Read about CPU throttling in Lighthouse and how to calibrate.",
        ),
        ResourceLink(
            title="Variability",
            url="https://github.com/GoogleChrome/lighthouse/blob/master/docs/variability.md",
            description="Find in-depth information about variance in Lighthouse scores.",
        ),
    ]


@dataclass
class CalculatorConfig:
    """Top-level configuration for rendering calculator results.

    Parameters
    ----------
    command : str
        Executable shown in the suggested command line.
    url_placeholder : str
        Placeholder appended after the throttling flag.
    precision : int
        Digits after the decimal point for multipliers and bounds.
    links : list[ResourceLink]
        Documentation links listed by the CLI.
    """

    command: str = "lighthouse"
    url_placeholder: str = "<url>"
    precision: int = 1
    links: list[ResourceLink] = field(default_factory=_default_links)

    def __post_init__(self) -> None:
        if not isinstance(self.command, str) or not self.command.strip():
            msg = "command must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.url_placeholder, str):
            msg = f"url_placeholder must be a string, got {type(self.url_placeholder).__name__}"
            raise ValueError(msg)
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            msg = f"precision must be an integer, got {self.precision!r}"
            raise ValueError(msg)
        if not 0 <= self.precision <= MAX_PRECISION:
            msg = f"precision must be between 0 and {MAX_PRECISION}, got {self.precision}"
            raise ValueError(msg)


def load_config(source: str | Path | dict[str, Any] | None = None) -> CalculatorConfig:
    """Load a CalculatorConfig from a YAML file, dict, or environment variables.

    Parameters
    ----------
    source : str | Path | dict | None
        A path to a YAML file, a raw dict, or ``None`` to use only
        environment variable overrides on defaults.

    Returns
    -------
    CalculatorConfig

    Raises
    ------
    ValueError
        If the resulting values fail validation.
    """
    raw: dict[str, Any] = {}

    if isinstance(source, dict):
        raw = source
    elif source is not None:
        path = Path(source)
        if path.is_file():
            raw = _load_yaml(path)
        else:
            logger.warning("Config file not found, using defaults: %s", path)

    if not isinstance(raw, dict):
        msg = f"Config must be a mapping, got {type(raw).__name__}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {
        "command": os.environ.get("CALCULATOR_COMMAND", raw.get("command", "lighthouse")),
        "url_placeholder": os.environ.get("CALCULATOR_URL_PLACEHOLDER", raw.get("url_placeholder", "<url>")),
        "precision": _parse_precision(os.environ.get("CALCULATOR_PRECISION", raw.get("precision", 1))),
    }

    if "links" in raw:
        kwargs["links"] = _parse_links(raw["links"])

    unknown = set(raw) - {"command", "url_placeholder", "precision", "links"}
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    return CalculatorConfig(**kwargs)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file using PyYAML."""
    with open(path, encoding="utf-8") as fh:
        try:
            return yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in {path}: {exc}"
            raise ValueError(msg) from exc


def _parse_precision(value: Any) -> int:
    """Accept an int or an integer string; reject floats and booleans."""
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            msg = f"precision must be an integer, got {value!r}"
            raise ValueError(msg) from None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"precision must be an integer, got {value!r}"
        raise ValueError(msg)
    return value


def _parse_links(entries: Any) -> list[ResourceLink]:
    """Build ResourceLinks from the ``links`` config section."""
    if entries is None:
        return []
    if not isinstance(entries, list):
        msg = f"links must be a list, got {type(entries).__name__}"
        raise ValueError(msg)

    links: list[ResourceLink] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            msg = f"links[{i}] must be a mapping, got {type(entry).__name__}"
            raise ValueError(msg)
        for key in ("title", "url"):
            if not isinstance(entry.get(key), str):
                msg = f"links[{i}] missing required string field: {key!r}"
                raise ValueError(msg)
        links.append(
            ResourceLink(
                title=entry["title"],
                url=entry["url"],
                description=str(entry.get("description", "")),
            )
        )
    return links
