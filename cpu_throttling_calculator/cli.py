"""Command-line front end for the throttling calculator."""

from __future__ import annotations

import argparse
import logging
import sys

from cpu_throttling_calculator.api import CalculatorSession
from cpu_throttling_calculator.config import CalculatorConfig, load_config
from cpu_throttling_calculator.models import CalculationResult
from cpu_throttling_calculator.render import render_html

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpu-throttling-calculator",
        description="Convert a Lighthouse BenchmarkIndex into a cpuSlowdownMultiplier.",
        epilog="Put values that start with '-' (e.g. -1e3) after '--': cpu-throttling-calculator -- -1e3",
    )
    parser.add_argument(
        "benchmark_index",
        nargs="?",
        help="BenchmarkIndex to convert. Omit to enter values interactively. Use '--' before negative values.",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file.")
    parser.add_argument("--html", action="store_true", help="Print an HTML fragment instead of text.")
    parser.add_argument("--links", action="store_true", help="List documentation about CPU throttling.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _format(result: CalculationResult, config: CalculatorConfig, html: bool) -> str:
    if html:
        return render_html(result.estimate, config)
    return result.text


def _format_links(config: CalculatorConfig) -> str:
    return "\n".join(f"{link.title}: {link.url}\n  {link.description}" for link in config.links)


def _interactive(session: CalculatorSession, html: bool) -> None:
    print("Enter your BenchmarkIndex. Type 'exit' to quit.")
    while True:
        try:
            user_input = input("\n> ")
        except EOFError:
            break
        if user_input.strip().lower() in EXIT_COMMANDS:
            break
        result = session.update(user_input)
        output = _format(result, session.config, html)
        if output:
            print(output)


def main(argv: list[str] | None = None) -> int:
    """Run the calculator.

    Parameters
    ----------
    argv : list[str] | None
        Arguments without the program name; ``sys.argv[1:]`` when omitted.

    Returns
    -------
    int
        ``0`` on success, ``1`` when a one-shot value has no estimate,
        ``2`` on invalid configuration.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    session = CalculatorSession(config)
    status = 0

    if args.benchmark_index is None:
        _interactive(session, args.html)
    else:
        result = session.update(args.benchmark_index)
        if result.estimate is None:
            logger.debug("No estimate for input %r", args.benchmark_index)
            print(f"Not a BenchmarkIndex: {args.benchmark_index!r}", file=sys.stderr)
            status = 1
        else:
            print(_format(result, config, args.html))

    if args.links:
        print()
        print(_format_links(config))
    return status
