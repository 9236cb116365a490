"""Result rendering: number formatting, text and HTML templates."""

from cpu_throttling_calculator.render.renderer import render_html, render_text, throttling_command, to_fixed

__all__ = ["render_html", "render_text", "throttling_command", "to_fixed"]
