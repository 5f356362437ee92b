# src/fontface.inspection.reporter.py
"""Human-readable metrics report for a parsed font"""

from typing import List

import click

from ..models import ParsedFont, format_number


def format_metrics(font: ParsedFont) -> List[str]:
    """
    Renders the metrics block in a fixed order.
    Lines for absent tables (or zero cap/x-height) are omitted.
    """
    lines = [
        "",
        "Font Metrics:",
        "-------------",
        f"- Units per Em: {font.units_per_em}",
        f"- Ascender: {font.ascender}",
        f"- Descender: {font.descender}",
    ]

    if font.hhea:
        lines.append(f"- Line Gap: {font.hhea.line_gap}")

    if font.os2:
        if font.os2.cap_height:
            lines.append(f"- Cap Height: {font.os2.cap_height}")
        if font.os2.x_height:
            lines.append(f"- X-Height: {font.os2.x_height}")

    if font.head:
        head = font.head
        lines.append(
            f"- Bounding Box: ({head.x_min}, {head.y_min}) to ({head.x_max}, {head.y_max})"
        )

    if font.is_variable:
        lines.extend(["", "Variable Font Axes:", "---------------------"])
        for axis in font.fvar.axes:
            lines.append(
                f"- Tag: '{axis.tag}', "
                f"Range: {format_number(axis.min_value)} to {format_number(axis.max_value)}, "
                f"Default: {format_number(axis.default_value)}"
            )

    return lines


def print_metrics(font: ParsedFont) -> None:
    """Writes the metrics block to stdout."""
    for line in format_metrics(font):
        click.echo(line)
