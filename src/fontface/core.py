# src/fontface/core.py
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

import click

from fontface.engines.descriptor_engine import derive_font_face
from fontface.errors import FontFileNotFoundError, FontInspectorError
from fontface.font_utils import extract_tables, normalize_container, read_font_image
from fontface.inspection.reporter import print_metrics
from fontface.models import (
    BatchResult,
    CssFontFaceRule,
    FileFailure,
    InspectorConfig,
    ParsedFont,
)

logger = logging.getLogger(__name__)

MetricsSink = Callable[[ParsedFont], None]


@dataclass
class FontInspection:
    """Outcome of running the pipeline on one font file."""

    path: Path
    font: ParsedFont
    rule: Optional[CssFontFaceRule]


def load_font(path: Path) -> ParsedFont:
    """Reads, normalizes and decodes a single font file."""
    if not path.is_file():
        raise FontFileNotFoundError(path, "File not found")

    logger.info("Inspecting font: %s", path)

    try:
        image = read_font_image(path)
    except OSError as e:
        raise FontFileNotFoundError(path, f"Cannot read file: {e}") from e

    data = normalize_container(image, source=str(path))
    return extract_tables(data, source=str(path))


def process_font(
    path: Path, report: Optional[MetricsSink] = print_metrics
) -> FontInspection:
    """
    Runs sniff -> normalize -> extract -> (report, derive) for one path.
    `path` should already be absolute; it is used verbatim as the CSS src.
    """
    font = load_font(path)

    if report is not None:
        report(font)

    rule = derive_font_face(font, str(path))
    return FontInspection(path=path, font=font, rule=rule)


def process_batch(
    paths: Iterable[Union[str, Path]],
    config: Optional[InspectorConfig] = None,
    report: Optional[MetricsSink] = print_metrics,
) -> BatchResult:
    """Main entry point: inspects every path in order and writes the stylesheet."""
    paths = list(paths)
    if not paths:
        raise click.UsageError("Please provide at least one path to a font file.")

    config = config or InspectorConfig()
    result = BatchResult()

    for raw_path in paths:
        # absolute, but symlinks are kept: the path is used verbatim as the CSS src
        font_path = Path(os.path.abspath(raw_path))

        try:
            inspection = process_font(font_path, report=report)
        except FontInspectorError as e:
            # One bad font must not abort the batch.
            logger.error("Could not process %s: %s", e.path, e.cause)
            result.failures.append(FileFailure(path=e.path, kind=e.kind, cause=e.cause))
        else:
            if inspection.rule is not None:
                result.rules.append(inspection.rule)

        click.echo("\n" + "-" * config.separator_width + "\n")

    if result.rules:
        result.output_path = write_stylesheet(result, config.output)
        click.echo(f"All CSS @font-face rules have been saved to: {result.output_path}")
    else:
        click.echo("No valid fonts were processed, so no CSS file was generated.")

    return result


def write_stylesheet(result: BatchResult, output: Path) -> Path:
    """Writes all rules in one go, replacing any previous file."""
    output_path = Path(os.path.abspath(output))
    output_path.write_text(result.stylesheet(), encoding="utf-8")
    logger.debug("Wrote %d rule(s) to %s", len(result.rules), output_path)
    return output_path
