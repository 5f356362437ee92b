# src/fontface/cli.py
"""
Main CLI entry point for fontface.
Inspects font files and writes their @font-face rules to one stylesheet.
"""

import logging
from pathlib import Path

import click

from .core import process_batch
from .models import InspectorConfig

logger = logging.getLogger(__name__)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]}, name="font-inspector"
)
@click.argument("font_paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Stylesheet path (default: fonts.css in the current directory).",
)
@click.option(
    "--config",
    "config_json",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with inspector settings.",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def main(font_paths, output, config_json, debug):
    """
    Print metrics for each FONT_PATH and emit CSS @font-face rules.

    Example: font-inspector font1.woff2 font2.ttf
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] %(funcName)s - %(message)s",
        force=True,  # Ensure we override any existing handlers
    )

    try:
        config = InspectorConfig.from_json(config_json) if config_json else InspectorConfig()
    except ValueError as e:
        # covers json.JSONDecodeError and pydantic.ValidationError
        raise click.BadParameter(str(e), param_hint="--config") from e

    if output is not None:
        config = config.model_copy(update={"output": output})

    process_batch(font_paths, config)


if __name__ == "__main__":
    main()
