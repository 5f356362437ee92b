# src/fontface/errors.py
"""Per-file failures raised by the inspection pipeline."""

from pathlib import Path
from typing import Union


class FontInspectorError(Exception):
    """Base exception for a font that could not be inspected."""

    kind = "error"

    def __init__(self, path: Union[str, Path], cause: str):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class FontFileNotFoundError(FontInspectorError):
    """The path does not resolve to a readable file."""

    kind = "file-not-found"


class DecodeError(FontInspectorError):
    """Decompression or table parsing failed."""

    kind = "decode"


class DerivationError(FontInspectorError):
    """The parsed tables cannot produce CSS descriptors (e.g. zero units-per-em)."""

    kind = "derivation"
