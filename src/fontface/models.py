# src/fontface/models.py
"""
Data models for parsed font tables, generated CSS rules and batch results.
"""

import enum
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

ENGLISH_LOCALE = "en"
UNKNOWN_FAMILY = "Unknown"
DEFAULT_OUTPUT_NAME = "fonts.css"


class FontFlavor(enum.Enum):
    """Container format of a font file on disk."""

    SFNT = "sfnt"
    WOFF2 = "woff2"


def format_number(value: Union[int, float]) -> str:
    """
    Renders a table value the way the font reports it:
    integral values lose their fractional part (100.0 -> "100").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FontImage(BaseModel):
    """Raw bytes of a font file plus the container discriminant."""

    data: bytes
    flavor: FontFlavor

    model_config = ConfigDict(frozen=True)


class HheaTable(BaseModel):
    line_gap: int

    model_config = ConfigDict(frozen=True)


class Os2Table(BaseModel):
    cap_height: Optional[int] = None
    x_height: Optional[int] = None
    weight_class: int
    fs_selection: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def is_italic(self) -> bool:
        """Bit 0 of fsSelection. The oblique bit is not consulted."""
        return bool(self.fs_selection & 1)


class HeadTable(BaseModel):
    x_min: int
    y_min: int
    x_max: int
    y_max: int

    model_config = ConfigDict(frozen=True)


class NameTable(BaseModel):
    """Family names keyed by locale tag, in name-record order."""

    font_family: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def family_name(self) -> str:
        if ENGLISH_LOCALE in self.font_family:
            return self.font_family[ENGLISH_LOCALE]
        for value in self.font_family.values():
            return value
        return UNKNOWN_FAMILY


class VariationAxis(BaseModel):
    tag: str
    min_value: float
    max_value: float
    default_value: float

    model_config = ConfigDict(frozen=True)

    @field_validator("tag")
    @classmethod
    def check_tag_length(cls, v: str) -> str:
        if len(v) != 4:
            raise ValueError(f"axis tag must be 4 characters, got {v!r}")
        return v


class FvarTable(BaseModel):
    axes: List[VariationAxis] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def find_axis(self, tag: str) -> Optional[VariationAxis]:
        for axis in self.axes:
            if axis.tag == tag:
                return axis
        return None


class ParsedFont(BaseModel):
    """
    Structured view of the tables the inspector cares about.
    Optional tables are None when the font does not carry them.
    """

    units_per_em: int
    ascender: int
    descender: int

    hhea: Optional[HheaTable] = None
    os2: Optional[Os2Table] = None
    head: Optional[HeadTable] = None
    names: Optional[NameTable] = None
    fvar: Optional[FvarTable] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_variable(self) -> bool:
        return self.fvar is not None and len(self.fvar.axes) > 0


class CssFontFaceRule(BaseModel):
    """A single @font-face block."""

    font_family: str
    src: str
    font_weight: str
    font_style: str
    font_display: str = "swap"
    font_variation_settings: Optional[str] = None

    ascent_override: float
    descent_override: float
    line_gap_override: float

    model_config = ConfigDict(frozen=True)

    def declarations(self) -> List[str]:
        """CSS declarations in emission order, without trailing semicolons."""
        props = [
            f"font-family: '{self.font_family}'",
            f"src: url('{self.src}')",
            f"font-weight: {self.font_weight}",
            f"font-style: {self.font_style}",
            f"font-display: {self.font_display}",
        ]
        if self.font_variation_settings:
            props.append(f"font-variation-settings: {self.font_variation_settings}")

        props.append(f"ascent-override: {self.ascent_override:.4f}%")
        props.append(f"descent-override: {self.descent_override:.4f}%")
        props.append(f"line-gap-override: {self.line_gap_override:.4f}%")
        return props

    def render(self) -> str:
        body = ";\n".join(f"  {prop}" for prop in self.declarations())
        return f"@font-face {{\n{body};\n}}"


@dataclass
class FileFailure:
    """A font that was skipped, with the reason."""

    path: str
    kind: str
    cause: str


@dataclass
class BatchResult:
    """Rules and failures collected over one run, in input order."""

    rules: List[CssFontFaceRule] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)
    output_path: Optional[Path] = None

    def stylesheet(self) -> str:
        return "\n\n".join(rule.render() for rule in self.rules)


class InspectorConfig(BaseModel):
    """
    Run-time settings for a batch. Loaded from JSON and/or CLI flags.
    """

    output: Path = Path(DEFAULT_OUTPUT_NAME)
    separator_width: int = Field(default=50, ge=0)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_json(cls, path: Path) -> "InspectorConfig":
        logger.info("Loading configuration from %s", path)
        with open(path, "r", encoding="utf-8") as f:
            raw_config = json.load(f)
        return cls.model_validate(raw_config)
