# src/fontface/engines/descriptor_engine.py
"""
Derives CSS @font-face descriptors from parsed font tables.
Responsible for:
1. Choosing the family name (English, first locale, or "Unknown").
2. Weight and style, as single values for static fonts or axis ranges for variable fonts.
3. Ascent, descent and line-gap overrides as percentages of the em.
"""

import logging
from typing import Optional, Tuple

from ..errors import DerivationError
from ..models import CssFontFaceRule, Os2Table, ParsedFont, format_number

logger = logging.getLogger(__name__)

WEIGHT_AXIS = "wght"
SLANT_AXIS = "slnt"


def is_complete(font: ParsedFont) -> bool:
    """True when the name, OS/2 and hhea tables needed for a rule are all present."""
    return font.names is not None and font.os2 is not None and font.hhea is not None


def static_style(os2: Os2Table) -> str:
    return "italic" if os2.is_italic else "normal"


def variable_weight_and_style(font: ParsedFont) -> Tuple[str, str, str]:
    """Returns (font-weight, font-style, font-variation-settings) for a variable font."""
    os2 = font.os2
    fvar = font.fvar

    weight_axis = fvar.find_axis(WEIGHT_AXIS)
    if weight_axis:
        weight = (
            f"{format_number(weight_axis.min_value)} "
            f"{format_number(weight_axis.max_value)}"
        )
    else:
        weight = str(os2.weight_class)

    slant_axis = fvar.find_axis(SLANT_AXIS)
    if slant_axis:
        style = (
            f"oblique {format_number(slant_axis.min_value)}deg "
            f"{format_number(slant_axis.max_value)}deg"
        )
    else:
        style = static_style(os2)

    settings = ", ".join(
        f"'{axis.tag}' {format_number(axis.default_value)}" for axis in fvar.axes
    )
    return weight, style, settings


def metric_overrides(font: ParsedFont, source: str) -> Tuple[float, float, float]:
    """
    Returns (ascent, descent, line-gap) as percentages of unitsPerEm.
    """
    upm = font.units_per_em
    if upm <= 0:
        raise DerivationError(source, f"invalid unitsPerEm {upm}")

    line_gap = font.hhea.line_gap
    return (
        font.ascender / upm * 100,
        abs(font.descender) / upm * 100,
        line_gap / upm * 100,
    )


def derive_font_face(font: ParsedFont, src: str) -> Optional[CssFontFaceRule]:
    """
    Builds the @font-face rule for a parsed font.
    Returns None when name, OS/2 or hhea is missing; that is a skip, not an error.
    `src` is used verbatim as the url() token.
    """
    if not is_complete(font):
        logger.debug("Skipping CSS for %s: name, OS/2 or hhea table missing", src)
        return None

    ascent, descent, line_gap = metric_overrides(font, src)

    variation_settings = None
    if font.is_variable:
        weight, style, variation_settings = variable_weight_and_style(font)
    else:
        weight = str(font.os2.weight_class)
        style = static_style(font.os2)

    return CssFontFaceRule(
        font_family=font.names.family_name(),
        src=src,
        font_weight=weight,
        font_style=style,
        font_variation_settings=variation_settings,
        ascent_override=ascent,
        descent_override=descent,
        line_gap_override=line_gap,
    )
