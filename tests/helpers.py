# tests/helpers.py
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontface.models import (
    HeadTable,
    HheaTable,
    NameTable,
    Os2Table,
    ParsedFont,
    VariationAxis,
)

# Bit 6 (REGULAR) vs bit 0 (ITALIC) of OS/2.fsSelection
FS_REGULAR = 0x40
FS_ITALIC = 0x01

WEIGHT_SLANT_AXES = [
    ("wght", 100, 400, 900, "Weight"),
    ("slnt", -10, 0, 0, "Slant"),
]


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_font_file(
    path: Path,
    family: str = "Test Sans",
    upm: int = 1000,
    ascent: int = 800,
    descent: int = -200,
    line_gap: int = 100,
    weight: int = 400,
    italic: bool = False,
    axes=None,
    flavor=None,
    drop_tables=(),
) -> Path:
    """
    Writes a minimal but real TrueType font with fontTools' FontBuilder.
    `axes` are (tag, min, default, max, name) tuples and make the font variable.
    """
    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({0x41: "A"})
    fb.setupGlyf({".notdef": _box_glyph(), "A": _box_glyph()})
    fb.setupMaxp()
    fb.setupHorizontalMetrics({".notdef": (600, 0), "A": (600, 0)})
    fb.setupHorizontalHeader(ascent=ascent, descent=descent, lineGap=line_gap)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(
        version=4,
        sTypoAscender=ascent,
        sTypoDescender=descent,
        sTypoLineGap=line_gap,
        usWinAscent=ascent,
        usWinDescent=abs(descent),
        usWeightClass=weight,
        fsSelection=FS_ITALIC if italic else FS_REGULAR,
        sCapHeight=700,
        sxHeight=500,
    )
    fb.setupPost()
    if axes:
        fb.setupFvar(axes=axes, instances=[])

    for tag in drop_tables:
        del fb.font[tag]

    if flavor:
        fb.font.flavor = flavor
    fb.save(str(path))
    return path


def make_parsed_font(**overrides) -> ParsedFont:
    """A complete static ParsedFont (upm 1000, 800/-200, gap 100) with overrides."""
    fields = {
        "units_per_em": 1000,
        "ascender": 800,
        "descender": -200,
        "hhea": HheaTable(line_gap=100),
        "os2": Os2Table(cap_height=700, x_height=500, weight_class=400, fs_selection=0),
        "head": HeadTable(x_min=0, y_min=-200, x_max=500, y_max=800),
        "names": NameTable(font_family={"en": "Test Sans"}),
        "fvar": None,
    }
    fields.update(overrides)
    return ParsedFont(**fields)


def make_axis(tag, min_value, default_value, max_value) -> VariationAxis:
    return VariationAxis(
        tag=tag, min_value=min_value, max_value=max_value, default_value=default_value
    )
