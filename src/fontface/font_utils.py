# src/fontface/font_utils.py
"""Font utilities: container sniffing, WOFF2 normalization and table extraction."""
import io
import logging
import struct
from pathlib import Path
from typing import Dict, Optional, Union

import brotli
from fontTools.ttLib import TTFont, TTLibError, woff2
from fontTools.ttLib.tables._n_a_m_e import _MAC_LANGUAGES, _WINDOWS_LANGUAGES

from fontface.errors import DecodeError
from fontface.models import (
    FontFlavor,
    FontImage,
    FvarTable,
    HeadTable,
    HheaTable,
    NameTable,
    Os2Table,
    ParsedFont,
    VariationAxis,
)

logger = logging.getLogger(__name__)

FAMILY_NAME_ID = 1
WOFF2_SIGNATURE = b"wOF2"

PLATFORM_UNICODE = 0
PLATFORM_MAC = 1
PLATFORM_WINDOWS = 3

# Operational failures raised by fontTools/brotli while reading damaged data.
# Anything outside this tuple is a bug and must propagate.
DECODE_FAILURES = (
    TTLibError,
    brotli.error,
    struct.error,
    ValueError,
    KeyError,
    IndexError,
    AssertionError,
    EOFError,
)


def sniff_format(path: Union[str, Path]) -> FontFlavor:
    """Classifies a font by its file extension only."""
    if Path(path).suffix.lower() == ".woff2":
        return FontFlavor.WOFF2
    return FontFlavor.SFNT


def read_font_image(path: Path) -> FontImage:
    """Reads a file into a FontImage tagged with its sniffed flavor."""
    return FontImage(data=path.read_bytes(), flavor=sniff_format(path))


def normalize_container(image: FontImage, source: str = "<memory>") -> bytes:
    """
    Returns bytes the table decoder can parse directly.
    WOFF2 input is decompressed to plain SFNT; everything else passes through.
    """
    if image.flavor is not FontFlavor.WOFF2:
        return image.data

    logger.info("Detected .woff2 format, converting to TTF...")
    output = io.BytesIO()
    try:
        # woff2.decompress also opens plain sfnt/WOFF data; only real WOFF2 is accepted here
        if image.data[:4] != WOFF2_SIGNATURE:
            raise TTLibError("Not a WOFF2 font (bad signature)")
        woff2.decompress(io.BytesIO(image.data), output)
    except DECODE_FAILURES as e:
        raise DecodeError(source, f"WOFF2 decompression failed: {e}") from e
    return output.getvalue()


def extract_tables(data: bytes, source: str = "<memory>") -> ParsedFont:
    """
    Decodes an SFNT buffer with fontTools and copies out the fields
    used for reporting and CSS derivation.
    """
    try:
        # fontNumber=0 picks the first face of a collection; ignored otherwise
        with TTFont(io.BytesIO(data), fontNumber=0) as ttfont:
            return _build_parsed_font(ttfont)
    except DECODE_FAILURES as e:
        raise DecodeError(source, str(e) or type(e).__name__) from e


def _build_parsed_font(ttfont: TTFont) -> ParsedFont:
    if "head" not in ttfont:
        raise TTLibError("font has no 'head' table, units-per-em is undefined")

    head = ttfont["head"]
    hhea = ttfont["hhea"] if "hhea" in ttfont else None
    os2 = ttfont["OS/2"] if "OS/2" in ttfont else None

    if hhea is not None:
        ascender, descender = hhea.ascent, hhea.descent
    elif os2 is not None:
        ascender, descender = os2.sTypoAscender, os2.sTypoDescender
    else:
        ascender, descender = 0, 0

    return ParsedFont(
        units_per_em=head.unitsPerEm,
        ascender=ascender,
        descender=descender,
        hhea=HheaTable(line_gap=hhea.lineGap) if hhea is not None else None,
        os2=_extract_os2(os2) if os2 is not None else None,
        head=HeadTable(
            x_min=head.xMin, y_min=head.yMin, x_max=head.xMax, y_max=head.yMax
        ),
        names=_extract_names(ttfont["name"]) if "name" in ttfont else None,
        fvar=_extract_fvar(ttfont["fvar"]) if "fvar" in ttfont else None,
    )


def _extract_os2(os2) -> Os2Table:
    # sCapHeight and sxHeight only exist from OS/2 version 2 on
    has_heights = getattr(os2, "version", 0) >= 2
    return Os2Table(
        cap_height=getattr(os2, "sCapHeight", None) if has_heights else None,
        x_height=getattr(os2, "sxHeight", None) if has_heights else None,
        weight_class=os2.usWeightClass,
        fs_selection=os2.fsSelection,
    )


def _locale_tag(record) -> Optional[str]:
    if record.platformID == PLATFORM_WINDOWS:
        return _WINDOWS_LANGUAGES.get(record.langID, f"0x{record.langID:04X}")
    if record.platformID == PLATFORM_MAC:
        return _MAC_LANGUAGES.get(record.langID, f"mac-{record.langID}")
    if record.platformID == PLATFORM_UNICODE:
        return "und"
    return None


def _extract_names(name_table) -> NameTable:
    """
    Collects family names (name ID 1) keyed by locale tag.
    A later record for the same tag replaces the text but keeps its position.
    """
    families: Dict[str, str] = {}
    for record in name_table.names:
        if record.nameID != FAMILY_NAME_ID:
            continue
        tag = _locale_tag(record)
        if tag is None:
            logger.debug(
                "Skipping name record on unknown platform %d", record.platformID
            )
            continue
        families[tag] = record.toUnicode(errors="replace")
    return NameTable(font_family=families)


def _extract_fvar(fvar) -> FvarTable:
    return FvarTable(
        axes=[
            VariationAxis(
                tag=axis.axisTag,
                min_value=axis.minValue,
                max_value=axis.maxValue,
                default_value=axis.defaultValue,
            )
            for axis in fvar.axes
        ]
    )
