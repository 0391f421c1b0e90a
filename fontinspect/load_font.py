"""
fontinspect – load_font.py
==========================

fontTools adapter: decode a font blob into the immutable model of
``model.py``.

This is the only module that touches fontTools table objects. Everything
downstream (names, layout, report) works on the model, so it can be tested
without real font files.

Supported containers
--------------------
- TrueType / OpenType (``.ttf``, ``.otf``)
- WOFF / WOFF2 (WOFF2 needs ``brotli``)
- TrueType / OpenType Collections (``.ttc``, ``.otc``): one face per call,
  selected with ``face_index``.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTCollection, TTFont  # type: ignore[import]

from fontinspect.model import (
    Face,
    FaceMetrics,
    FeatureRecord,
    LangSystemRecord,
    LayoutTable,
    NamingRecord,
    ScriptRecord,
    Width,
)

COLLECTION_MAGIC = b"ttcf"

# OS/2 fsSelection bits
FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_BOLD = 1 << 5
FS_SELECTION_USE_TYPO_METRICS = 1 << 7
FS_SELECTION_OBLIQUE = 1 << 9

DEFAULT_WEIGHT = 400


class FontParseError(Exception):
    """The blob is not a readable font container."""


class FaceIndexError(FontParseError):
    """The requested face does not exist in the container."""


# -----------------------
# Table conversion
# -----------------------
def extract_names(tt: TTFont) -> tuple[NamingRecord, ...]:
    """Convert the ``name`` table, keeping font order and duplicates.

    Records whose bytes cannot be decoded with their platform encoding are
    kept with ``value=None``.
    """
    if "name" not in tt:
        return ()
    out: list[NamingRecord] = []
    for rec in tt["name"].names:  # type: ignore[attr-defined]
        try:
            value: str | None = rec.toUnicode()
        except (UnicodeDecodeError, LookupError):
            value = None
        out.append(
            NamingRecord(
                name_id=int(rec.nameID),
                value=value,
                platform_id=int(rec.platformID),
                encoding_id=int(rec.platEncID),
                language_id=int(rec.langID),
            )
        )
    return tuple(out)


def _lang_sys(lang_sys: Any, tag: str | None = None) -> LangSystemRecord:
    indices = getattr(lang_sys, "FeatureIndex", None) or []
    return LangSystemRecord(feature_indices=tuple(int(i) for i in indices), tag=tag)


def extract_layout_table(tt: TTFont, table_tag: str) -> LayoutTable | None:
    """Convert a GSUB or GPOS table; ``None`` if the font has no such table.

    A table without ``ScriptList`` or ``FeatureList`` converts to empty
    tuples, which callers treat exactly like an absent table.
    """
    if table_tag not in tt:
        return None
    table = tt[table_tag].table

    features: tuple[FeatureRecord, ...] = ()
    feature_list = getattr(table, "FeatureList", None)
    if feature_list:
        features = tuple(
            FeatureRecord(tag=rec.FeatureTag) for rec in feature_list.FeatureRecord
        )

    scripts: list[ScriptRecord] = []
    script_list = getattr(table, "ScriptList", None)
    if script_list:
        for rec in script_list.ScriptRecord:
            script = rec.Script
            default = script.DefaultLangSys
            scripts.append(
                ScriptRecord(
                    tag=rec.ScriptTag,
                    default_language=None if default is None else _lang_sys(default),
                    languages=tuple(
                        _lang_sys(lrec.LangSys, lrec.LangSysTag)
                        for lrec in (script.LangSysRecord or [])
                    ),
                )
            )

    return LayoutTable(scripts=tuple(scripts), features=features)


def _vertical_metrics(tt: TTFont) -> tuple[int, int, int]:
    """Return ``(ascender, descender, line_gap)``.

    ``OS/2`` typo metrics win when USE_TYPO_METRICS is set (OS/2 version 4
    and up); otherwise ``hhea`` is used, falling back to typo and then win
    metrics when ``hhea`` is zero.
    """
    os2 = tt["OS/2"] if "OS/2" in tt else None
    if (
        os2 is not None
        and os2.version >= 4
        and os2.fsSelection & FS_SELECTION_USE_TYPO_METRICS
    ):
        return (
            int(getattr(os2, "sTypoAscender", 0)),
            int(getattr(os2, "sTypoDescender", 0)),
            int(getattr(os2, "sTypoLineGap", 0)),
        )

    ascender = descender = line_gap = 0
    if "hhea" in tt:
        hhea = tt["hhea"]
        ascender, descender, line_gap = hhea.ascent, hhea.descent, hhea.lineGap

    if ascender == 0 and descender == 0 and os2 is not None:
        ascender = getattr(os2, "sTypoAscender", 0)
        descender = getattr(os2, "sTypoDescender", 0)
        line_gap = getattr(os2, "sTypoLineGap", 0)
        if ascender == 0 and descender == 0:
            ascender = getattr(os2, "usWinAscent", 0)
            descender = -getattr(os2, "usWinDescent", 0)

    return int(ascender), int(descender), int(line_gap)


def extract_metrics(tt: TTFont) -> FaceMetrics:
    ascender, descender, line_gap = _vertical_metrics(tt)

    units_per_em = int(tt["head"].unitsPerEm) if "head" in tt else 0
    glyph_count = int(tt["maxp"].numGlyphs) if "maxp" in tt else 0
    is_monospaced = bool(tt["post"].isFixedPitch) if "post" in tt else False

    fs_selection = 0
    weight = DEFAULT_WEIGHT
    width = Width.NORMAL
    os2_version = 0
    if "OS/2" in tt:
        os2 = tt["OS/2"]
        fs_selection = int(os2.fsSelection)
        weight = int(os2.usWeightClass)
        width = Width.from_class(int(os2.usWidthClass))
        os2_version = int(os2.version)

    return FaceMetrics(
        units_per_em=units_per_em,
        ascender=ascender,
        descender=descender,
        line_gap=line_gap,
        glyph_count=glyph_count,
        is_monospaced=is_monospaced,
        is_bold=bool(fs_selection & FS_SELECTION_BOLD),
        is_italic=bool(fs_selection & FS_SELECTION_ITALIC),
        # Italic wins over oblique; the oblique bit only exists from OS/2 v4 on
        is_oblique=(
            os2_version >= 4
            and not fs_selection & FS_SELECTION_ITALIC
            and bool(fs_selection & FS_SELECTION_OBLIQUE)
        ),
        weight=weight,
        width=width,
    )


def face_from_tt(tt: TTFont, face_index: int = 0, face_count: int = 1) -> Face:
    """Build a :class:`Face` from an open ``TTFont``."""
    return Face(
        names=extract_names(tt),
        gsub=extract_layout_table(tt, "GSUB"),
        gpos=extract_layout_table(tt, "GPOS"),
        metrics=extract_metrics(tt),
        face_index=face_index,
        face_count=face_count,
    )


# -----------------------
# Entry points
# -----------------------
def _parse_collection(data: bytes, face_index: int) -> Face:
    try:
        col = TTCollection(BytesIO(data), lazy=True)
    except Exception as e:
        raise FontParseError(f"Cannot open font collection: {e}") from e

    try:
        face_count = len(col.fonts)
        if not 0 <= face_index < face_count:
            raise FaceIndexError(
                f"face index {face_index} out of range "
                f"(collection has {face_count} faces)"
            )
        try:
            return face_from_tt(col.fonts[face_index], face_index, face_count)
        except Exception as e:
            raise FontParseError(f"Cannot decode face {face_index}: {e}") from e
    finally:
        col.close()


def parse_font(data: bytes, face_index: int = 0) -> Face:
    """Decode a font blob into a :class:`Face`.

    Args:
        data: Raw bytes of a font file.
        face_index: Face to decode inside a collection. Must be ``0`` for
            single-face containers.

    Returns:
        The decoded face.

    Raises:
        FaceIndexError: ``face_index`` does not name a face in the container.
        FontParseError: The data is not a recognizable font, or one of the
            tables the report needs cannot be decoded.
    """
    if face_index < 0:
        raise FaceIndexError(f"face index must not be negative, got {face_index}")

    if data[:4] == COLLECTION_MAGIC:
        return _parse_collection(data, face_index)

    if face_index != 0:
        raise FaceIndexError(
            f"face index {face_index} out of range (font has a single face)"
        )

    try:
        tt = TTFont(BytesIO(data), lazy=True, recalcBBoxes=False, recalcTimestamp=False)
    except Exception as e:
        raise FontParseError(f"Cannot open font: {e}") from e

    try:
        return face_from_tt(tt)
    except Exception as e:
        raise FontParseError(f"Cannot decode font: {e}") from e
    finally:
        tt.close()


def read_font(path: Path, face_index: int = 0) -> Face:
    """Read ``path`` and decode it; ``OSError`` propagates to the caller."""
    return parse_font(Path(path).read_bytes(), face_index)
