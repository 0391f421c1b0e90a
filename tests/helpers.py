from io import BytesIO

from fontTools.feaLib.builder import addOpenTypeFeaturesFromString
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontinspect.model import (
    Face,
    FeatureRecord,
    LangSystemRecord,
    LayoutTable,
    NamingRecord,
    ScriptRecord,
)

GLYPH_ORDER = [".notdef", "space", "a", "a.sc", "f", "i", "f_i"]

DEFAULT_FEA = """
languagesystem DFLT dflt;
languagesystem latn dflt;
languagesystem latn TRK;

feature liga {
    sub f i by f_i;
} liga;

feature smcp {
    sub a by a.sc;
} smcp;

feature kern {
    pos f i -20;
} kern;
"""

DEFAULT_NAMES = {
    "familyName": "Test Sans",
    "styleName": "Bold",
    "uniqueFontIdentifier": "Test Sans Bold; 1.000",
    "fullName": "Test Sans Bold",
    "psName": "TestSans-Bold",
    "version": "Version 1.000",
}


def make_table(scripts: list[tuple], features: list[str]) -> LayoutTable:
    """
    Factory helper for layout tables.

    ``scripts`` is a list of ``(tag, languages, default)`` tuples where
    ``languages`` is a list of feature-index lists and ``default`` is a
    feature-index list or ``None``.
    """
    return LayoutTable(
        scripts=tuple(
            ScriptRecord(
                tag=tag,
                default_language=(
                    None if default is None else LangSystemRecord(tuple(default))
                ),
                languages=tuple(LangSystemRecord(tuple(lang)) for lang in languages),
            )
            for tag, languages, default in scripts
        ),
        features=tuple(FeatureRecord(tag) for tag in features),
    )


def example_gsub() -> LayoutTable:
    return make_table(
        [
            ("latn", [[0]], [1]),
            ("cyrl", [], [0]),
        ],
        ["kern", "liga"],
    )


def make_names(*pairs: tuple[int, str | None]) -> tuple[NamingRecord, ...]:
    return tuple(NamingRecord(name_id=i, value=v) for i, v in pairs)


def make_face(**kwargs) -> Face:
    return Face(**kwargs)


def build_font_bytes(
    *,
    names: dict | None = None,
    fea: str | None = DEFAULT_FEA,
    os2: dict | None = None,
    is_fixed_pitch: int = 1,
) -> bytes:
    """Build a small TrueType font in memory and return its bytes."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap({0x20: "space", ord("a"): "a", ord("f"): "f", ord("i"): "i"})
    fb.setupGlyf({name: TTGlyphPen(None).glyph() for name in GLYPH_ORDER})
    fb.setupHorizontalMetrics({name: (500, 0) for name in GLYPH_ORDER})
    fb.setupHorizontalHeader(ascent=800, descent=-200, lineGap=90)
    fb.setupNameTable(DEFAULT_NAMES if names is None else names)

    os2_args = {
        "version": 4,
        "sTypoAscender": 750,
        "sTypoDescender": -250,
        "sTypoLineGap": 0,
        "usWinAscent": 900,
        "usWinDescent": 300,
        "usWeightClass": 700,
        "usWidthClass": 3,
        "fsSelection": 0x20,
    }
    if os2:
        os2_args.update(os2)
    fb.setupOS2(**os2_args)
    fb.setupPost(isFixedPitch=is_fixed_pitch)

    if fea:
        addOpenTypeFeaturesFromString(fb.font, fea)

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()
