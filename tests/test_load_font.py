from io import BytesIO

import pytest
from fontTools.ttLib import TTCollection, TTFont
from fontTools.ttLib.tables._n_a_m_e import makeName
from helpers import build_font_bytes

from fontinspect.layout import (
    collect_face_scripts,
    collect_gpos_features,
    collect_gsub_features,
)
from fontinspect.load_font import (
    FaceIndexError,
    FontParseError,
    parse_font,
    read_font,
)
from fontinspect.model import Width
from fontinspect.names import resolve_face_names


def _rewrite(data: bytes, edit) -> bytes:
    """Open ``data`` with fontTools, apply ``edit`` and return the saved bytes."""
    tt = TTFont(BytesIO(data))
    edit(tt)
    buf = BytesIO()
    tt.save(buf)
    return buf.getvalue()


def _zero_hhea(tt):
    tt["hhea"].ascent = 0
    tt["hhea"].descent = 0
    tt["hhea"].lineGap = 0


def test_parse_font_layout_features():
    face = parse_font(build_font_bytes())

    assert collect_gsub_features(face) == ["liga", "smcp"]
    assert collect_gpos_features(face) == ["kern"]
    assert collect_face_scripts(face) == ["DFLT", "latn"]


def test_parse_font_language_systems():
    face = parse_font(build_font_bytes())

    latn = next(s for s in face.gsub.scripts if s.tag == "latn")
    assert latn.default_language is not None
    assert [lang.tag for lang in latn.languages] == ["TRK "]
    assert latn.languages[0].feature_indices


def test_parse_font_names():
    face = parse_font(build_font_bytes())

    resolved = resolve_face_names(face)

    assert resolved.standard == {
        1: "Test Sans",
        2: "Bold",
        4: "Test Sans Bold",
        6: "TestSans-Bold",
        5: "Version 1.000",
    }
    assert resolved.fallback is None


def test_parse_font_names_fallback():
    data = build_font_bytes(
        names={"uniqueFontIdentifier": "Test-Unique", "licenseDescription": "OFL"}
    )

    resolved = resolve_face_names(parse_font(data))

    assert resolved.standard == {}
    assert (3, "Test-Unique") in resolved.fallback
    assert (13, "OFL") in resolved.fallback


def _add_undecodable_names(tt):
    name = tt["name"]
    name.removeNames(nameID=1, platformID=3)
    # odd-length UTF-16BE payload
    name.names.append(makeName(b"\x00T\x00", 1, 3, 1, 0x409))
    # encoding 7 has no codec; ASCII fallback fails on high bytes
    name.names.append(makeName(b"\xff\xfeX", 256, 3, 7, 0x409))


def test_parse_font_undecodable_names():
    face = parse_font(_rewrite(build_font_bytes(), _add_undecodable_names))

    bad = {
        (rec.name_id, rec.platform_id, rec.encoding_id): rec.value
        for rec in face.names
        if rec.platform_id == 3 and rec.name_id in (1, 256)
    }
    assert bad == {(1, 3, 1): None, (256, 3, 7): None}

    resolved = resolve_face_names(face)
    # the Macintosh record still provides the family name
    assert resolved.standard[1] == "Test Sans"
    assert resolved.fallback is None


def test_parse_font_metrics_from_hhea():
    face = parse_font(build_font_bytes())
    m = face.metrics

    assert m.units_per_em == 1000
    assert m.ascender == 800
    assert m.descender == -200
    assert m.line_gap == 90
    assert m.glyph_count == 7
    assert m.is_monospaced is True
    assert m.is_bold is True
    assert m.is_italic is False
    assert m.is_oblique is False
    assert m.weight == 700
    assert m.width is Width.CONDENSED


def test_parse_font_metrics_use_typo_metrics():
    data = build_font_bytes(os2={"fsSelection": 0x80, "sTypoLineGap": 50})
    m = parse_font(data).metrics

    assert (m.ascender, m.descender, m.line_gap) == (750, -250, 50)
    assert m.is_bold is False


def test_parse_font_use_typo_metrics_ignored_before_os2_v4():
    data = build_font_bytes(os2={"version": 3, "fsSelection": 0x80})
    m = parse_font(data).metrics

    assert (m.ascender, m.descender, m.line_gap) == (800, -200, 90)


def test_parse_font_italic_wins_over_oblique():
    m = parse_font(build_font_bytes(os2={"fsSelection": 0x200 | 0x01})).metrics

    assert m.is_italic is True
    assert m.is_oblique is False


def test_parse_font_oblique():
    m = parse_font(build_font_bytes(os2={"fsSelection": 0x200})).metrics

    assert m.is_italic is False
    assert m.is_oblique is True


def test_parse_font_oblique_bit_needs_os2_v4():
    data = build_font_bytes(os2={"version": 3, "fsSelection": 0x200})

    assert parse_font(data).metrics.is_oblique is False


def test_parse_font_metrics_fall_back_to_typo_when_hhea_is_zero():
    data = _rewrite(build_font_bytes(), _zero_hhea)
    m = parse_font(data).metrics

    assert (m.ascender, m.descender, m.line_gap) == (750, -250, 0)


def test_parse_font_metrics_fall_back_to_win_when_typo_is_zero():
    data = _rewrite(
        build_font_bytes(os2={"sTypoAscender": 0, "sTypoDescender": 0}), _zero_hhea
    )
    m = parse_font(data).metrics

    assert (m.ascender, m.descender) == (900, -300)


def test_parse_font_width_out_of_range():
    data = build_font_bytes(os2={"usWidthClass": 12}, is_fixed_pitch=0)
    m = parse_font(data).metrics

    assert m.width is Width.NORMAL
    assert m.is_monospaced is False


def test_parse_font_without_layout_tables():
    face = parse_font(build_font_bytes(fea=None))

    assert face.gsub is None
    assert face.gpos is None
    assert collect_gsub_features(face) == []
    assert collect_face_scripts(face) == []


def test_parse_font_gsub_without_script_list():
    def drop_script_list(tt):
        tt["GSUB"].table.ScriptList = None

    face = parse_font(_rewrite(build_font_bytes(), drop_script_list))

    assert face.gsub is not None
    assert face.gsub.scripts == ()
    assert [f.tag for f in face.gsub.features] == ["liga", "smcp"]
    assert collect_gsub_features(face) == []
    assert collect_face_scripts(face) == ["DFLT", "latn"]


def test_parse_font_gsub_only():
    fea = "feature liga { sub f i by f_i; } liga;"
    face = parse_font(build_font_bytes(fea=fea))

    assert collect_gsub_features(face) == ["liga"]
    assert face.gpos is None
    assert collect_gpos_features(face) == []
    assert collect_face_scripts(face) == ["DFLT"]


def test_parse_font_rejects_garbage():
    with pytest.raises(FontParseError):
        parse_font(b"this is not a font file at all")


def test_parse_font_rejects_empty_data():
    with pytest.raises(FontParseError):
        parse_font(b"")


def test_parse_font_face_index_on_single_font():
    data = build_font_bytes()

    with pytest.raises(FaceIndexError):
        parse_font(data, face_index=1)
    with pytest.raises(FaceIndexError):
        parse_font(data, face_index=-1)


def _collection_bytes() -> bytes:
    col = TTCollection()
    col.fonts = [
        TTFont(BytesIO(build_font_bytes())),
        TTFont(
            BytesIO(
                build_font_bytes(
                    names={"familyName": "Second Sans", "styleName": "Regular"},
                    fea=None,
                )
            )
        ),
    ]
    buf = BytesIO()
    col.save(buf)
    return buf.getvalue()


def test_parse_font_collection():
    data = _collection_bytes()

    first = parse_font(data, face_index=0)
    second = parse_font(data, face_index=1)

    assert (first.face_index, first.face_count) == (0, 2)
    assert (second.face_index, second.face_count) == (1, 2)
    assert resolve_face_names(first).standard[1] == "Test Sans"
    assert resolve_face_names(second).standard[1] == "Second Sans"
    assert collect_gsub_features(second) == []


def test_parse_font_collection_index_out_of_range():
    with pytest.raises(FaceIndexError):
        parse_font(_collection_bytes(), face_index=2)


def test_read_font(tmp_path):
    path = tmp_path / "test.ttf"
    path.write_bytes(build_font_bytes())

    face = read_font(path)

    assert collect_gpos_features(face) == ["kern"]


def test_read_font_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_font(tmp_path / "missing.ttf")
