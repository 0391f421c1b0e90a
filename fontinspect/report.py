"""
fontinspect – report.py
=======================

Rendering stage: turns the query results for one face into either a boxed
text report or a JSON-friendly dictionary.

This module never inspects font binaries; every value comes from the
queries in ``names.py`` and ``layout.py`` and from ``Face.metrics``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fontinspect.feature_names import describe_feature
from fontinspect.layout import (
    collect_face_scripts,
    collect_gpos_features,
    collect_gsub_features,
)
from fontinspect.model import Face
from fontinspect.names import (
    NAME_ID_FAMILY,
    NAME_ID_FULLNAME,
    NAME_ID_POSTSCRIPT,
    NAME_ID_SUBFAMILY,
    NAME_ID_VERSION,
    resolve_face_names,
)

# --- Layout ---
BOX_WIDTH = 64
LABEL_WIDTH = 18

NAME_LABELS: dict[int, str] = {
    NAME_ID_FAMILY: "Family Name",
    NAME_ID_SUBFAMILY: "Subfamily",
    NAME_ID_FULLNAME: "Full Name",
    NAME_ID_POSTSCRIPT: "PostScript Name",
    NAME_ID_VERSION: "Version",
}


# -----------------------
# Text helpers
# -----------------------
def _heading(title: str) -> str:
    return f"┌─ {title} ".ljust(BOX_WIDTH, "─")


def _footer() -> str:
    return "└".ljust(BOX_WIDTH, "─")


def _field(label: str, value: object) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return f"│ {(label + ':').ljust(LABEL_WIDTH)}{value}"


def _tag_lines(label: str, lines: list[str]) -> list[str]:
    """Prefix the first line with ``label`` and indent the rest to match."""
    first = f"│ {label}:"
    rest = "│" + " " * (len(first) - 1)
    return [f"{first if i == 0 else rest} {line}" for i, line in enumerate(lines)]


def _feature_section(title: str, table_tag: str, features: list[str]) -> list[str]:
    out = [_heading(title)]
    if not features:
        out.append(f"│ No {table_tag} features found")
    else:
        out.extend(
            _tag_lines("Features", [f"{t} - {describe_feature(t)}" for t in features])
        )
    out.append(_footer())
    return out


# -----------------------
# Sections
# -----------------------
def render_header(face: Face, path: Path | str) -> list[str]:
    rule = "═" * (BOX_WIDTH - 1)
    out = [f"╔{rule}", "║ FONT INFORMATION", f"╠{rule}", f"║ File: {path}"]
    if face.face_count > 1:
        out.append(f"║ Face: {face.face_index} of {face.face_count}")
    out.append(f"╚{rule}")
    return out


def render_names(face: Face) -> list[str]:
    resolved = resolve_face_names(face)
    out = [_heading("FONT NAMES")]
    for name_id, value in resolved.standard.items():
        out.append(_field(NAME_LABELS[name_id], value))

    if resolved.fallback is not None:
        out.append("│ No standard name entries found")
        out.append("│")
        out.append("│ Available names:")
        for name_id, value in resolved.fallback:
            out.append(f"│   [ID {name_id}] {value}")

    out.append(_footer())
    return out


def render_metrics(face: Face) -> list[str]:
    m = face.metrics
    return [
        _heading("FONT METRICS"),
        _field("Units per EM", m.units_per_em),
        _field("Ascender", m.ascender),
        _field("Descender", m.descender),
        _field("Line Gap", m.line_gap),
        _field("Glyph Count", m.glyph_count),
        _field("Is Monospaced", m.is_monospaced),
        _field("Is Bold", m.is_bold),
        _field("Is Italic", m.is_italic),
        _field("Is Oblique", m.is_oblique),
        _field("Weight", m.weight),
        _field("Width", m.width.label),
        _footer(),
    ]


def render_scripts(face: Face) -> list[str]:
    scripts = collect_face_scripts(face)
    out = [_heading("SUPPORTED SCRIPTS")]
    if not scripts:
        out.append("│ No script information found")
    else:
        out.extend(_tag_lines("Scripts", scripts))
    out.append(_footer())
    return out


def render_report(face: Face, path: Path | str) -> str:
    """Render the full boxed text report for ``face``.

    Sections are separated by one blank line; the result has no trailing
    newline.
    """
    sections = [
        render_header(face, path),
        render_names(face),
        render_metrics(face),
        _feature_section(
            "OPENTYPE FEATURES (GSUB - Glyph Substitution)",
            "GSUB",
            collect_gsub_features(face),
        ),
        _feature_section(
            "OPENTYPE FEATURES (GPOS - Glyph Positioning)",
            "GPOS",
            collect_gpos_features(face),
        ),
        render_scripts(face),
    ]
    return "\n\n".join("\n".join(lines) for lines in sections)


# -----------------------
# JSON report
# -----------------------
def _describe_all(features: list[str]) -> list[dict[str, str]]:
    return [{"tag": t, "description": describe_feature(t)} for t in features]


def build_report_data(face: Face, path: Path | str) -> dict[str, Any]:
    """Build a JSON-serializable report for ``face``.

    Data structure::

        {
          "file": str,
          "face_index": int,
          "face_count": int,
          "names": {
            "standard": {"Family Name": "...", ...},
            "fallback": [{"name_id": int, "value": str}, ...] | None
          },
          "metrics": {...},
          "gsub_features": [{"tag": "liga", "description": "..."}, ...],
          "gpos_features": [...],
          "scripts": ["DFLT", "latn", ...]
        }
    """
    resolved = resolve_face_names(face)
    m = face.metrics
    fallback = (
        None
        if resolved.fallback is None
        else [{"name_id": i, "value": v} for i, v in resolved.fallback]
    )

    return {
        "file": str(path),
        "face_index": face.face_index,
        "face_count": face.face_count,
        "names": {
            "standard": {
                NAME_LABELS[name_id]: value
                for name_id, value in resolved.standard.items()
            },
            "fallback": fallback,
        },
        "metrics": {
            "units_per_em": m.units_per_em,
            "ascender": m.ascender,
            "descender": m.descender,
            "line_gap": m.line_gap,
            "glyph_count": m.glyph_count,
            "is_monospaced": m.is_monospaced,
            "is_bold": m.is_bold,
            "is_italic": m.is_italic,
            "is_oblique": m.is_oblique,
            "weight": m.weight,
            "width": m.width.label,
        },
        "gsub_features": _describe_all(collect_gsub_features(face)),
        "gpos_features": _describe_all(collect_gpos_features(face)),
        "scripts": collect_face_scripts(face),
    }
