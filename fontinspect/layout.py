"""
fontinspect – layout.py
=======================

Feature and script discovery over GSUB/GPOS layout tables.

Traversal order::

    for script in table.scripts:
        for lang_sys in script.languages (+ script.default_language):
            for index in lang_sys.feature_indices:
                table.features[index].tag

Tags are deduplicated while walking and sorted once at the end, so the
result never depends on which script or language system reached a tag
first.
"""

from __future__ import annotations

from collections.abc import Iterator

from fontinspect.model import Face, LangSystemRecord, LayoutTable


def _lang_sys_feature_tags(
    table: LayoutTable, lang_sys: LangSystemRecord
) -> Iterator[str]:
    """Yield the tags referenced by a language system, skipping dangling indices."""
    for index in lang_sys.feature_indices:
        feature = table.feature(index)
        if feature is not None:
            yield feature.tag


def collect_features(table: LayoutTable | None) -> list[str]:
    """Return the sorted, unique feature tags reachable from any script.

    Args:
        table: A GSUB or GPOS layout table, or ``None`` if the font has none.

    Returns:
        Feature tags in ascending order. Empty when the table is absent or
        no language system references a resolvable feature.
    """
    if table is None:
        return []

    found: dict[str, None] = {}
    for script in table.scripts:
        for lang_sys in script.lang_systems():
            for tag in _lang_sys_feature_tags(table, lang_sys):
                found.setdefault(tag, None)
    return sorted(found)


def collect_scripts(*tables: LayoutTable | None) -> list[str]:
    """Return the sorted union of script tags declared by ``tables``."""
    found: dict[str, None] = {}
    for table in tables:
        if table is None:
            continue
        for script in table.scripts:
            found.setdefault(script.tag, None)
    return sorted(found)


# -----------------------
# Face-level queries
# -----------------------
def collect_gsub_features(face: Face) -> list[str]:
    return collect_features(face.gsub)


def collect_gpos_features(face: Face) -> list[str]:
    return collect_features(face.gpos)


def collect_face_scripts(face: Face) -> list[str]:
    """Scripts declared in either GSUB or GPOS."""
    return collect_scripts(face.gsub, face.gpos)
