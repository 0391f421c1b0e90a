"""
fontinspect – names.py
======================

Name table lookups for a parsed face.

The resolver queries five standard name IDs in a fixed order. When none of
them resolves, it falls back to a diagnostic dump of every decodable record.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fontinspect.model import Face, NamingRecord

NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULLNAME = 4
NAME_ID_VERSION = 5
NAME_ID_POSTSCRIPT = 6

#: Lookup order of the standard names.
STANDARD_NAME_IDS: tuple[int, ...] = (
    NAME_ID_FAMILY,
    NAME_ID_SUBFAMILY,
    NAME_ID_FULLNAME,
    NAME_ID_POSTSCRIPT,
    NAME_ID_VERSION,
)


@dataclass(frozen=True)
class ResolvedNames:
    """Result of :func:`resolve_names`.

    Attributes:
        standard: Standard name IDs that resolved, in lookup order,
            mapped to their value.
        fallback: ``(name_id, value)`` for every decodable record in font
            order, or ``None`` when at least one standard name resolved.
    """

    standard: dict[int, str]
    fallback: list[tuple[int, str]] | None = None


def get_name(records: Iterable[NamingRecord], name_id: int) -> str | None:
    """Return the first decodable value for ``name_id``.

    Duplicate records (other platforms/encodings/languages) are not ranked:
    the first one in font order that decoded wins.
    """
    for rec in records:
        if rec.name_id == name_id and rec.value is not None:
            return rec.value
    return None


def list_names(records: Iterable[NamingRecord]) -> list[tuple[int, str]]:
    """Return ``(name_id, value)`` for every decodable record, in font order."""
    return [(rec.name_id, rec.value) for rec in records if rec.value is not None]


def resolve_names(records: Iterable[NamingRecord]) -> ResolvedNames:
    records = tuple(records)
    standard: dict[int, str] = {}
    for name_id in STANDARD_NAME_IDS:
        value = get_name(records, name_id)
        if value is not None:
            standard[name_id] = value

    if standard:
        return ResolvedNames(standard=standard)
    return ResolvedNames(standard=standard, fallback=list_names(records))


def resolve_face_names(face: Face) -> ResolvedNames:
    return resolve_names(face.names)
