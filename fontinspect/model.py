"""
fontinspect – model.py
======================

Immutable data model describing a single parsed font face.

Instances are produced by ``load_font.py`` from fontTools tables and consumed
by the query helpers in ``names.py`` and ``layout.py``. Nothing here touches
font binaries.

Layout structure::

    LayoutTable
      ├── scripts: (ScriptRecord, ...)
      │     ├── tag: "latn"
      │     ├── default_language: LangSystemRecord | None
      │     └── languages: (LangSystemRecord, ...)
      │             └── feature_indices: (int, ...)
      └── features: (FeatureRecord, ...)   # addressed by feature index
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class NamingRecord:
    """One ``name`` table record; ``value`` is ``None`` when undecodable."""

    name_id: int
    value: str | None
    platform_id: int = 3
    encoding_id: int = 1
    language_id: int = 0x409


@dataclass(frozen=True)
class FeatureRecord:
    tag: str


@dataclass(frozen=True)
class LangSystemRecord:
    feature_indices: tuple[int, ...] = ()
    tag: str | None = None


@dataclass(frozen=True)
class ScriptRecord:
    tag: str
    default_language: LangSystemRecord | None = None
    languages: tuple[LangSystemRecord, ...] = ()

    def lang_systems(self) -> tuple[LangSystemRecord, ...]:
        """Return the explicit language systems followed by the default one."""
        if self.default_language is None:
            return self.languages
        return self.languages + (self.default_language,)


@dataclass(frozen=True)
class LayoutTable:
    """Shared shape of the GSUB and GPOS tables."""

    scripts: tuple[ScriptRecord, ...] = ()
    features: tuple[FeatureRecord, ...] = ()

    def feature(self, index: int) -> FeatureRecord | None:
        """Resolve a feature index, returning ``None`` for dangling indices."""
        if 0 <= index < len(self.features):
            return self.features[index]
        return None


class Width(Enum):
    """OS/2 ``usWidthClass`` values."""

    ULTRA_CONDENSED = 1
    EXTRA_CONDENSED = 2
    CONDENSED = 3
    SEMI_CONDENSED = 4
    NORMAL = 5
    SEMI_EXPANDED = 6
    EXPANDED = 7
    EXTRA_EXPANDED = 8
    ULTRA_EXPANDED = 9

    @classmethod
    def from_class(cls, width_class: int | None) -> Width:
        try:
            return cls(width_class)
        except ValueError:
            return cls.NORMAL

    @property
    def label(self) -> str:
        """CamelCase display name, e.g. ``SemiCondensed``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(frozen=True)
class FaceMetrics:
    units_per_em: int = 1000
    ascender: int = 0
    descender: int = 0
    line_gap: int = 0
    glyph_count: int = 0
    is_monospaced: bool = False
    is_bold: bool = False
    is_italic: bool = False
    is_oblique: bool = False
    weight: int = 400
    width: Width = Width.NORMAL


@dataclass(frozen=True)
class Face:
    """A single font face, fully decoded into the model above."""

    names: tuple[NamingRecord, ...] = ()
    gsub: LayoutTable | None = None
    gpos: LayoutTable | None = None
    metrics: FaceMetrics = field(default_factory=FaceMetrics)
    face_index: int = 0
    face_count: int = 1
