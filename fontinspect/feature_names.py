"""
fontinspect – feature_names.py
==============================

Registry of OpenType layout feature tags and their English names.

The registry mirrors the feature list published in the OpenType
specification. It is a closed, versioned dataset: tags not listed here
(private-use or newly registered features) are described as
``UNKNOWN_FEATURE`` rather than rejected.
"""

from __future__ import annotations

from types import MappingProxyType

UNKNOWN_FEATURE = "Unknown feature"

_REGISTERED_FEATURES: dict[str, str] = {
    "aalt": "Access All Alternates",
    "abvf": "Above-base Forms",
    "abvm": "Above-base Mark Positioning",
    "abvs": "Above-base Substitutions",
    "afrc": "Alternative Fractions",
    "akhn": "Akhand",
    "blwf": "Below-base Forms",
    "blwm": "Below-base Mark Positioning",
    "blws": "Below-base Substitutions",
    "calt": "Contextual Alternates",
    "case": "Case-Sensitive Forms",
    "ccmp": "Glyph Composition/Decomposition",
    "cfar": "Conjunct Form After Ro",
    "cjct": "Conjunct Forms",
    "clig": "Contextual Ligatures",
    "cpct": "Centered CJK Punctuation",
    "cpsp": "Capital Spacing",
    "cswh": "Contextual Swash",
    "curs": "Cursive Positioning",
    "c2pc": "Petite Capitals From Capitals",
    "c2sc": "Small Capitals From Capitals",
    "dist": "Distances",
    "dlig": "Discretionary Ligatures",
    "dnom": "Denominators",
    "dtls": "Dotless Forms",
    "expt": "Expert Forms",
    "falt": "Final Glyph on Line Alternates",
    "fin2": "Terminal Forms #2",
    "fin3": "Terminal Forms #3",
    "fina": "Terminal Forms",
    "flac": "Flattened accent forms",
    "frac": "Fractions",
    "fwid": "Full Widths",
    "half": "Half Forms",
    "haln": "Halant Forms",
    "halt": "Alternate Half Widths",
    "hist": "Historical Forms",
    "hkna": "Horizontal Kana Alternates",
    "hlig": "Historical Ligatures",
    "hngl": "Hangul",
    "hojo": "Hojo Kanji Forms",
    "hwid": "Half Widths",
    "init": "Initial Forms",
    "isol": "Isolated Forms",
    "ital": "Italics",
    "jalt": "Justification Alternates",
    "jp78": "JIS78 Forms",
    "jp83": "JIS83 Forms",
    "jp90": "JIS90 Forms",
    "jp04": "JIS2004 Forms",
    "kern": "Kerning",
    "lfbd": "Left Bounds",
    "liga": "Standard Ligatures",
    "ljmo": "Leading Jamo Forms",
    "lnum": "Lining Figures",
    "locl": "Localized Forms",
    "ltra": "Left-to-right alternates",
    "ltrm": "Left-to-right mirrored forms",
    "mark": "Mark Positioning",
    "med2": "Medial Forms #2",
    "medi": "Medial Forms",
    "mgrk": "Mathematical Greek",
    "mkmk": "Mark to Mark Positioning",
    "mset": "Mark Positioning via Substitution",
    "nalt": "Alternate Annotation Forms",
    "nlck": "NLC Kanji Forms",
    "nukt": "Nukta Forms",
    "numr": "Numerators",
    "onum": "Oldstyle Figures",
    "opbd": "Optical Bounds",
    "ordn": "Ordinals",
    "ornm": "Ornaments",
    "palt": "Proportional Alternate Widths",
    "pcap": "Petite Capitals",
    "pkna": "Proportional Kana",
    "pnum": "Proportional Figures",
    "pref": "Pre-Base Forms",
    "pres": "Pre-base Substitutions",
    "pstf": "Post-base Forms",
    "psts": "Post-base Substitutions",
    "pwid": "Proportional Widths",
    "qwid": "Quarter Widths",
    "rand": "Randomize",
    "rclt": "Required Contextual Alternates",
    "rkrf": "Rakar Forms",
    "rlig": "Required Ligatures",
    "rphf": "Reph Forms",
    "rtbd": "Right Bounds",
    "rtla": "Right-to-left alternates",
    "rtlm": "Right-to-left mirrored forms",
    "ruby": "Ruby Notation Forms",
    "rvrn": "Required Variation Alternates",
    "salt": "Stylistic Alternates",
    "sinf": "Scientific Inferiors",
    "size": "Optical size",
    "smcp": "Small Capitals",
    "smpl": "Simplified Forms",
    "ssty": "Math script style alternates",
    "stch": "Stretching Glyph Decomposition",
    "subs": "Subscript",
    "sups": "Superscript",
    "swsh": "Swash",
    "titl": "Titling",
    "tjmo": "Trailing Jamo Forms",
    "tnam": "Traditional Name Forms",
    "tnum": "Tabular Figures",
    "trad": "Traditional Forms",
    "twid": "Third Widths",
    "unic": "Unicase",
    "valt": "Alternate Vertical Metrics",
    "vatu": "Vattu Variants",
    "vert": "Vertical Writing",
    "vhal": "Alternate Vertical Half Metrics",
    "vjmo": "Vowel Jamo Forms",
    "vkna": "Vertical Kana Alternates",
    "vkrn": "Vertical Kerning",
    "vpal": "Proportional Alternate Vertical Metrics",
    "vrt2": "Vertical Alternates and Rotation",
    "vrtr": "Vertical Alternates for Rotation",
    "zero": "Slashed Zero",
}

# Numbered ranges: cv01-cv99 and ss01-ss20
_REGISTERED_FEATURES.update(
    {f"cv{n:02d}": f"Character Variant {n}" for n in range(1, 100)}
)
_REGISTERED_FEATURES.update({f"ss{n:02d}": f"Stylistic Set {n}" for n in range(1, 21)})

#: Read-only mapping of feature tag → English description.
FEATURE_DESCRIPTIONS: MappingProxyType[str, str] = MappingProxyType(
    _REGISTERED_FEATURES
)


def describe_feature(tag: str) -> str:
    """Return the English name of a feature tag, or ``UNKNOWN_FEATURE``."""
    return FEATURE_DESCRIPTIONS.get(tag, UNKNOWN_FEATURE)
