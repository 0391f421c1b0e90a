#!/usr/bin/env python3
"""
fontinspect – font_info.py
==========================

Command-line front end: print identity, metrics and OpenType layout
capabilities of a single font file.

Usage::

    fontinspect /path/to/font.ttf
    fontinspect --face-index 2 /path/to/collection.ttc
    fontinspect --json /path/to/font.otf > report.json

Exit status is ``0`` on success and ``1`` when the file cannot be read or
is not a usable font.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from fontinspect.load_font import FontParseError, read_font
from fontinspect.report import build_report_data, render_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontinspect",
        description="Report names, metrics and OpenType features of a font file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("font", type=Path, help="Path to the font file")
    parser.add_argument(
        "--face-index",
        type=int,
        default=0,
        help="Face to inspect inside a font collection (.ttc/.otc)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of text",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Reads the font, decodes the requested face and prints the report to
    stdout. Read and parse failures are reported on stderr and end the
    process with exit status 1.
    """
    args = build_parser().parse_args(argv)

    # fontTools logs table-level warnings for sloppy fonts; keep the report clean
    logging.getLogger("fontTools").setLevel(logging.ERROR)

    font_path: Path = args.font

    if args.verbose:
        print(f"Reading: {font_path}", file=sys.stderr)

    try:
        face = read_font(font_path, face_index=args.face_index)
    except OSError as e:
        print(f"❌ Error reading font file '{font_path}': {e}", file=sys.stderr)
        sys.exit(1)
    except FontParseError as e:
        print(f"❌ Error parsing font file '{font_path}': {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(
            f"Decoded face {face.face_index + 1}/{face.face_count}: "
            f"{len(face.names)} name records",
            file=sys.stderr,
        )

    if args.json:
        print(
            json.dumps(
                build_report_data(face, font_path), indent=2, ensure_ascii=False
            )
        )
    else:
        print(render_report(face, font_path))


if __name__ == "__main__":
    main()
