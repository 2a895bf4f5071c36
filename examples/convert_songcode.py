#!/usr/bin/env python3
"""Convert a SongCode file to Livenotes JSON.

Usage:
    python examples/convert_songcode.py <input_file> [-o output_file]

Examples:
    python examples/convert_songcode.py testdata/road_song.txt --pretty
    python examples/convert_songcode.py testdata/tempo_changes.txt -o song.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from songcode import ConverterConfig, SongCodeConverter


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a SongCode file to Livenotes JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s testdata/road_song.txt --pretty
  %(prog)s testdata/tempo_changes.txt -o song.json
        """,
    )
    parser.add_argument("input", type=Path, help="Input SongCode file")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("--lyrics", action="store_true", help="Include lyric lines per section")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser progress")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    converter = SongCodeConverter(ConverterConfig(include_lyrics=args.lyrics))
    result = converter.try_convert(args.input.read_text(encoding="utf-8"))

    if not result.success:
        print(json.dumps(result.error), file=sys.stderr)
        return 1

    json_str = json.dumps(result.data, indent=2 if args.pretty else None, ensure_ascii=False)

    if args.output:
        args.output.write_text(json_str + "\n", encoding="utf-8")
        print(f"Wrote {args.output}", file=sys.stderr)
    else:
        print(json_str)

    return 0


if __name__ == "__main__":
    sys.exit(main())
