# matchclip/cli.py
"""
matchclip Command Line
======================

Fits a line of text into a column budget from the shell, keeping the last
fuzzy match visible:

    $ matchclip "hello world example" --width 10 --offsets 12,13,14
    …world exa
          ^^^

Steps performed by `main`:
1) Argument parsing.
2) Configuration & Logging: loads config and initializes logging before any work.
3) Truncation: merges the offsets into ranges and runs the Truncator.
4) Output: the rendered text plus a caret marker line, or a JSON document.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from matchclip.core.RangeMerger import RangeMerger
from matchclip.core.Truncator import ColumnRange, Truncator
from matchclip.utils.logging_config import setup_logging
from matchclip.utils.utils import load_config


logger = logging.getLogger("matchclip")


def _offset_list(raw: str) -> list[int]:
    """Parses a comma separated list of byte offsets."""
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid offset list {raw!r}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matchclip",
        description="Truncate text to a terminal width while keeping fuzzy matches visible.",
    )
    parser.add_argument("text", help="text to fit")
    parser.add_argument("-w", "--width", type=int, required=True, help="available display columns")
    parser.add_argument(
        "-m", "--match", type=int, action="append", default=[], metavar="BYTE",
        help="byte offset of a matched character (repeatable)",
    )
    parser.add_argument(
        "--offsets", type=_offset_list, default=[], metavar="B,B,...",
        help="comma separated byte offsets of matched characters",
    )
    parser.add_argument("-c", "--config", default=None, help="path to a config.toml")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    return parser


def marker_line(highlights: Sequence[ColumnRange]) -> str:
    """Builds a line with carets under every highlighted column."""
    cells: list[str] = []
    for start, end in highlights:
        if len(cells) <= end:
            cells.extend(" " * (end + 1 - len(cells)))
        for column in range(start, end + 1):
            cells[column] = "^"
    return "".join(cells)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    setup_logging(config)

    offsets = sorted(set(args.match) | set(args.offsets))
    ranges = RangeMerger.merge(offsets)
    truncator = Truncator(config.get("truncation", {}).get("ellipsis", "…"))
    result = truncator.truncate(args.text, ranges, args.width)
    logger.debug("Rendered %r with highlights %s.", result.text, result.highlights)

    if args.json:
        payload = {
            "text": result.text,
            "highlights": [list(rng) for rng in result.highlights],
            "width": args.width,
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(result.text)
        if result.highlights:
            print(marker_line(result.highlights))
    return 0


if __name__ == "__main__":
    sys.exit(main())
