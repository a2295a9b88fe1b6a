from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pond.errors import PondFormatError
from pond.loader import load_pond
from pond.pathfinding import find_path
from pond.render_ascii import render_pond_ascii
from repl.repl import run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find a path for the frog across a pond.")
    parser.add_argument("pond_file", help="pond description file")
    parser.add_argument("--map", action="store_true", help="print the pond with the path marked")
    parser.add_argument("--repl", action="store_true", help="open the interactive shell instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        pond = load_pond(args.pond_file)
    except PondFormatError as e:
        print(f"Error initializing pond: {e}")
        return 1

    if args.repl:
        run_repl(pond, source=args.pond_file)
        return 0

    result = find_path(pond)
    if args.map:
        print(render_pond_ascii(pond, path=result.path))
    print(result.trace())
    return 0


if __name__ == "__main__":
    sys.exit(main())
