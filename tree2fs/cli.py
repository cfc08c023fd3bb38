"""
Kommandozeile für tree2fs.

Aufrufe:
  tree2fs -i tree.txt -o out     Struktur aus Datei unter ./out anlegen
  tree2fs                        Struktur von der Standardeingabe lesen
  tree2fs --summary              zusätzlich eine Zusammenfassung ausgeben
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from . import __version__
from .builder import TreeBuilder
from .config import load_config
from .errors import ConfigError, Tree2fsError
from .logs import ICON_SUMMARY, err, log, warn
from .sources import open_source


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tree2fs",
        description="Create directories and empty files from a tree-style text listing",
    )
    ap.add_argument("-i", "--input", help="input file; reads standard input if omitted")
    ap.add_argument(
        "-o",
        "--output-dir",
        help="directory the structure is created in (default: current directory)",
    )
    ap.add_argument("-c", "--config", help="YAML config file (default: ./tree2fs.yaml if present)")
    ap.add_argument("--summary", action="store_true", default=None, help="print a summary line when done")
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)

    try:
        settings = load_config(args.config)
    except ConfigError as exc:
        err(_describe(exc))
        return 2

    output_dir = args.output_dir if args.output_dir is not None else settings.output_dir
    summary = args.summary if args.summary is not None else settings.summary

    builder = TreeBuilder(output_dir, indent_modulus=settings.indent_modulus)
    source = open_source(args.input, prompt=settings.prompt)
    try:
        report = builder.process_lines(source.lines())
    except Tree2fsError as exc:
        err(_describe(exc))
        return 1

    if report.lines == 0:
        warn("No entries found in input.")
    if summary:
        log(f"{ICON_SUMMARY} {report.summary()}")
    return 0


def _describe(exc: BaseException) -> str:
    parts: List[str] = [str(exc)]
    cause = exc.__cause__
    while cause is not None:
        parts.append(str(cause))
        cause = cause.__cause__
    return ": ".join(p for p in parts if p)


def run() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
