"""Command line entry point for the Name Segmenter library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .formatting import OutputFormat, format_name
from .runner import RunnerConfig, build_segmenter, segment_file
from .segmenter import SegmenterConfig


def _paths_from_env(variable: str) -> list[Path]:
    value = os.getenv(variable, "")
    return [Path(item) for item in value.split(os.pathsep) if item]


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split Latin-American full names into given name and surnames.")
    parser.add_argument("input", type=Path, nargs="?", help="Path to the input CSV, Excel or JSON file")
    parser.add_argument("output", type=Path, nargs="?", help="Path where the annotated results will be written")
    parser.add_argument(
        "--name",
        dest="names",
        action="append",
        default=[],
        help="Segment a single name and print its formats (repeatable)",
    )
    parser.add_argument(
        "--dictionary",
        dest="dictionaries",
        type=Path,
        action="append",
        default=None,
        help="Compound surname list (.json or .txt, repeatable; default: $NAME_SEGMENTER_DICTIONARIES)",
    )
    parser.add_argument(
        "--given-names",
        type=Path,
        default=os.getenv("NAME_SEGMENTER_GIVEN_NAMES") or None,
        help="Given-name token list used to arbitrate ambiguous matches",
    )
    parser.add_argument("--name-column", default="name", help="Column containing the raw names (default: name)")
    parser.add_argument(
        "--expected-columns",
        nargs=3,
        metavar=("GIVEN", "SURNAME1", "SURNAME2"),
        help="Columns holding the expected segmentation, to report accuracy",
    )
    parser.add_argument("--fold-accents", action="store_true", help="Transliterate names to plain ASCII")
    parser.add_argument("--fix-encoding", action="store_true", help="Repair mis-decoded text such as \"SÃ¡enz\"")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    args = parser.parse_args(argv)
    if not args.names and (args.input is None or args.output is None):
        parser.error("either INPUT and OUTPUT or at least one --name is required")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    config = RunnerConfig(
        name_column=args.name_column,
        expected_columns=tuple(args.expected_columns) if args.expected_columns else None,
        dictionary_paths=args.dictionaries or _paths_from_env("NAME_SEGMENTER_DICTIONARIES"),
        given_names_path=args.given_names,
        segmenter=SegmenterConfig(fix_encoding=args.fix_encoding, fold_accents=args.fold_accents),
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    if args.names:
        try:
            segmenter = build_segmenter(config)
        except (FileNotFoundError, ValueError) as exc:
            print(f"ERROR: {exc}")
            return 1
        for raw in args.names:
            parsed = segmenter.parse(raw)
            print(f"{parsed.full_name}")
            print(f"   given name: [{parsed.given_name}]")
            print(f"   surname 1:  [{parsed.surname1}]")
            print(f"   surname 2:  [{parsed.surname2}]")
            for fmt in OutputFormat:
                print(f"   {fmt.value}: {format_name(parsed, fmt).full_name}")
        if args.input is None or args.output is None:
            return 0

    result = segment_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
