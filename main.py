"""CLI entrypoint for the word grid placer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wordgrid.core.constants import DuplicateMode, Orientation, PolicyName, SourceFormat
from wordgrid.core.exceptions import CrosswordError
from wordgrid.data.word_source import WordSourceConfig, load_words
from wordgrid.engine.generator import GeneratorConfig, PuzzleGenerator
from wordgrid.utils.logger import configure_logging
from wordgrid.utils.pretty import format_puzzle, pretty_print_puzzle, print_word_list

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordgrid",
        description="Place words on a square grid and score how compact the layout is",
    )
    parser.add_argument("file", nargs="?", type=Path, help="Word file, one entry per line")
    parser.add_argument(
        "--policy",
        type=str,
        choices=[p.value for p in PolicyName],
        default=PolicyName.PROXIMITY.value,
        help="Placement policy",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=[f.value for f in SourceFormat],
        default=SourceFormat.SECOND_TOKEN.value,
        help="Line shape: word as second token, '<length> <word>', or word as first token",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Drop repeated words, keeping the first occurrence",
    )
    parser.add_argument("--size", type=int, help="Grid dimension in cells")
    parser.add_argument(
        "--derive-size",
        action="store_true",
        help="Size the grid from the input (longest word or word count, whichever is larger)",
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        help="Sequential policy starting cursor (default 5 5)",
    )
    parser.add_argument(
        "--step",
        type=int,
        nargs=2,
        metavar=("ROWS", "COLS"),
        help="Sequential policy cursor step (default 2 2)",
    )
    parser.add_argument(
        "--start-horizontal",
        action="store_true",
        help="Sequential policy places the first word horizontally",
    )
    parser.add_argument(
        "--no-locality",
        action="store_true",
        help="Proximity policy scans the whole grid instead of preferring placed letters",
    )
    parser.add_argument(
        "--coordinates",
        action="store_true",
        help="Render row and column numbers around the grid",
    )
    parser.add_argument(
        "--list-words",
        action="store_true",
        help="Print the parsed word list and exit",
    )
    parser.add_argument("--output", type=Path, help="Also write the text dump to this path")
    parser.add_argument(
        "--strict-exit",
        action="store_true",
        help="Exit with status 2 on usage errors and 1 on input or configuration errors",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.file is None:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE if args.strict_exit else EXIT_OK

    # Input and configuration errors still exit 0 unless --strict-exit.
    failure = EXIT_ERROR if args.strict_exit else EXIT_OK

    source_config = WordSourceConfig(
        format=SourceFormat(args.format),
        duplicates=DuplicateMode.UNIQUE if args.unique else DuplicateMode.KEEP,
    )
    config = GeneratorConfig(
        policy=PolicyName(args.policy),
        size=args.size,
        derive_size=args.derive_size,
        start_orientation=Orientation.HORIZONTAL if args.start_horizontal else Orientation.VERTICAL,
        locality=not args.no_locality,
    )
    if args.start:
        config.start_row, config.start_col = args.start
    if args.step:
        config.step_rows, config.step_cols = args.step

    try:
        words = load_words(args.file, source_config)
    except CrosswordError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return failure

    if args.list_words:
        print_word_list(words)
        return EXIT_OK

    try:
        result = PuzzleGenerator(config).generate(words)
    except CrosswordError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return failure

    pretty_print_puzzle(result, coordinates=args.coordinates, stream=sys.stdout)
    if args.output:
        output_text = format_puzzle(result, coordinates=args.coordinates)
        try:
            args.output.write_text(output_text + "\n", encoding="utf-8")
        except OSError as exc:
            print(f"Error writing output: {exc}", file=sys.stderr)
            return failure
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
