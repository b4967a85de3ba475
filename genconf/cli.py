"""CLI entrypoint for the genconf wizard."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import OUTPUT_FORMATS, ConfigError, load_config
from .console import Console
from .errors import CollectionError
from .logging import configure_logging
from .wizard import Wizard
from .writer import write_document


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genconf",
        description=(
            "Interactively collect global variables, file templates, and "
            "post-generation commands into a single configuration document."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Destination file for the document (defaults to standard output).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to json).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indentation width for JSON output (defaults to compact output).",
    )
    parser.add_argument(
        "--strict-answers",
        action="store_true",
        help="Fail on an unrecognized answer to 'Add next file' instead of continuing.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a .genconf.yml file or its directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for genconf."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(1, f"genconf: cannot open log file: {exc}\n")

    try:
        settings = load_config(args.config or Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"genconf: {exc}\n")

    answers = settings.answers
    if args.strict_answers:
        answers.strict = True
    output_path = args.output or settings.output.path
    fmt = args.format or settings.output.format
    indent = args.indent if args.indent is not None else settings.output.indent

    console = Console()
    try:
        document = Wizard(console, answers).run()
    except CollectionError as exc:
        logger.error("failed to process config: %s", exc)
        parser.exit(1)

    # The last prompt leaves the cursor mid-line.
    console.show("\n")
    written = write_document(document, output_path, fmt=fmt, indent=indent)
    if written and output_path is not None:
        print(f"Configuration written to {_relativize(output_path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
