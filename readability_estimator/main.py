#!/usr/bin/env python3
"""CLI that estimates how readable a text file is.

The text is reduced to sentence, word, character and syllable counts, which
feed four readability formulas (ARI, Flesch–Kincaid, SMOG, Coleman–Liau). Each
score is mapped to the age of a typical reader; the ``all`` command also
prints the average age.

The command is taken from ``--command``, then from READABILITY_DEFAULT_COMMAND,
and otherwise asked for interactively.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, TextIO

try:  # support running as a module or script
    from .report import (
        MENU_PROMPT,
        build_report,
        format_average,
        format_metric,
        format_statistics,
        format_text,
    )
    from .scorer import ALL_COMMAND, COMMANDS, UnknownCommandError, score_all, score_metric
    from .text_statistics import TextStatistics
except ImportError:  # pragma: no cover
    from pathlib import Path as _Path

    sys.path.append(str(_Path(__file__).resolve().parent.parent))
    from readability_estimator.report import (  # type: ignore
        MENU_PROMPT,
        build_report,
        format_average,
        format_metric,
        format_statistics,
        format_text,
    )
    from readability_estimator.scorer import (  # type: ignore
        ALL_COMMAND,
        COMMANDS,
        UnknownCommandError,
        score_all,
        score_metric,
    )
    from readability_estimator.text_statistics import TextStatistics  # type: ignore

from util.config import ConfigError, Settings, load_settings

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "Unknown command"


def load_text(path: Path | None, stream: TextIO | None = None) -> str:
    """
    Read the text to score.

    The raw bytes are decoded as UTF-8 with undecodable bytes replaced, and
    line endings are left as they are. A missing path or an unreadable file is
    reported on stream (stdout by default) and gives an empty text, which
    scores as degenerate rather than aborting the run.
    """
    if path is None:
        print("No file path specified in args.", file=stream)
        return ""

    try:
        data = path.read_bytes()
    except OSError as exc:
        print(f"File not found: {exc}", file=stream)
        return ""
    return data.decode("utf-8", errors="replace")


def read_command(
    settings: Settings,
    command: str | None = None,
    prompt_stream: TextIO | None = None,
) -> str:
    """
    Pick the command from the CLI flag, the settings, or an interactive prompt.

    The prompt goes to stdout unless prompt_stream is given.
    """
    if command is not None:
        return command
    if settings.default_command is not None:
        return settings.default_command

    try:
        if prompt_stream is None:
            line = input(MENU_PROMPT)
        else:
            print(MENU_PROMPT, end="", file=prompt_stream, flush=True)
            line = input()
    except EOFError:
        return ""

    tokens = line.split()
    return tokens[0] if tokens else ""


def print_scores(stats: TextStatistics, command: str) -> None:
    """
    Print the score lines for a command.

    Raises:
        UnknownCommandError: If command is not ARI, FK, SMOG, CL or all
    """
    if command == ALL_COMMAND:
        scores = score_all(stats)
        for result in scores.results:
            print(format_metric(result))
        print()
        print(format_average(scores))
        return

    print(format_metric(score_metric(command, stats)))


def report_scores(
    stats: TextStatistics,
    command: str,
    *,
    as_json: bool = False,
    source: str | None = None,
) -> bool:
    """
    Score one text and print the result.

    Returns:
        False if the command was unknown and nothing was computed, True otherwise
    """
    try:
        if as_json:
            report = build_report(stats, command, source=source)
            print(json.dumps(report, indent=2, ensure_ascii=False))
        else:
            print()
            print_scores(stats, command)
    except UnknownCommandError:
        print(UNKNOWN_COMMAND_MESSAGE)
        return False

    return True


def _iter_text_files(directory: Path) -> Iterable[Path]:
    """Iterate over .txt files in a directory in sorted order."""
    for path in sorted(directory.glob("*.txt")):
        if path.is_file():
            yield path


def run_batch(directory: Path, command: str) -> dict[str, Any]:
    """
    Score every .txt file in a directory.

    Returns:
        Dict with structure:
            {
                "source_directory": str,
                "command": str,
                "files": {"<path>": <report from build_report>, ...}
            }

    Raises:
        UnknownCommandError: If command is not ARI, FK, SMOG, CL or all
    """
    if command not in COMMANDS:
        raise UnknownCommandError(f"Unknown command: {command!r}")

    aggregate_report: dict[str, Any] = {
        "source_directory": str(directory),
        "command": command,
        "files": {},
    }

    files = list(_iter_text_files(directory))
    total = len(files)

    for index, text_file in enumerate(files, start=1):
        logger.info("Processing %d/%d: %s", index, total, text_file)
        stats = TextStatistics.from_text(load_text(text_file, stream=sys.stderr))
        aggregate_report["files"][str(text_file)] = build_report(stats, command, source=str(text_file))

    return aggregate_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate the readability of a text file and the age of its readers."
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Path to the input .txt file or directory of .txt files",
    )
    parser.add_argument(
        "--command",
        type=str,
        help="Score to calculate: ARI, FK, SMOG, CL or all (asked interactively if omitted)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of text lines",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not echo the text and its statistics before the scores",
    )
    parser.add_argument(
        "--batch-output",
        type=Path,
        help="When input is a directory, write the JSON report to this file instead of stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for readability estimation."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(allowed_commands=COMMANDS)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    target = args.input

    # Handle directory batch processing
    if target is not None and target.is_dir():
        command = args.command or settings.default_command or ALL_COMMAND
        try:
            aggregate_report = run_batch(target, command)
        except UnknownCommandError:
            print(UNKNOWN_COMMAND_MESSAGE)
            return

        output = json.dumps(aggregate_report, indent=2, ensure_ascii=False)
        if args.batch_output is None:
            print(output)
            return

        args.batch_output.parent.mkdir(parents=True, exist_ok=True)
        args.batch_output.write_text(output, encoding="utf-8")
        print(f"Wrote batch results to {args.batch_output}")
        return

    # Handle single file processing
    # Keep stdout for the JSON document alone
    diagnostics = sys.stderr if args.json else None

    text = load_text(target, stream=diagnostics)
    stats = TextStatistics.from_text(text)
    logger.debug("Statistics for %s: %s", target, stats.as_dict())

    if not args.json and not args.quiet:
        print(format_text(text))
        print(format_statistics(stats))

    command = read_command(settings, args.command, prompt_stream=diagnostics)
    report_scores(
        stats,
        command,
        as_json=args.json,
        source=str(target) if target is not None else None,
    )


if __name__ == "__main__":
    main()


"""
Usage examples:

  - Single file: python -m readability_estimator.main texts/sample.txt --command all
  - Interactive: python readability_estimator/main.py texts/sample.txt
  - Directory: python -m readability_estimator.main texts --batch-output results/readability.json
"""
