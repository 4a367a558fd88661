"""CLI interface for number-extractor.

Usage:
    # Classify OCR text (stdin: text, stdout: {"phones": [...], "cards": [...]})
    echo '8 380 99 123 4567' | python -m number_extractor.cli extract

    # OCR an image first, and remember the numbers found
    python -m number_extractor.cli extract --image photo.jpg --record

    # Show / clear the history
    python -m number_extractor.cli history
    python -m number_extractor.cli clear

    # Settings (ignore list, strict mode, log level) from a YAML file
    python -m number_extractor.cli --config extractor.yaml extract

History is persisted in SQLite so it survives across calls.
"""

from __future__ import annotations
import argparse
import json
import os
import sys
from pathlib import Path

from .config import create_engine, load_config, load_from_yaml
from .engine import Engine
from .history_sqlite import SqliteHistory
from .log import configure_logging


DEFAULT_DB = os.environ.get(
    "NUMBER_EXTRACTOR_DB",
    str(Path.home() / ".number-extractor" / "history.db"),
)


def _build_engine(args: argparse.Namespace) -> Engine:
    # Flags add to what the config file says, they never switch it off
    cfg = dict(args.settings)
    if args.strict_ukrainian:
        cfg["strict_ukrainian_length"] = True
    if args.ignore:
        cfg["ignore"] = cfg["ignore"] | set(args.ignore.split(","))
    return create_engine(cfg)


def _open_history(args: argparse.Namespace) -> SqliteHistory:
    limit = args.history_limit or args.settings["history_limit"]
    return SqliteHistory(db_path=args.db, limit=limit)


def cmd_extract(args: argparse.Namespace) -> None:
    """Classify numbers in stdin text or in an image."""
    engine = _build_engine(args)
    if args.image:
        from .ocr import extract_from_image
        result = extract_from_image(args.image, engine)
    else:
        result = engine.classify(sys.stdin.read())

    if args.record:
        history = _open_history(args)
        history.add_result(result)
        history.close()

    json.dump(result.to_dict(), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_history(args: argparse.Namespace) -> None:
    """Dump the history as JSON, newest first."""
    history = _open_history(args)
    json.dump(history.dump(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    history.close()


def cmd_clear(args: argparse.Namespace) -> None:
    """Clear the history."""
    history = _open_history(args)
    history.clear()
    sys.stderr.write("History cleared\n")
    history.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="number_extractor",
        description="Extract phone and payment-card numbers from OCR text",
    )
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--db", default=DEFAULT_DB, help="SQLite history path")
    parser.add_argument("--history-limit", type=int, default=None, help="Entries kept in history")
    parser.add_argument("--strict-ukrainian", action="store_true",
                        help="Require nine subscriber digits after 380")
    parser.add_argument("--ignore", default="", help="Comma-separated values to never report")
    parser.add_argument("--log-level", default=None, help="Log level (stderr)")

    sub = parser.add_subparsers(dest="command", required=True)
    extract = sub.add_parser("extract", help="Classify text (stdin) or an image")
    extract.add_argument("--image", default=None, help="Image to OCR instead of reading stdin")
    extract.add_argument("--record", action="store_true", help="Append results to history")
    sub.add_parser("history", help="Dump history")
    sub.add_parser("clear", help="Clear history")

    args = parser.parse_args(argv)
    args.settings = load_from_yaml(args.config) if args.config else load_config({})
    configure_logging(args.log_level or args.settings["log_level"])

    cmds = {
        "extract": cmd_extract,
        "history": cmd_history,
        "clear": cmd_clear,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
