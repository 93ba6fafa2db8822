"""Command line checker for bookmark, collection and locator documents."""

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from readmark import codec
from readmark.config import configure_logging, get_settings
from readmark.exceptions import CodecError

logger = structlog.get_logger(__name__)

KINDS = ("bookmark", "collection", "locator")


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _normalize(kind: str, text: str, strict_envelope: bool | None) -> object:
    """Decode text as the given kind and re-encode it."""
    data = codec.parse_json(text)
    if kind == "locator":
        return codec.encode_locator(codec.decode_locator(data))
    if kind == "collection":
        bookmarks = codec.decode_bookmark_collection(data, strict_envelope=strict_envelope)
        assert isinstance(data, dict)
        return codec.encode_bookmark_collection(bookmarks, data.get("id"))
    return codec.encode_bookmark(codec.decode_bookmark(data, strict_envelope=strict_envelope))


def cmd_check(args: argparse.Namespace) -> int:
    """Validate a document and print its normalized form."""
    try:
        text = _read(args.path)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Error: cannot read {args.path}: {err}", file=sys.stderr)
        return 2

    strict = True if args.strict_envelope else None
    try:
        normalized = _normalize(args.kind, text, strict)
    except CodecError as err:
        logger.info("document_rejected", path=args.path, kind=args.kind, error=type(err).__name__)
        if args.json:
            print(json.dumps(err.to_dict(), ensure_ascii=False, default=str), file=sys.stderr)
        else:
            print(f"Error: {err}", file=sys.stderr)
        return 1

    logger.info("document_accepted", path=args.path, kind=args.kind)
    if not args.quiet:
        print(json.dumps(normalized, separators=get_settings().json_separators, ensure_ascii=False))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(prog="readmark", description="Reading-position codec")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only set the exit status")
    parser.add_argument("--json", action="store_true", help="Machine-readable error output")

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    parser_check = subparsers.add_parser("check", help="Validate and normalize a document")
    parser_check.add_argument("path", help="JSON file to check, or - for stdin")
    parser_check.add_argument(
        "--kind", choices=KINDS, default="bookmark", help="Document kind (default: bookmark)"
    )
    parser_check.add_argument(
        "--strict-envelope",
        action="store_true",
        help='Also require "@context" and "type" on bookmarks',
    )

    args = parser.parse_args(argv)
    configure_logging()

    if args.cmd == "check":
        return cmd_check(args)
    return 1
