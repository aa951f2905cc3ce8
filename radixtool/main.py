import argparse
import json
import logging
import sys

from rich.console import Console

from radixtool.codec import CodecError, convert_number, decode, encode, parse_base
from radixtool.config import Settings
from radixtool.history import HistoryEntry, HistoryStore
from radixtool.logging_config import configure_logging
from radixtool.shell import RichPrompter, Shell, history_table
from radixtool.text import base_to_text, text_to_base


logger = logging.getLogger(__name__)


def _parse_value(value: str) -> int:
    try:
        return decode(value, 10)
    except CodecError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a decimal integer")


def _parse_base_arg(value: str) -> int:
    try:
        return parse_base(value)
    except CodecError as e:
        raise argparse.ArgumentTypeError(str(e))


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="radixtool",
        description="Convert numbers and text between bases 1-64. Run without a command for interactive mode.",
    )
    parser.add_argument("--history", dest="history", help="Path to the history file")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument(
        "--no-history",
        dest="no_history",
        action="store_true",
        help="Do not record one-shot conversions in the history",
    )

    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("encode", help="Encode a decimal integer in a base")
    p.add_argument("value", type=_parse_value)
    p.add_argument("base", type=_parse_base_arg)

    p = sub.add_parser("decode", help="Decode digits in a base to a decimal integer")
    p.add_argument("digits")
    p.add_argument("base", type=_parse_base_arg)
    p.add_argument(
        "-i",
        "--ignore-case",
        dest="ignore_case",
        action="store_true",
        help="Accept lowercase letters (bases up to 36)",
    )

    p = sub.add_parser("convert", help="Convert a number from one base to another")
    p.add_argument("number")
    p.add_argument("from_base", type=_parse_base_arg)
    p.add_argument("to_base", type=_parse_base_arg)

    p = sub.add_parser("text", help="Convert text to one group of digits per character")
    p.add_argument("text")
    p.add_argument("base", type=_parse_base_arg)
    p.add_argument("--no-pad", dest="pad", action="store_false", help="Do not zero-pad groups")

    p = sub.add_parser("untext", help="Convert groups of digits back to text")
    p.add_argument("base", type=_parse_base_arg)
    p.add_argument("groups", nargs="+")

    p = sub.add_parser("history", help="Show, delete from or clear the conversion history")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--clear", action="store_true", help="Remove all entries")
    group.add_argument("--delete", type=int, metavar="N", help="Remove entry number N")
    p.add_argument("--json", action="store_true", help="Print entries as JSON")

    return parser.parse_args(argv)


def _run_command(args: argparse.Namespace) -> tuple[str, str, str]:
    """Run a one-shot conversion and return (type, input, output)."""
    if args.command == "encode":
        return f"Base 10 -> Base {args.base}", encode(args.value, 10), encode(args.value, args.base)
    if args.command == "decode":
        value = decode(args.digits, args.base, case_insensitive=args.ignore_case)
        return f"Base {args.base} -> Base 10", args.digits, encode(value, 10)
    if args.command == "convert":
        result = convert_number(args.number, args.from_base, args.to_base)
        return f"Base {args.from_base} -> Base {args.to_base}", args.number, result
    if args.command == "text":
        result = " ".join(text_to_base(args.text, args.base, pad=args.pad))
        return f"String -> Base {args.base}", args.text, result
    if args.command == "untext":
        result = base_to_text(args.groups, args.base)
        return f"Base {args.base} -> String", " ".join(args.groups), result
    raise ValueError(f"Unknown command: {args.command}")


def _history_command(args: argparse.Namespace, store: HistoryStore, console: Console) -> int:
    if args.clear:
        try:
            store.clear()
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        console.print("[red]History cleared successfully![/red]")
        return 0

    if args.delete is not None:
        try:
            removed = store.delete(args.delete - 1)
        except (IndexError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        console.print(f"Deleted entry from {removed.date}.")
        return 0

    entries = store.load()
    if args.json:
        print(json.dumps([e.to_dict() for e in entries], ensure_ascii=False, indent=2))
    elif not entries:
        console.print("[yellow]No conversion history available.[/yellow]")
    else:
        console.print(history_table(entries))
    return 0


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    settings = Settings()
    configure_logging(args.log_level or settings.log_level)
    store = HistoryStore(args.history or settings.history_path)
    console = Console()

    if args.command is None:
        Shell(RichPrompter(console), console, store, settings).run()
        return

    if args.command == "history":
        sys.exit(_history_command(args, store, console))

    try:
        kind, text_in, text_out = _run_command(args)
    except CodecError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(text_out)

    if not args.no_history:
        try:
            store.append(HistoryEntry.create(kind, text_in, text_out))
        except OSError as e:
            logger.error("Cannot write history to %s: %s", store.path, e)


if __name__ == "__main__":
    main()
