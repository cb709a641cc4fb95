"""CLI entry point for pygwrap."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pygwrap.adapter import DEFAULT_PYGMENTIZE, Pygments
from pygwrap.errors import ExecutionFailure

LIST_CATEGORIES = ("lexers", "formatters", "styles")


def _option(value: str) -> tuple[str, str]:
    """Parse a ``KEY=VALUE`` formatter/lexer option."""
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, val


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the highlight, css, guess-lexer and list subcommands."""
    # --- highlight ---
    hl = subparsers.add_parser("highlight", help="Highlight source code")
    hl.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Source file to highlight (reads stdin if omitted)",
    )
    hl.add_argument(
        "-l", "--lexer",
        default=None,
        help="Lexer name (guessed from content if omitted)",
    )
    hl.add_argument("-f", "--formatter", default=None, help="Formatter name")
    hl.add_argument(
        "-P", "--option",
        dest="options",
        action="append",
        type=_option,
        default=[],
        metavar="KEY=VALUE",
        help="Lexer/formatter option, may be repeated",
    )

    # --- css ---
    css = subparsers.add_parser("css", help="Print HTML style definitions")
    css.add_argument(
        "-s", "--style",
        default="default",
        help="Style name (default: default)",
    )
    css.add_argument("-a", "--selector", default=None, help="CSS selector prefix")

    # --- guess-lexer ---
    gl = subparsers.add_parser("guess-lexer", help="Guess a lexer from a file name")
    gl.add_argument("filename", help="File name; the file need not exist")

    # --- list ---
    ls = subparsers.add_parser("list", help="List lexers, formatters or styles")
    ls.add_argument("action", nargs="?", choices=LIST_CATEGORIES, default=None)


def run(args: argparse.Namespace, pygments: Pygments) -> dict[str, Any]:
    """Dispatch to the appropriate adapter operation."""
    if args.command == "highlight":
        if args.file is None:
            code = sys.stdin.read()
        else:
            code = Path(args.file).read_text(errors="replace")
        output = pygments.highlight(
            code,
            lexer=args.lexer,
            formatter=args.formatter,
            options=dict(args.options),
        )
        return {"lexer": args.lexer, "formatter": args.formatter, "output": output}

    if args.command == "css":
        return {
            "style": args.style,
            "selector": args.selector,
            "css": pygments.get_css(args.style, args.selector),
        }

    if args.command == "guess-lexer":
        return {"filename": args.filename, "lexer": pygments.guess_lexer(args.filename)}

    if args.command == "list":
        getter = {
            "lexers": pygments.get_lexers,
            "formatters": pygments.get_formatters,
            "styles": pygments.get_styles,
        }[args.action]
        items = getter()
        return {"category": args.action, "items": items, "count": len(items)}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pygwrap",
        description="Run pygmentize and report its output as JSON",
    )
    parser.add_argument(
        "--pygmentize",
        default=DEFAULT_PYGMENTIZE,
        help=f"Path or name of the pygmentize executable (default: {DEFAULT_PYGMENTIZE})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Kill pygmentize after this many seconds (default: no timeout)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log executed commands to stderr",
    )
    sub = parser.add_subparsers(dest="command")
    register(sub)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "list" and args.action is None:
        # Re-parse to show command-specific help
        parser.parse_args(["list", "--help"])
        return 1

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )

    pygments = Pygments(args.pygmentize, timeout=args.timeout)
    try:
        result = run(args, pygments)
    except (ExecutionFailure, OSError) as exc:
        json.dump({"error": str(exc)}, sys.stdout, indent=2)
        print()
        return 1

    json.dump(result, sys.stdout, indent=2)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
