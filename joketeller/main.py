"""CLI entry point for joketeller.

Usage:
    python -m joketeller.main url [filters]
    python -m joketeller.main joke [filters]
    python -m joketeller.main submit FILE [--dry-run]

Filters:
    -c/--category NAME (repeatable), -l/--lang CODE, -b/--blacklist FLAG
    (repeatable), -f/--format FMT, -t/--type TYPE, -s/--search TEXT,
    -i/--id-range START END, -a/--amount N, --safe-mode, --auth KEY
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import api
from .config import get_settings
from .joker import Joker
from .options import BlacklistFlag, Category, JokeType, Language, ResponseFormat, parse_option


def _option(enum_cls):
    def convert(text: str):
        try:
            return parse_option(enum_cls, text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    convert.__name__ = enum_cls.__name__
    return convert


def _add_filters(p: argparse.ArgumentParser) -> None:
    p.add_argument("-c", "--category", action="append", type=_option(Category), default=[],
                   help="Joke category, repeatable (default: Any)")
    p.add_argument("-l", "--lang", type=_option(Language), help="Language code: cs, de, es, fr, pt (default: en)")
    p.add_argument("-b", "--blacklist", action="append", type=_option(BlacklistFlag), default=[],
                   help="Blacklist flag, repeatable: nsfw, religious, political, racist, sexist, explicit")
    p.add_argument("-f", "--format", type=_option(ResponseFormat), help="Response format: xml, yaml, txt (default: json)")
    p.add_argument("-t", "--type", type=_option(JokeType), help="Joke type: single or twopart")
    p.add_argument("-s", "--search", help="Only jokes containing this text")
    p.add_argument("-i", "--id-range", nargs=2, type=int, metavar=("START", "END"), help="Joke ID range")
    p.add_argument("-a", "--amount", type=int, help="Number of jokes to fetch")
    p.add_argument("--safe-mode", action="store_true", help="Only return jokes safe for everyone")
    p.add_argument("--auth", help="Authorization key (default: JOKEAPI_AUTH_KEY)")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="joketeller",
        description="Fetch and submit jokes through the JokeAPI (https://jokeapi.dev).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_url = sub.add_parser("url", help="Print the request URL for the given filters")
    _add_filters(p_url)

    p_joke = sub.add_parser("joke", help="Fetch jokes matching the given filters")
    _add_filters(p_joke)

    p_submit = sub.add_parser("submit", help="Submit a joke from a JSON file ('-' for stdin)")
    p_submit.add_argument("file", help="Path to the JSON joke document")
    p_submit.add_argument("--dry-run", action="store_true", help="Validate only; nothing is stored")

    return parser


def _joker_from_args(args: argparse.Namespace) -> Joker:
    joker = Joker()
    joker.add_categories(args.category).add_blacklist_flags(args.blacklist)
    if args.lang:
        joker.set_language(args.lang)
    if args.format:
        joker.set_format(args.format)
    if args.type:
        joker.set_joke_type(args.type)
    if args.search is not None:
        joker.set_search_string(args.search)
    if args.id_range:
        joker.set_id_range(*args.id_range)
    if args.amount is not None:
        joker.set_amount(args.amount)
    if args.safe_mode:
        joker.safe_mode(True)
    auth = args.auth or get_settings().auth_key
    if auth:
        joker.set_authorization(auth)
    return joker


def _print_result(result: api.JokeResult) -> int:
    out = sys.stdout if result.ok else sys.stderr
    print(json.dumps(result.data, indent=2, ensure_ascii=False), file=out)
    if result.is_transport_error:
        print("Could not reach the JokeAPI.", file=sys.stderr)
    return 0 if result.ok else 1


def _cmd_url(args: argparse.Namespace) -> int:
    print(_joker_from_args(args).build_url())
    return 0


def _cmd_joke(args: argparse.Namespace) -> int:
    return _print_result(api.get_joke(_joker_from_args(args)))


def _cmd_submit(path: str, dry_run: bool) -> int:
    try:
        if path == "-":
            document = json.load(sys.stdin)
        else:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Could not read joke document {path}: {e}", file=sys.stderr)
        return 2
    submit = api.submit_joke_dryrun if dry_run else api.submit_joke
    return _print_result(submit(document))


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "url":
        return _cmd_url(args)
    if args.command == "joke":
        return _cmd_joke(args)
    if args.command == "submit":
        return _cmd_submit(args.file, args.dry_run)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
