"""Handlers for 'kanrank rank' commands."""

from kanrank.cli._common import error, output_json
from kanrank.rank import RankError, evenly_spaced_keys, key_after, key_before, key_between

OPEN = "-"


def _bound(value: str | None) -> str | None:
    return None if value in (None, OPEN) else value


def _print_key(key: str, json_mode: bool) -> None:
    if json_mode:
        output_json({"key": key})
    else:
        print(key)


def rank_between(args) -> int:
    """Print a key strictly between two keys ('-' for an open end)."""
    try:
        key = key_between(_bound(args.lower), _bound(args.upper))
    except RankError as e:
        error(str(e), args.json)
    _print_key(key, args.json)
    return 0


def rank_after(args) -> int:
    """Print a key after PREV, or the first key when PREV is omitted."""
    try:
        key = key_after(_bound(args.prev))
    except RankError as e:
        error(str(e), args.json)
    _print_key(key, args.json)
    return 0


def rank_before(args) -> int:
    """Print a key before NEXT."""
    try:
        key = key_before(args.next)
    except RankError as e:
        error(str(e), args.json)
    _print_key(key, args.json)
    return 0


def rank_spread(args) -> int:
    """Print COUNT evenly spaced keys, one per line."""
    try:
        keys = evenly_spaced_keys(args.count)
    except RankError as e:
        error(str(e), args.json)
    if args.json:
        output_json({"keys": keys})
    else:
        print("\n".join(keys))
    return 0
