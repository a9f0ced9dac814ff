"""Fractional rank keys for ordering sibling records.

A rank is a string over a fixed 62 symbol alphabet whose plain string order
is the display order. New ranks are computed from the neighbours at the
insertion point, so existing records never have to be renumbered:

    key_between(None, None)  -> "n"
    key_between("1", "9")    -> "5"
    key_between("n", None)   -> "t"
    key_between("a", "b")    -> "aV"

Generated keys never end in the minimum symbol, which keeps room below every
key this module hands out.
"""

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)
MIN_SYMBOL = ALPHABET[0]
MAX_SYMBOL = ALPHABET[-1]
MID_SYMBOL = ALPHABET[BASE // 2]
FIRST_KEY = "n"

_INDEX = {s: i for i, s in enumerate(ALPHABET)}


class RankError(ValueError):
    """Base class for rank generation errors."""


class InvalidRangeError(RankError):
    """Boundary keys are malformed or not in strictly increasing order."""


class InvalidArgumentError(RankError):
    """A count or symbol index is out of range."""


def index(s: str) -> int:
    """Position of a symbol in the alphabet."""
    try:
        return _INDEX[s]
    except KeyError:
        raise InvalidRangeError(f"{s!r} is not a rank symbol") from None


def symbol(i: int) -> str:
    """Symbol at position i of the alphabet."""
    if not 0 <= i < BASE:
        raise InvalidArgumentError(f"symbol index {i} out of range 0..{BASE - 1}")
    return ALPHABET[i]


def validate_key(key: str) -> None:
    """Raise InvalidRangeError unless key is a non-empty string of rank symbols."""
    if not isinstance(key, str) or not key:
        raise InvalidRangeError(f"invalid rank {key!r}")
    for s in key:
        if s not in _INDEX:
            raise InvalidRangeError(f"invalid rank {key!r}: {s!r} is not a rank symbol")


def is_valid_key(key) -> bool:
    """True if key could have been produced by this module's alphabet."""
    return isinstance(key, str) and bool(key) and all(s in _INDEX for s in key)


def key_between(lower: str | None, upper: str | None) -> str:
    """Return a key strictly between lower and upper.

    Either bound may be None, meaning that end is open. Raises
    InvalidRangeError if lower >= upper or either key is malformed.
    """
    if lower is None and upper is None:
        return FIRST_KEY
    if lower is not None:
        validate_key(lower)
    if upper is not None:
        validate_key(upper)
        if lower is not None and lower >= upper:
            raise InvalidRangeError(f"lower rank {lower!r} must sort before upper rank {upper!r}")

    lower = lower or ""
    bounded = upper is not None
    prefix: list[str] = []
    i = 0
    while True:
        # An exhausted lower key reads as trailing minimum symbols
        lo = index(lower[i]) if i < len(lower) else 0
        if bounded:
            if i >= len(upper):
                raise InvalidRangeError(f"no rank sorts between {lower!r} and {upper!r}")
            hi = index(upper[i])
        else:
            hi = BASE

        if hi - lo > 1:
            prefix.append(ALPHABET[(lo + hi) // 2])
            return "".join(prefix)

        prefix.append(ALPHABET[lo])
        if hi > lo:
            # prefix is now below upper, so upper no longer constrains
            bounded = False
        i += 1


def key_after(prev: str | None) -> str:
    """Return a key after prev, for appending to the end of a group."""
    if prev is None:
        return FIRST_KEY
    validate_key(prev)
    k = index(prev[-1])
    if k < BASE - 1:
        return prev[:-1] + ALPHABET[k + 1]
    return prev + MID_SYMBOL


def key_before(next_key: str) -> str:
    """Return a key before next_key, for prepending to the start of a group."""
    validate_key(next_key)
    for i, s in enumerate(next_key):
        k = index(s)
        if k == 0:
            continue
        if k - 1 > 0:
            return next_key[:i] + ALPHABET[k - 1]
        return next_key[:i] + MIN_SYMBOL + MID_SYMBOL
    raise InvalidRangeError(f"no rank sorts before {next_key!r}")


def evenly_spaced_keys(count: int) -> list[str]:
    """Return count fixed-width keys with equal gaps, for rewriting a whole group.

    The keys are the odd multiples of an odd half step, so each value is odd
    and its last base-62 digit is never the minimum symbol.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidArgumentError(f"count must be a positive integer, got {count!r}")

    width = 1
    while BASE**width < 2 * count:
        width += 1
    half = BASE**width // (2 * count)
    if half % 2 == 0:
        half -= 1
    return [_encode(half * (2 * i - 1), width) for i in range(1, count + 1)]


def _encode(value: int, width: int) -> str:
    """Base-62 numeral for value, zero padded to width."""
    digits = []
    for _ in range(width):
        value, d = divmod(value, BASE)
        digits.append(ALPHABET[d])
    return "".join(reversed(digits))
