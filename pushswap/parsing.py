"""Reading the numbers to sort from the command line."""

from __future__ import annotations

from typing import Iterable, List, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
MAX_TOKEN_LENGTH = 12

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_WORD_START = _DIGITS | _SIGNS
_ATOL_SPACES = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """The arguments do not describe a valid list of integers."""


def count_words(text: str) -> int:
    """Count the numbers that ``text`` announces.

    The first word counts when the very first character is a digit, a minus
    sign or any character that sorts at or before ``+`` (a space included);
    every later word counts when it starts with a digit or a sign and
    follows a space. An empty text counts as one word.
    """
    if not text:
        return 1
    first = text[0]
    count = 0
    pos = len(text) - len(text.lstrip(" "))
    if "0" <= first <= "9" or first == "-" or ord(first) <= ord("+"):
        count += 1
        pos += 1
    while pos < len(text) and text[pos] != " ":
        pos += 1
    pos = max(pos, 1)
    count += sum(
        1
        for before, current in zip(text[pos - 1:], text[pos:])
        if before == " " and current in _WORD_START
    )
    return count


def split_words(text: str) -> List[str]:
    """Split ``text`` on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def validate_token(token: str) -> str:
    """Return ``token`` if it is an optional sign followed by digits only.

    A lone sign is rejected; an empty token is accepted.
    """
    body = token
    if token[:1] in _SIGNS and token:
        if token[1:2] not in _DIGITS or len(token) < 2:
            raise InputError(f"invalid number: {token!r}")
        body = token[1:]
    if any(char not in _DIGITS for char in body):
        raise InputError(f"invalid number: {token!r}")
    return token


def _atol(token: str) -> int:
    """Leading whitespace, an optional sign, then as many digits as follow."""
    stripped = token.lstrip("".join(_ATOL_SPACES))
    negative = False
    if stripped[:1] in _SIGNS and stripped:
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def parse_number(token: str) -> int:
    """Convert ``token`` to an int, enforcing the 32-bit range and length."""
    value = _atol(token)
    if value > INT_MAX or value < INT_MIN or len(token) > MAX_TOKEN_LENGTH:
        raise InputError(f"number out of range: {token!r}")
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True when some value occurs more than once."""
    items = list(values)
    return len(set(items)) != len(items)


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Turn the command-line arguments into the list of numbers for stack ``a``.

    A single argument is split on spaces; several arguments are one number
    each. Duplicates are returned as they are, see :func:`has_duplicates`.
    """
    args = list(args)
    if not args:
        raise InputError("no numbers given")
    if len(args) == 1:
        tokens = split_words(args[0])
        for token in tokens:
            validate_token(token)
        wanted = count_words(args[0])
        if wanted > len(tokens):
            raise InputError(f"no numbers in {args[0]!r}")
        return [parse_number(token) for token in tokens[:wanted]]
    values = []
    for arg in args:
        validate_token(arg)
        values.append(parse_number(arg))
    return values