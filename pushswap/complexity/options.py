"""Command-line options and positional parameters of the benchmark."""

from __future__ import annotations

import getopt
import os
import re
import stat
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class UsageError(ValueError):
    """The command line cannot be used; the message may be empty."""


@dataclass
class ProgramOptions:
    """Flags and option values given on the command line."""

    version: bool = False
    help: bool = False
    sorted: bool = False
    program: Optional[str] = None
    output: Optional[str] = None
    seed: Optional[int] = None


@dataclass
class ProgramParameters:
    """Positional parameters, plus the push_swap executable to benchmark."""

    numbers: int
    iterations: int
    objective: Optional[int] = None
    checker: Optional[str] = None
    program: str = ""


def parse_number(text: str, minimum: int) -> int:
    """Parse a whole decimal number no smaller than ``minimum``."""
    match = _NUMBER.match(text)
    if match is None or match.end() != len(text):
        raise UsageError(f"{text} is not a valid number")
    number = int(match.group(1))
    if not _LONG_MIN <= number <= _LONG_MAX:
        raise UsageError(f"{text} is not a valid number")
    if number < minimum:
        raise UsageError(f"{text} must be at least equal to {minimum}")
    return number


def assert_executable(path: str) -> str:
    """Return ``path`` if it names an executable regular file."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        raise UsageError(f"{path} is not a valid file") from None
    if not mode & stat.S_IEXEC or not mode & stat.S_IFREG:
        raise UsageError(f"{path} is not a valid file")
    return path


def get_options(argv: Sequence[str]) -> Tuple[ProgramOptions, List[str]]:
    """Read the options from ``argv``; return them with the remaining arguments."""
    try:
        found, rest = getopt.gnu_getopt(
            list(argv),
            "vhs:f:o:",
            ["version", "help", "sorted", "output=", "file=", "seed="],
        )
    except getopt.GetoptError as err:
        raise UsageError(str(err)) from None
    opts = ProgramOptions()
    for name, value in found:
        if name in ("-v", "--version"):
            opts.version = True
        elif name in ("-h", "--help"):
            opts.help = True
        elif name in ("-f", "--file"):
            opts.program = value
        elif name in ("-o", "--output"):
            opts.output = value
        elif name == "--sorted":
            opts.sorted = True
        elif name in ("-s", "--seed"):
            opts.seed = parse_number(value, 0)
    return opts, rest


def get_parameters(args: Sequence[str]) -> ProgramParameters:
    """Read numbers, iterations and the optional goal and checker."""
    args = list(args)
    if not 2 <= len(args) <= 4:
        raise UsageError("")
    params = ProgramParameters(
        numbers=parse_number(args[0], 0),
        iterations=parse_number(args[1], 1),
    )
    if len(args) >= 3:
        params.objective = parse_number(args[2], 0)
    if len(args) >= 4:
        params.checker = assert_executable(args[3])
    return params