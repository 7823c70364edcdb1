"""Running push_swap many times on random input and measuring it."""

from __future__ import annotations

import math
import random
import subprocess
import sys
from dataclasses import replace
from typing import List, Optional, Sequence, TextIO

from .options import (
    ProgramOptions,
    ProgramParameters,
    UsageError,
    assert_executable,
    get_options,
    get_parameters,
)
from .report import (
    HIDE_CURSOR,
    SHOW_CURSOR,
    Language,
    end_line,
    get_help,
    get_usage,
    get_version,
    start_line,
    status_lines,
)

_STATUS_HEIGHT = 7


def exec_program(argv: Sequence[str], input_text: Optional[str] = None) -> str:
    """Run ``argv`` with ``input_text`` on stdin; return stdout and stderr together.

    A program that cannot be started yields an empty string.
    """
    data = (input_text or "").encode()
    try:
        completed = subprocess.run(
            list(argv),
            input=data,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError:
        return ""
    return completed.stdout.decode("utf-8", errors="replace")


def generate_numbers(rng: random.Random, count: int, ordered: bool) -> List[str]:
    """The numbers 0 to ``count - 1`` as strings, shuffled unless ``ordered``."""
    numbers = list(range(count))
    if not ordered:
        rng.shuffle(numbers)
    return [str(number) for number in numbers]


class Benchmark:
    """Repeated runs of push_swap with statistics and optional verification."""

    language = Language.FR_FR

    def __init__(self, options: ProgramOptions, params: ProgramParameters) -> None:
        self.options = options
        self.params = params
        self.fails = False
        self.results: List[int] = []
        self.failed_inputs: List[str] = []
        self.error_inputs: List[str] = []

    def run(self, out: TextIO) -> bool:
        """Run every iteration, reporting to ``out``; return True on any failure."""
        if self.options.seed is None:
            self.options = replace(self.options, seed=random.SystemRandom().getrandbits(32))
        rng = random.Random(self.options.seed)
        out.write(start_line(self.options, self.params, self.language) + "\n")
        out.write(HIDE_CURSOR)
        try:
            self._iterate(rng, out)
            self.write_output()
        finally:
            out.write(f"\033[{_STATUS_HEIGHT}B\033[0m")
            out.write(SHOW_CURSOR)
            out.write(end_line() + "\n")
            out.flush()
        return self.fails

    def _iterate(self, rng: random.Random, out: TextIO) -> None:
        params = self.params
        total = worst = successful = ok = 0
        best: Optional[int] = None
        for done in range(1, params.iterations + 1):
            args = generate_numbers(rng, params.numbers, self.options.sorted)
            result = exec_program([params.program, *args])
            lines = result.count("\n")
            input_saved = False
            self.results.append(lines)
            total += lines

            if params.checker is not None:
                if exec_program([params.checker, *args], result) == "OK\n":
                    ok += 1
                else:
                    self.fails = True
                    if self.options.output is not None and not input_saved:
                        input_saved = True
                        self.error_inputs.append(" ".join(args))

            if params.objective is not None:
                if lines <= params.objective:
                    successful += 1
                else:
                    self.fails = True
                    if self.options.output is not None and not input_saved:
                        input_saved = True
                        self.failed_inputs.append(" ".join(args))

            best = lines if best is None else min(best, lines)
            worst = max(worst, lines)
            mean = total / done
            stddev = math.sqrt(sum((mean - r) ** 2 for r in self.results) / done)
            status = status_lines(
                params, done, int(math.floor(mean + 0.5)), stddev,
                best, worst, successful, ok, self.language,
            )
            out.write("".join(f"{line}\n" for line in status))
            out.write(f"\033[{_STATUS_HEIGHT}A")

    def write_output(self) -> None:
        """Write the inputs that failed to the output file, if one was asked for."""
        if self.options.output is None:
            return
        try:
            with open(self.options.output, "w", encoding="utf-8") as handle:
                if self.params.objective is not None:
                    handle.write(f"Failed inputs (over {self.params.objective}):\n")
                    handle.writelines(f"{line}\n" for line in self.failed_inputs)
                if self.params.checker is not None:
                    handle.write("Error inputs:\n")
                    handle.writelines(f"{line}\n" for line in self.error_inputs)
        except OSError:
            pass


def _find_program(options: ProgramOptions) -> str:
    if options.program is not None:
        return assert_executable(options.program)
    try:
        return assert_executable("../push_swap")
    except UsageError:
        return assert_executable("./push_swap")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point of the benchmark."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options, rest = get_options(args)
    except UsageError as err:
        if str(err):
            print(err, file=sys.stderr)
        print(get_usage(), file=sys.stderr)
        return 1
    if options.help or options.version:
        if options.version:
            print(get_version())
        if options.help:
            print(get_help(Benchmark.language))
        return 0

    try:
        params = get_parameters(rest)
        params.program = _find_program(options)
    except UsageError as err:
        if str(err):
            print(err, file=sys.stderr)
        print(get_usage(), file=sys.stderr)
        return 1
    if options.output is not None and params.objective is None and params.checker is None:
        print("You must specify an objective or a checker to use the output option.")
        return 1
    if options.sorted:
        params.iterations = 1

    benchmark = Benchmark(options, params)
    try:
        return int(benchmark.run(sys.stdout))
    except KeyboardInterrupt:
        return int(benchmark.fails)


if __name__ == "__main__":
    sys.exit(main())