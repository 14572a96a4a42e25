"""
Print-read loop for Pon.

Reads one line at a time, evaluates it against a persistent root environment
and prints the result. Errors are reported as a single ``error: ...`` line on
stderr and the loop carries on with the environment untouched.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, TextIO

from pon.config import get_log_level, get_prompt, get_recursion_limit
from pon.errors import PonError
from pon.interpreter import Interpreter
from pon.printer import to_string

logger = logging.getLogger(__name__)


def eval_line(interp: Interpreter, line: str, out: TextIO, err: TextIO) -> bool:
    """Evaluate one line and print its result or a diagnostic. Returns success."""
    try:
        text = to_string(interp.eval(line))
    except PonError as ex:
        logger.debug("diagnostic for %r: %s", line, ex)
        print(f"error: {ex}", file=err)
        return False
    except RecursionError:
        logger.debug("recursion limit hit for %r", line)
        print("error: maximum recursion depth exceeded", file=err)
        return False
    print(text, file=out)
    return True


def run(
    lines: Iterable[str],
    interp: Optional[Interpreter] = None,
    prompt: str = "",
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Drive the loop over `lines`; returns the number of failed lines."""
    interp = interp or Interpreter()
    out = out or sys.stdout
    err = err or sys.stderr
    failures = 0
    if prompt:
        out.write(prompt)
        out.flush()
    for line in lines:
        if line.strip():
            if not eval_line(interp, line, out, err):
                failures += 1
        if prompt:
            out.write(prompt)
            out.flush()
    if prompt:
        out.write("\n")
    return failures


def main_with_args(prompt: Optional[str] = None, no_prompt: bool = False, exprs: Optional[list[str]] = None):
    logging.basicConfig(
        level=get_log_level(),
        format='%(message)s',
        stream=sys.stderr
    )
    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if exprs:
        failures = run(exprs, interp)
    else:
        if no_prompt:
            prompt = ""
        elif prompt is None:
            prompt = get_prompt() if sys.stdin.isatty() else ""
        failures = run(sys.stdin, interp, prompt=prompt)
    return 1 if exprs and failures else 0


def main():
    parser = argparse.ArgumentParser(
        description="Read-eval-print loop for the Pon Lisp interpreter"
    )
    parser.add_argument(
        "--prompt",
        help="Prompt string (defaults to $PON_PROMPT or 'pon> ')",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not print a prompt",
    )
    parser.add_argument(
        "-e",
        "--eval",
        dest="exprs",
        action="append",
        metavar="EXPR",
        help="Evaluate EXPR, print the result and exit (may be repeated)",
    )
    args = parser.parse_args()
    sys.exit(main_with_args(**vars(args)))


if __name__ == "__main__":
    main()
