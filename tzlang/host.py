"""Command-line host for tzlang: loads a source file, runs it and prints the
resulting value. Language errors are reported on stderr and turn into a
non-zero exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from termcolor import colored

from tzlang import __version__
from tzlang.config import get_log_level, get_recursion_limit
from tzlang.errors import TzError, TzLoadError
from tzlang.interpreter import Interpreter
from tzlang.types.values import format_value

logger = logging.getLogger(__name__)


def load_source(path: str | Path) -> str:
    """Return the file's text verbatim."""
    p = Path(path)
    if not p.is_file():
        raise TzLoadError(f"file does not exist: {path}")
    return p.read_bytes().decode("utf-8")


def report(error: TzError) -> None:
    label = colored("error: ", "red", attrs=["bold"])
    kind = colored(f"[{type(error).__name__}] ", attrs=["bold"])
    print(label + kind + str(error), file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tzlang", description="Run a tzlang program.")
    parser.add_argument("file", help="source file to run")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    try:
        source = load_source(args.file)
        result = Interpreter().run(source)
    except TzError as e:
        report(e)
        return 1

    print(format_value(result))
    return 0
