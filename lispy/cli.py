"""
Lispy command-line interface

Usage:
    lispy                  # interactive prompt
    lispy file.lspy ...    # evaluate files in order, sharing one environment
    lispy --ast file.lspy  # also print each parse tree
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

# Readline support for line editing and history
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    READLINE_AVAILABLE = False

from lispy import __version__
from lispy.config import color_enabled, get_history_file, get_log_level, get_prompt
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.printer import print_value
from lispy.reader.parser import NESTED_TOO_DEEPLY, parse

logger = logging.getLogger(__name__)


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lispy",
        description="Lispy - a small S-expression / Q-expression language",
    )
    parser.add_argument("files", nargs="*", help="source files to evaluate")
    parser.add_argument("--ast", action="store_true", help="print the parse tree of each input")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"Lispy {__version__}")
    return parser


def run_files(interp: Interpreter, paths: list[str], show_ast: bool = False,
              out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Evaluate each file in turn, printing every top-level result."""
    out = out or sys.stdout
    err = err or sys.stderr
    status = 0
    for path in paths:
        try:
            if show_ast:
                with open(path, encoding="utf-8") as f:
                    out.write(parse(f.read()).dump() + "\n")
            for value in interp.load(path):
                print_value(value, out)
        except OSError as e:
            logger.warning("could not read %s: %s", path, e)
            err.write(f"Could not load {path}: {e.strerror or e}\n")
            status = 1
        except LispySyntaxError as e:
            logger.warning("syntax error in %s: %s", path, e)
            err.write(f"{path}: {e}\n")
            status = 1
        except RecursionError:
            logger.warning("recursion limit hit in %s", path)
            err.write(f"{path}: {NESTED_TOO_DEEPLY}\n")
            status = 1
    return status


def make_completer(interp: Interpreter):
    """Readline completer over the names currently bound in the environment."""
    def completer(text: str, state: int) -> str | None:
        options = [name for name in interp.env.names() if name.startswith(text)]
        return options[state] if state < len(options) else None
    return completer


def _setup_readline(interp: Interpreter) -> None:
    if not READLINE_AVAILABLE:
        return
    try:
        readline.read_history_file(str(get_history_file()))
    except OSError:
        # First run: no history yet
        pass
    readline.set_completer_delims(" \t\n(){}")
    readline.set_completer(make_completer(interp))
    readline.parse_and_bind("tab: complete")


def _save_history() -> None:
    if not READLINE_AVAILABLE:
        return
    try:
        readline.write_history_file(str(get_history_file()))
    except OSError as e:
        logger.warning("could not write history: %s", e)


def repl(interp: Interpreter, show_ast: bool = False, color: bool = True) -> int:
    print(f"Lispy version {__version__}")
    print("Press Ctrl+c to Exit\n")
    _setup_readline(interp)
    prompt = get_prompt()
    try:
        while True:
            try:
                line = input(prompt)
            except EOFError:
                print()
                break
            # An empty line is the empty S-expression and prints ()
            try:
                if show_ast:
                    print(parse(line).dump())
                print_value(interp.eval(line), color=color)
            except LispySyntaxError as e:
                print(f"<stdin>: {e}")
            except RecursionError:
                logger.warning("recursion limit hit evaluating input")
                print(f"<stdin>: {NESTED_TOO_DEEPLY}")
    except KeyboardInterrupt:
        print()
    finally:
        _save_history()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    interp = Interpreter()
    if args.files:
        return run_files(interp, args.files, show_ast=args.ast)
    color = color_enabled() and not args.no_color and sys.stdout.isatty()
    return repl(interp, show_ast=args.ast, color=color)


if __name__ == "__main__":
    sys.exit(main())
