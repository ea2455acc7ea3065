"""Command-line entry point for ceceio: evaluate an expression, run a file, or
start the interactive shell. Called from the `ceceio` console script and from
`python -m ceceio`.
"""

from __future__ import annotations

import argparse
import cmd
import logging
import sys
from typing import Iterator

from ceceio import __version__
from ceceio.config import get_log_level
from ceceio.debug_utils.pprint import pprint_expr, DEFAULT_OPTIONS
from ceceio.errors import CeceioError
from ceceio.interpreter import Interpreter
from ceceio.reader.parser import parse_all

logger = logging.getLogger(__name__)

RED = "\033[91m"
RESET = "\033[0m"

OPENERS = "(["
CLOSERS = ")]"


def report_error(error: BaseException, stream=None) -> None:
    """Print `error: <message>`, in red when writing to a terminal."""
    stream = stream if stream is not None else sys.stderr
    if isinstance(error, RecursionError):
        message = "maximum recursion depth exceeded"
    else:
        message = str(error)
    prefix = "error:"
    if stream.isatty():
        prefix = f"{RED}{prefix}{RESET}"
    print(f"{prefix} {message}", file=stream)


def open_depth(source: str) -> int:
    """Count unclosed brackets, skipping strings and `;` comments."""
    depth = 0
    in_string = escaped = in_comment = False
    for ch in source:
        if in_comment:
            in_comment = ch != "\n"
        elif in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == ";":
            in_comment = True
        elif ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth -= 1
    return depth


def render(source: str, interpreter: Interpreter, show_ast: bool) -> Iterator[str]:
    """Yield the printed form of each top-level expression, one at a time."""
    options = dict(DEFAULT_OPTIONS, color=sys.stdout.isatty())
    for expr in parse_all(source):
        yield pprint_expr(expr, options=options) if show_ast else str(interpreter.eval(expr))


class Shell(cmd.Cmd):
    """ceceio interactive shell."""
    intro = f"ceceio {__version__}\nType an expression, or 'exit' to leave."
    prompt = "> "
    secondary_prompt = ". "  # used while brackets are unbalanced

    def __init__(self, interpreter: Interpreter, show_ast: bool = False, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter
        self.show_ast = show_ast
        self._pending = ""

    def onecmd(self, line):
        """Only `exit` and end of input are commands; every other line is source.

        `help`, `?` and `!` are not special, so `help` evaluates an identifier.
        """
        command = line.strip()
        if command == "EOF" or (command == "exit" and not self._pending):
            return super().onecmd(command)
        if not command:
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Evaluates every expression on the line and prints the results."""
        source = f"{self._pending}\n{line}" if self._pending else line
        if open_depth(source) > 0:
            self._pending = source
            self.prompt = self.secondary_prompt
            return
        self._pending = ""
        self.prompt = Shell.prompt

        try:
            for text in render(source, self.interpreter, self.show_ast):
                print(text)
        except (CeceioError, RecursionError) as ex:
            # cmd.Cmd exits on an uncaught exception; report and keep the session
            report_error(ex, self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ceceio", description="ceceio interpreter")
    parser.add_argument("file", nargs="?", help="file to run (if empty and no -e, starts the shell)")
    parser.add_argument("-e", "--expr", help="evaluate one expression and print the result")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the prelude")
    parser.add_argument("--ast", action="store_true", help="print the parsed tree instead of evaluating")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter(prelude=None if args.no_prelude else 'auto')

    if args.expr is None and args.file is None:
        Shell(interpreter, show_ast=args.ast).cmdloop()
        return 0

    try:
        if args.expr is not None:
            expr = interpreter.parse(args.expr)
            if args.ast:
                options = dict(DEFAULT_OPTIONS, color=sys.stdout.isatty())
                print(pprint_expr(expr, options=options))
            else:
                print(interpreter.eval(expr))
        else:
            logger.debug("Running %s", args.file)
            with open(args.file, encoding="utf-8") as f:
                source = f.read()
            for text in render(source, interpreter, args.ast):
                print(text)
    except (OSError, CeceioError, RecursionError) as ex:
        report_error(ex)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
