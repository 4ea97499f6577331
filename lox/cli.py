"""
Command-line driver for the Lox scanner.

Usage:
    lox SCRIPT        scan a file and print its tokens
    lox --prompt      scan lines interactively

Exit codes follow sysexits.h: 64 for usage errors, 65 when the source had
lexical errors, 66 when the script cannot be read.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Scanner, Token
from .reporter import ErrorReporter

logger = logging.getLogger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

USAGE = "Usage: lox [script]"
PROMPT = "> "


def setup_logging(log_level: str = "WARNING") -> None:
    """
    Configure application logging.

    Sets up a single stderr handler on the root logger so debug output never
    mixes with the token listing on stdout.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


class Lox:
    """
    Runs source text through the scanner and prints the tokens.

    Owns the error reporter, and with it the "had error" state that decides
    the exit status in file mode.
    """

    def __init__(self, reporter: Optional[ErrorReporter] = None, out: Optional[TextIO] = None):
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self, source: str) -> List[Token]:
        scanner = Scanner(source, self.reporter.error)
        tokens = scanner.scan_all()

        # For now, just print the tokens.
        for token in tokens:
            print(token, file=self.out)
        return tokens

    def run_file(self, path: str) -> int:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s", path, exc_info=True)
            print(f"Could not read '{path}': {getattr(e, 'strerror', None) or e}", file=sys.stderr)
            return EX_NOINPUT

        logger.info("Running %s", path)
        self.run(source)
        return EX_DATAERR if self.reporter.had_error else EX_OK

    def run_prompt(self, stdin: Optional[TextIO] = None) -> int:
        """Read-scan-print loop; ends cleanly on end of input or Ctrl-C."""
        stdin = stdin if stdin is not None else sys.stdin
        while True:
            print(PROMPT, end="", file=self.out, flush=True)
            try:
                line = stdin.readline()
            except KeyboardInterrupt:
                print(file=self.out)
                break
            if not line:
                print(file=self.out)
                break
            self.run(line)
            # An error on one line must not affect the next
            self.reporter.reset()
        return EX_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan Lox source and print its tokens",
    )
    parser.add_argument("script", nargs="*", help="Lox source file to scan")
    parser.add_argument("-i", "--prompt", action="store_true",
                        help="Scan lines read interactively from standard input")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    lox = Lox()
    if len(args.script) > 1 or (args.prompt and args.script):
        print(USAGE)
        return EX_USAGE
    if len(args.script) == 1:
        return lox.run_file(args.script[0])
    if args.prompt:
        return lox.run_prompt()

    print(USAGE)
    return EX_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
