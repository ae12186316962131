"""
Line-based interactive loop for arithparse.

Reads one line at a time, parses it and prints the fully parenthesized
form. A bad line is reported on stderr and the loop moves on.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Lexer
from .parser import parse, to_display_string, ParseError


logger = logging.getLogger(__name__)

DEFAULT_PROMPT = ">> "


class Repl:
    """Runs the read-parse-print loop over a pair of streams."""

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
        prompt: str = DEFAULT_PROMPT,
        show_tokens: bool = False,
        filename: str = "<stdin>"
    ):
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.prompt = prompt
        self.show_tokens = show_tokens
        self.filename = filename
        self.failed_lines = 0

    def run(self) -> int:
        """Process lines until end of input; return the exit status."""
        interactive = self.stdin.isatty()

        while True:
            if interactive:
                self.stdout.write(self.prompt)
                self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                break

            self.process_line(line.rstrip("\r\n"))

        if interactive:
            self.stdout.write("\n")

        logger.debug("input exhausted, %d line(s) failed", self.failed_lines)
        return 1 if self.failed_lines else 0

    def process_line(self, line: str):
        if not line.strip():
            return

        if self.show_tokens:
            for token in Lexer(line, self.filename):
                print(token, file=self.stdout)
            return

        try:
            expression = parse(line, self.filename)
        except ParseError as e:
            self.failed_lines += 1
            print(e, file=self.stderr)
            return

        if expression is None:
            logger.info("no expression in line %r", line)
            return

        print(to_display_string(expression), file=self.stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the arithparse command."""

    parser = argparse.ArgumentParser(
        prog="arithparse",
        description="Parse integer arithmetic and print the fully parenthesized form",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    echo "1 - -2 / 2 * 3 + 5" | arithparse     # ((1 - (((-2) / 2) * 3)) + 5)
    arithparse --tokens --input lines.txt       # Dump the token stream
        """
    )

    parser.add_argument('--input', metavar='FILE',
                        help='Read lines from FILE instead of stdin')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token stream of each line instead of the AST')
    parser.add_argument('--prompt', default=DEFAULT_PROMPT,
                        help='Prompt shown when reading from a terminal')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    try:
        if args.input:
            try:
                f = open(args.input, 'r', encoding='utf-8')
            except OSError as e:
                print(f"arithparse: cannot read {args.input}: {e.strerror}", file=sys.stderr)
                return 2

            with f:
                repl = Repl(f, sys.stdout, sys.stderr, args.prompt, args.tokens, args.input)
                return repl.run()

        repl = Repl(sys.stdin, sys.stdout, sys.stderr, args.prompt, args.tokens)
        return repl.run()

    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 0


if __name__ == "__main__":
    sys.exit(main())
