"""
Process-terminating output helpers.

Every place where the library writes to a standard stream and ends the
process goes through this module:

- announce(text): print the whitespace-trimmed text to stdout, exit 0.
  Used by --help/-h, --version/-v and the built-in "help <command>".
- complain(fault): render a fault ("Error: <message>.") to stderr, exit 1.
  Used by ArgParserError.exit().

Consoles are built per call, so redirected or patched sys.stdout/sys.stderr
are always honoured. Caller text is opaque: announce() writes it to the
console's file as-is (tabs, carriage returns and markup-like brackets
included), only trimmed and newline-terminated.
"""
import sys

from rich.console import Console


def announce(text, /):
    console = Console()
    console.file.write(text.strip() + "\n")
    console.file.flush()
    sys.exit(0)


def complain(fault, /):
    console = Console(stderr=True)
    console.print(fault, soft_wrap=True)
    sys.exit(1)


__all__ = (
    "announce",
    "complain",
)
