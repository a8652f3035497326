"""
Arguably faults (errors and warnings) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing issue, grouped
  by domain so hosts can branch on kinds and searches stay predictable.
- ArgParserError: base exception carrying a human-readable detail message and
  its FaultCode. It renders itself as "Error: <message>." through rich and
  knows how to terminate the process (exit()).
- The four error kinds raised by the parser engine and the query API:
  BadNameError, MissingValueError, MissingHelpArgError, NotUnicodeError.
- ArgParserWarning / AliasShadowedWarning: development-time notices emitted
  through the warnings module.

Integration
- The engine raises at the first fault; earlier mutations stay in place.
- Callers catch ArgParserError and either inspect it or call exit():

      try:
          parser.parse()
      except ArgParserError as error:
          error.exit()

Styling
- exit() output is styled with three palette keys, overridable by the host
  through a __styles__ mapping in __main__:
  "error-prefix", "error-message", "error-suffix".
- Colour is only emitted when rich detects a capable terminal.
"""
from collections import defaultdict
from enum import IntEnum

from rich.text import Text

from . import outputs
from .utils import Unset, coalesce


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - names (1110x)
      • BAD_NAME: unregistered flag, option or command name.
    - values (1111x)
      • MISSING_VALUE, MISSING_HELP_ARG
    - environment (1112x)
      • NOT_UNICODE
    - warnings (12xxx)
      • ALIAS_SHADOWED
    """
    # --- name errors (1110x) ---
    BAD_NAME            = 11101

    # --- value errors (1111x) ---
    MISSING_VALUE       = 11111
    MISSING_HELP_ARG    = 11112

    # --- environment errors (1112x) ---
    NOT_UNICODE         = 11121

    # --- warnings (12xxx) ---
    ALIAS_SHADOWED      = 12101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _styles():
    return defaultdict(str, {
        "error-prefix": "bold #FF4DA6",  # friendly pinky prefix
        "error-message": "#C8C8D0",  # soft light gray message
        "error-suffix": "",
    } | getattr(__import__("__main__"), "__styles__", {}))


class ArgParserError(Exception):
    """
    base type for every error raised while parsing or querying.

    attributes
    - message: str, the detail text (a per-kind default when omitted).
    - code: FaultCode, fixed per subclass.
    """
    code = Unset
    default = "argument parsing failed"

    def __init__(self, message=Unset, /):
        if not isinstance(message, str | Unset):
            raise TypeError(f"{type(self).__name__}() argument must be a string")
        self.message = coalesce(message, type(self).default)
        super().__init__(self.message)

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"

    def __rich__(self):
        styles = _styles()
        return Text.assemble(
            ("Error: ", styles["error-prefix"]),
            (self.message, styles["error-message"]),
            (".", styles["error-suffix"]),
        )

    def exit(self):
        """
        print "Error: <message>." to stderr and exit with status 1.
        """
        outputs.complain(self)


class BadNameError(ArgParserError):
    code = FaultCode.BAD_NAME
    default = "unrecognised name"


class MissingValueError(ArgParserError):
    code = FaultCode.MISSING_VALUE
    default = "missing value"


class MissingHelpArgError(ArgParserError):
    code = FaultCode.MISSING_HELP_ARG
    default = "missing argument for the help command"


class NotUnicodeError(ArgParserError):
    code = FaultCode.NOT_UNICODE
    default = "arguments are not valid unicode strings"


class ArgParserWarning(Warning):
    code = Unset


class AliasShadowedWarning(ArgParserWarning):
    """
    emitted when a registration rebinds an alias that already pointed at
    another entry of the same kind. the newest registration wins; the older
    entry stays registered but cannot be reached through that alias.
    """
    code = FaultCode.ALIAS_SHADOWED


__all__ = (
    "FaultCode",
    "ArgParserError",
    "BadNameError",
    "MissingValueError",
    "MissingHelpArgError",
    "NotUnicodeError",
    "ArgParserWarning",
    "AliasShadowedWarning",
)
