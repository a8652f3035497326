"""
Arguably parser layer: declare, parse, and query command lines.

What this module provides
- ArgParser: a parser instance configured through chained builder calls:
  • helptext(text) / version(text): enable automatic --help/-h and --version/-v.
  • option(name, default=...): value-taking entries (--name value, -n value, --name=value).
  • flag(name): presence-only entries counted per occurrence (--name, -n, -nnn).
  • command(name, parser): nested sub-command parsers (git-style interfaces).
  • callback(func): called on a sub-command parser once it has been parsed.
  • enable_help_command(): turn on the built-in "help <command>" sub-command.

- The engine: parse() reads sys.argv[1:]; parse_args(tokens) reads a given
  sequence (no process state involved). Both classify each token and mutate
  per-entry state, dispatching into sub-command parsers on a match.

- The query API: value(), values(), count(), found(), args, cmd_name,
  cmd_parser, has_args, num_args, has_cmd.

Quick start
    from arguably import ArgParser, ArgParserError

    parser = (
        ArgParser()
        .helptext("Usage: foobar...")
        .version("1.0")
        .flag("foo f")
        .option("bar b")
    )

    try:
        parser.parse()
    except ArgParserError as error:
        error.exit()

    if parser.found("foo"):
        print("Found --foo/-f flag.")

Input dialect
- "--"               end of options; every remaining token is positional.
- "--name"           long flag, or long option taking the next token.
- "--name=value"     long option with an inline value (must be non-empty).
- "-abc"             condensed short flags; an option inside the cluster takes
                     the next stream token, so only the trailing one should be
                     an option for the input to be well-formed.
- "-o value", "-o=value"
- "-" and "-<digit>…" are positional (stdin marker, negative numbers).
- the first bare token may name a registered sub-command; everything after it
  belongs to that sub-command's parser.

Design notes
- Alias tables map names to entry indices, so all aliases of an entry share
  its accumulated state (see arguably.tables).
- Option values are taken verbatim, even when they look like flags.
- Lookups through the query API raise BadNameError on unregistered names.
- Help, version and "help <command>" terminate the process through
  arguably.outputs.announce; they never raise parse errors.
"""
import functools
import operator
import sys
from collections.abc import Iterable

from . import outputs
from .faults import BadNameError, MissingValueError, MissingHelpArgError, NotUnicodeError
from .streams import ArgStream
from .tables import OptionEntry, FlagEntry, Registry
from .utils import Unset, coalesce, mirror


def _isdigit(char):
    return char.isascii() and char.isdigit()


class ArgParser:
    """
    A parser instance: registration tables, parse state and query accessors.

    Lifecycle
    - built empty, configured with chained builder calls in any order,
      parsed exactly once, then queried any number of times.
    - sub-command parsers follow the same lifecycle, driven by their parent.

    Re-parsing an already-parsed instance is not supported.
    """

    def __init__(self):
        self._helptext = None
        self._version = None
        self._args = []
        self._options = Registry("option")
        self._flags = Registry("flag")
        self._commands = Registry("command")
        self._command_name = None
        self._callback = None
        self._auto_help_cmd = False

    # ------------------------------------------------------------------
    # builder API
    # ------------------------------------------------------------------

    def helptext(self, text, /):
        """
        set the help text printed (trimmed) by --help, or by -h when no
        entry claims 'h'.
        """
        if not isinstance(text, str):
            raise TypeError("helptext() argument must be a string")
        self._helptext = text
        return self

    def version(self, text, /):
        """
        set the version text printed (trimmed) by --version, or by -v when no
        entry claims 'v'.
        """
        if not isinstance(text, str):
            raise TypeError("version() argument must be a string")
        self._version = text
        return self

    def option(self, name, /, default=Unset):
        """
        register a value-taking option.

        parameters
        - name: str, space-separated aliases and one-character shortcuts
          (e.g. "output out o").
        - default: str, returned by value() when the option was never supplied.
          it does not count as an occurrence for count()/found().

        returns
        - self, for chaining.
        """
        if not isinstance(default, str | Unset):
            raise TypeError("option() default must be a string")
        self._options.register(name, OptionEntry(coalesce(default)))
        return self

    def flag(self, name, /):
        """
        register a flag; name accepts space-separated aliases (e.g. "verbose v").
        """
        self._flags.register(name, FlagEntry())
        return self

    def command(self, name, parser, /):
        """
        register a sub-command. `parser` is an ArgParser configured with the
        sub-command's own help text, flags, options and callback.
        """
        if not isinstance(parser, ArgParser):
            raise TypeError("command() second argument must be an ArgParser")
        self._commands.register(name, parser)
        return self

    def callback(self, callback, /):
        """
        register a callback on a sub-command parser. when the sub-command is
        found and parsed successfully, it is called as callback(name, parser)
        with the alias that matched and this parser instance.
        """
        if not callable(callback):
            raise TypeError("callback() argument must be callable")
        self._callback = callback
        return self

    def enable_help_command(self):
        """
        turn on the built-in "help <command>" sub-command, which prints the
        named sub-command's help text and exits.
        """
        self._auto_help_cmd = True
        return self

    # ------------------------------------------------------------------
    # query API
    # ------------------------------------------------------------------

    def _option(self, name):
        if (entry := self._options.lookup(name)) is None:
            raise BadNameError("'%s' is not a registered option name" % name)
        return entry

    def value(self, name, /):
        """
        return the last value supplied for the named option, else its default,
        else None.

        raises
        - BadNameError: `name` is not a registered option alias.
        """
        entry = self._option(name)
        if entry.values:
            return entry.values[-1]
        return entry.default

    def values(self, name, /):
        """
        return a copy of every value supplied for the named option, in input order.
        """
        return list(self._option(name).values)

    def count(self, name, /):
        """
        return how many times the named flag or option was found.

        raises
        - BadNameError: `name` is neither a flag nor an option alias.
        """
        if (entry := self._flags.lookup(name)) is not None:
            return entry.count
        if (entry := self._options.lookup(name)) is not None:
            return len(entry.values)
        raise BadNameError("'%s' is not a registered flag or option name" % name)

    def found(self, name, /):
        return self.count(name) > 0

    args = mirror("args")

    @property
    def has_args(self):
        return len(self._args) > 0

    @property
    def num_args(self):
        return len(self._args)

    @property
    def has_cmd(self):
        return self._command_name is not None

    @property
    def cmd_name(self):
        return self._command_name

    @property
    def cmd_parser(self):
        if self._command_name is None:
            return None
        return self._commands.lookup(self._command_name)

    # ------------------------------------------------------------------
    # parser engine
    # ------------------------------------------------------------------

    def parse(self):
        """
        parse the program's command line arguments (sys.argv without the program name).

        raises
        - NotUnicodeError: an argument carries bytes that could not be decoded
          (the interpreter surrogate-escapes them).
        - BadNameError, MissingValueError, MissingHelpArgError: see parse_args().
        """
        tokens = sys.argv[1:]
        for token in tokens:
            try:
                token.encode("utf-8")
            except UnicodeEncodeError:
                raise NotUnicodeError() from None
        self._parse_argstream(ArgStream(tokens))

    def parse_args(self, args, /):
        """
        parse a given sequence of strings instead of the process arguments.

        the first error stops parsing and propagates; state mutated by earlier
        tokens is kept.
        """
        if isinstance(args, str) or not isinstance(args, Iterable):
            raise TypeError("parse_args() argument must be an iterable of strings")
        self._parse_argstream(ArgStream(args))

    def _parse_argstream(self, stream):
        """
        consume `stream` against the registration tables.

        classification (in order)
        - "--": all remaining tokens become positionals.
        - "--…": long flag/option (with or without "=value").
        - "-…": "-" and "-<digit>…" are positionals; otherwise short flags/options.
        - first token only: a registered sub-command takes over the stream;
          "help <command>" when the built-in help command is enabled.
        - anything else is positional.
        """
        is_first_arg = True

        while stream.has_next():
            arg = stream.next()

            if arg == "--":
                self._args.extend(stream.remaining())

            elif arg.startswith("--"):
                if "=" in arg:
                    self._handle_equals_opt(arg)
                else:
                    self._handle_long_opt(arg, stream)

            elif arg.startswith("-"):
                if arg == "-" or _isdigit(arg[1]):
                    self._args.append(arg)
                elif "=" in arg:
                    self._handle_equals_opt(arg)
                else:
                    self._handle_short_opt(arg, stream)

            elif is_first_arg and arg in self._commands:
                parser = self._commands.lookup(arg)
                parser._parse_argstream(stream)
                self._command_name = arg
                if parser._callback is not None:
                    parser._callback(arg, parser)

            elif is_first_arg and arg == "help" and self._auto_help_cmd:
                self._handle_help_cmd(stream)

            else:
                self._args.append(arg)

            is_first_arg = False

    def _take_value(self, entry, stream, message):
        if not stream.has_next():
            raise MissingValueError(message)
        entry.values.append(stream.next())

    def _handle_long_opt(self, arg, stream):
        name = arg[2:]
        if (entry := self._flags.lookup(name)) is not None:
            entry.count += 1
        elif (entry := self._options.lookup(name)) is not None:
            self._take_value(entry, stream, "missing value for %s" % arg)
        elif name == "help" and self._helptext is not None:
            outputs.announce(self._helptext)
        elif name == "version" and self._version is not None:
            outputs.announce(self._version)
        else:
            raise BadNameError("%s is not a recognised flag or option name" % arg)

    def _handle_short_opt(self, arg, stream):
        clustered = len(arg) > 2
        for char in arg[1:]:
            if (entry := self._flags.lookup(char)) is not None:
                entry.count += 1
            elif (entry := self._options.lookup(char)) is not None:
                if clustered:
                    message = "missing value for '%s' in %s" % (char, arg)
                else:
                    message = "missing value for %s" % arg
                self._take_value(entry, stream, message)
            elif char == "h" and self._helptext is not None:
                outputs.announce(self._helptext)
            elif char == "v" and self._version is not None:
                outputs.announce(self._version)
            elif clustered:
                raise BadNameError("'%s' in %s is not a recognised flag or option name" % (char, arg))
            else:
                raise BadNameError("%s is not a recognised flag or option name" % arg)

    def _handle_equals_opt(self, arg):
        name, value = arg.split("=", 1)
        if (entry := self._options.lookup(name.lstrip("-"))) is None:
            raise BadNameError("%s is not a recognised option name" % name)
        if not value:
            raise MissingValueError("missing value for %s" % name)
        entry.values.append(value)

    def _handle_help_cmd(self, stream):
        if not stream.has_next():
            raise MissingHelpArgError()
        name = stream.next()
        if (parser := self._commands.lookup(name)) is None:
            raise BadNameError("'%s' is not a recognised command name" % name)
        outputs.announce(parser._helptext or "")

    # ------------------------------------------------------------------
    # representation
    # ------------------------------------------------------------------

    def __rich_repr__(self):
        yield "helptext", self._helptext
        yield "version", self._version
        yield "options", self._options
        yield "flags", self._flags
        yield "commands", self._commands
        yield "args", self._args
        yield "cmd_name", self._command_name
        yield "auto_help_cmd", self._auto_help_cmd

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"


__all__ = (
    "ArgParser",
)
