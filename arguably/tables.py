"""
Registration tables.

Each parser holds three tables (options, flags, commands). A table pairs an
ordered list of entries with a mapping from every registered alias to an
entry index; several aliases therefore share one entry's accumulated state.

Alias specifications are whitespace-separated strings ("verbose v"). Long
names and one-character shortcuts live in the same key space; no distinction
is made at registration time.
"""
import warnings

from .faults import AliasShadowedWarning


class OptionEntry:
    """
    accumulated state of one value-taking option.

    - values: list[str], append-only during parsing (one item per occurrence).
    - default: str | None, returned by value() when nothing was supplied.
    """
    __slots__ = ("values", "default")

    def __init__(self, default=None):
        self.values = []
        self.default = default

    def __repr__(self):
        return f"option(values={self.values!r}, default={self.default!r})"


class FlagEntry:
    """
    accumulated state of one flag: a non-negative occurrence count.
    """
    __slots__ = ("count",)

    def __init__(self):
        self.count = 0

    def __repr__(self):
        return f"flag(count={self.count!r})"


class Registry:
    """
    ordered entries plus an alias -> index mapping.

    rules
    - register() appends the entry, then binds every alias of the spec to its index.
    - rebinding an alias keeps the newest binding and emits AliasShadowedWarning;
      the older entry stays in `entries` but is unreachable through that alias.
    - an empty spec registers an unreachable entry (not an error).
    - indices in `aliases` are always valid indices into `entries`.
    """
    __slots__ = ("kind", "entries", "aliases")

    def __init__(self, kind):
        self.kind = kind
        self.entries = []
        self.aliases = {}

    def register(self, spec, entry, /, *, stacklevel=2):
        """
        append `entry` and bind each alias in `spec` to it.

        parameters
        - spec: str, whitespace-separated aliases.
        - entry: the entry object to store.
        - stacklevel: forwarded to warnings.warn so shadowing notices point at
          the caller's registration line.

        returns
        - int, the index of the new entry.
        """
        if not isinstance(spec, str):
            raise TypeError(f"{self.kind} name must be a string of space-separated aliases")
        self.entries.append(entry)
        index = len(self.entries) - 1
        for alias in spec.split():
            if alias in self.aliases and self.aliases[alias] != index:
                warnings.warn(AliasShadowedWarning(
                    f"{self.kind} alias {alias!r} was already registered; the newest registration wins"
                ), stacklevel=stacklevel + 1)
            self.aliases[alias] = index
        return index

    def lookup(self, alias, /):
        """
        return the entry bound to `alias`, or None when it is unknown.
        """
        try:
            return self.entries[self.aliases[alias]]
        except KeyError:
            return None

    def __contains__(self, alias, /):
        return alias in self.aliases

    def __rich_repr__(self):
        yield "entries", self.entries
        yield "aliases", self.aliases

    def __repr__(self):
        return f"{type(self).__name__}({self.kind!r}, entries={self.entries!r}, aliases={self.aliases!r})"


__all__ = (
    "OptionEntry",
    "FlagEntry",
    "Registry",
)
