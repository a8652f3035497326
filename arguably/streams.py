"""
Token stream shared by nested parsers.

An ArgStream is a single-pass cursor over the input tokens. The top-level
parse call owns it and lends it to every sub-command parser it dispatches to,
so a sub-parser resumes exactly where its parent stopped.

There is no lookahead beyond the current token and no rewind.
"""
from collections.abc import Iterable


class ArgStream:
    """
    single-pass cursor over an ordered sequence of argument strings.

    behavior
    - has_next(): True while unconsumed tokens remain.
    - next(): return the token under the cursor, then advance.
    - remaining(): drain and return every unconsumed token, in order.

    errors
    - TypeError when built from anything but an iterable of strings.
    - IndexError when next() is called on an exhausted stream.
    """
    __slots__ = ("_tokens", "_index")

    def __init__(self, tokens=(), /):
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("ArgStream() argument must be an iterable of strings")
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("ArgStream() argument must be an iterable of strings")
        self._tokens = tokens
        self._index = 0

    def has_next(self):
        return self._index < len(self._tokens)

    def next(self):
        if not self.has_next():
            raise IndexError("argument stream is exhausted")
        self._index += 1
        return self._tokens[self._index - 1]

    def remaining(self):
        tokens = self._tokens[self._index:]
        self._index = len(self._tokens)
        return tokens

    def __repr__(self):
        return "%s(%r, index=%d)" % (type(self).__name__, self._tokens, self._index)


__all__ = (
    "ArgStream",
)
