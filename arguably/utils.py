"""
Arguably utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the registration tables, the parser and the
  fault types.

Overview
- UnsetType / Unset
  • Singleton sentinel for "value not provided", distinct from None.
  • Used where None is itself a meaningful answer (an option default of None
    means "no default", a lookup returning None means "not found").

- coalesce(value, default=None)
  • Replace Unset with a concrete default, preserving None/""/0 as given.

- rename(callable, name) / @rename("name")
  • Assign a stable __name__/__qualname__ to generated accessors.

- mirror("attr")
  • Read-only property over a private backing field (self._attr) that hands
    out fresh copies of containers, so callers cannot mutate parser state.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
    >>> class X:
    ...     _items = [1, 2]
    ...     items = mirror("items")
    >>> X().items
    [1, 2]
"""
import builtins
import functools
from collections.abc import Sequence
from typing import final


@final
class UnsetType:
    """
    Sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None.
    - Printable: repr(Unset) -> "Unset".
    - Sealed and singleton: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Returns `object` unless it is Unset, in which case `default` is returned.
    Falsey values such as None, "" or [] are preserved as-is.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce("", "fallback")     -> ""
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable (updated in place)
    - rename(name)           -> decorator

    Raises
    - TypeError: on a non-callable target, a non-string name, or a callable
      whose names cannot be updated.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _detach(object):
    """
    Recursively copy containers so the caller receives state it may freely mutate.

    - Sequence (non-string) -> new list
    - anything else         -> returned as-is
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return list(map(_detach, object))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors the private field "_{name}".

    Containers are copied on every access (see _detach), so mutating the
    returned object never alters the owner's state.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()
"""
Sentinel for "not provided".

Typical pattern: value = coalesce(user_value, default), which materializes a
fallback only when user_value is Unset.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
