"""To prevent circular dependencies, this module should never import anything else from cmdargs."""

import functools
import shlex
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Literal

# https://threeofwands.com/attra-iv-zero-overhead-frozen-attrs-classes/
if TYPE_CHECKING:
    from attrs import frozen
else:
    from attrs import define

    frozen = functools.partial(define, unsafe_hash=True)


class SentinelMeta(type):
    def __repr__(cls) -> str:
        return f"<{cls.__name__}>"

    def __bool__(cls) -> Literal[False]:
        return False


class Sentinel(metaclass=SentinelMeta):
    def __new__(cls):
        raise ValueError("Sentinel objects are not intended to be instantiated. Subclass instead.")


class UNSET(Sentinel):
    """Special sentinel value indicating that no data was provided. **Do not instantiate**."""


def is_iterable(obj) -> bool:
    if isinstance(obj, list | tuple | set | dict):  # Fast path for common types
        return True
    return not isinstance(obj, str) and isinstance(obj, Iterable)


def to_tuple_converter(value: None | Any | Iterable[Any]) -> tuple[Any, ...]:
    """Convert a single element or an iterable of elements into a tuple.

    Intended to be used in an ``attrs.Field``. If :obj:`None` is provided, returns an empty tuple.
    If a single element is provided, returns a tuple containing just that element.
    If an iterable is provided, converts it into a tuple.
    """
    if value is None:
        return ()
    elif is_iterable(value):
        return tuple(value)
    else:
        return (value,)


def optional_to_tuple_converter(value: None | Any | Iterable[Any]) -> tuple[Any, ...] | None:
    """Like :func:`to_tuple_converter`, but :obj:`None` stays :obj:`None`.

    Intended to be used in an ``attrs.Field`` where "not provided" and "empty" differ.
    """
    if value is None:
        return None
    return to_tuple_converter(value)


def normalize_tokens(tokens: None | str | Iterable[str]) -> tuple[str, ...]:
    if tokens is None:
        tokens = sys.argv[1:]  # Remove the executable
    elif isinstance(tokens, str):
        tokens = shlex.split(tokens)
    return tuple(tokens)


def is_allowed_first_character(char: str) -> bool:
    return char.isascii() and char.isalpha()


def is_allowed_character(char: str) -> bool:
    return char in "-_" or (char.isascii() and char.isalnum())


def is_valid_option_name(name: str) -> bool:
    """Checks if ``name`` may be used as an option name.

    The first character must be an ASCII letter; the rest may be letters, digits, ``-`` or ``_``.
    Single character names are therefore always letters (numeric short options are unsupported).
    """
    if not name or not is_allowed_first_character(name[0]):
        return False
    return all(is_allowed_character(c) for c in name[1:])


def is_option_like(token: str) -> bool:
    """Checks if a token looks like an option (or the end-of-options delimiter).

    A lone ``"-"`` is conventionally stdin/stdout and is **not** option-like.
    """
    return len(token) > 1 and token.startswith("-")
