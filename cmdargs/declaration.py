"""Compact option declarations.

A declaration packs an option's names and default values into one string:

.. code-block:: text

    "f,foo"          names ("f", "foo"), no defaults
    "f,foo=123"      names ("f", "foo"), defaults ("123",)
    "q="             names ("q",), defaults ("",)
    "q=[1,2,3]"      names ("q",), defaults ("1", "2", "3")
    "q=[]"           names ("q",), defaults ()
    "q=/[1,2/3]"     names ("q",), defaults ("1,2", "3")
    "q/[1,2/3]"      same as above; the ``=`` may be omitted before a custom separator

Brackets inside a bracketed list must be balanced: ``"q=[[a],b]"`` is fine, ``"q=[a]]"`` is not.
"""

from collections.abc import Iterable

from attrs import field

from cmdargs.exceptions import MalformedSpecError
from cmdargs.utils import frozen, is_allowed_character, optional_to_tuple_converter, to_tuple_converter

__all__ = [
    "Declaration",
    "format_declaration",
    "parse_declaration",
]

DEFAULT_SEPARATOR = ","


@frozen
class Declaration:
    names: tuple[str, ...] = field(converter=to_tuple_converter)
    defaults: tuple[str, ...] | None = field(default=None, converter=optional_to_tuple_converter)


def _check_separator(declaration: str, sep: str):
    if is_allowed_character(sep) or sep in "[]=":
        raise MalformedSpecError(
            declaration=declaration,
            reason=f'Separator "{sep}" is ambiguous; it cannot be a letter, digit, "-", "_", "[", "]" or "=".',
        )


def _parse_names(declaration: str, text: str) -> tuple[str, ...]:
    names = tuple(x.strip() for x in text.split(","))
    if not all(names):
        raise MalformedSpecError(declaration=declaration, reason="Option names must not be empty.")
    return names


def _is_balanced(text: str) -> bool:
    depth = 0
    for c in text:
        if c == "[":
            depth += 1
        elif c == "]":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def _parse_defaults(declaration: str, text: str) -> tuple[str, ...]:
    """Parse everything after the ``=`` (or, for ``"q/[...]"``, starting at the separator)."""
    if text.startswith("["):
        sep, body = DEFAULT_SEPARATOR, text[1:]
    elif text[1:2] == "[":
        sep, body = text[0], text[2:]
        _check_separator(declaration, sep)
    elif "[" in text or "]" in text:
        raise MalformedSpecError(declaration=declaration, reason="Unbalanced brackets.")
    else:
        return (text,)

    if not body.endswith("]"):
        raise MalformedSpecError(declaration=declaration, reason='Missing closing "]".')
    body = body[:-1]
    if not _is_balanced(body):
        raise MalformedSpecError(declaration=declaration, reason="Unbalanced brackets.")
    if not body:
        return ()
    return tuple(body.split(sep))


def parse_declaration(declaration: str) -> Declaration:
    """Split an option declaration into its names and default values.

    Parameters
    ----------
    declaration: str
        Declaration string, e.g. ``"f,foo=[1,2]"``.

    Raises
    ------
    MalformedSpecError
        Empty names, unbalanced brackets or an ambiguous separator character.

    Returns
    -------
    Declaration
        ``defaults`` is :obj:`None` when the declaration carries no defaults at all,
        and ``()`` for an explicitly empty list (``"q=[]"``).
    """
    eq_index = declaration.find("=")
    bracket_index = declaration.find("[")

    if bracket_index >= 0 and (eq_index < 0 or bracket_index < eq_index):
        # "q/[1/2/3]"; the character before "[" is the separator.
        if bracket_index == 0:
            raise MalformedSpecError(declaration=declaration, reason="Option names must not be empty.")
        names = _parse_names(declaration, declaration[: bracket_index - 1])
        return Declaration(names, _parse_defaults(declaration, declaration[bracket_index - 1 :]))

    if eq_index >= 0:
        names = _parse_names(declaration, declaration[:eq_index])
        return Declaration(names, _parse_defaults(declaration, declaration[eq_index + 1 :]))

    if "]" in declaration:
        raise MalformedSpecError(declaration=declaration, reason="Unbalanced brackets.")
    return Declaration(_parse_names(declaration, declaration))


def format_declaration(
    names: Iterable[str],
    defaults: Iterable[str] | None = None,
    sep: str = DEFAULT_SEPARATOR,
) -> str:
    """Inverse of :func:`parse_declaration`.

    Any default sequence whose values don't contain ``sep`` and only use balanced brackets
    is reproduced exactly by :func:`parse_declaration`.
    """
    text = ",".join(names)
    if defaults is None:
        return text

    defaults = tuple(defaults)
    if defaults == ("",):
        return f"{text}="
    if any(sep in x for x in defaults):
        raise ValueError(f'Default values must not contain the separator "{sep}".')
    if not _is_balanced("".join(defaults)):
        raise ValueError("Default values must not contain unbalanced brackets.")
    if sep == DEFAULT_SEPARATOR:
        return f"{text}=[{sep.join(defaults)}]"
    _check_separator(text, sep)
    return f"{text}={sep}[{sep.join(defaults)}]"
