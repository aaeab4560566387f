from collections.abc import Callable, Iterable
from typing import Any

from attrs import field

from cmdargs.declaration import parse_declaration
from cmdargs.utils import frozen, optional_to_tuple_converter, to_tuple_converter

__all__ = [
    "ANY_OPTION",
    "OptionConfig",
    "option",
]

ANY_OPTION = "*"
"""Store key of a wildcard configuration that lets unconfigured options through."""


@frozen(kw_only=True)
class OptionConfig:
    """Configuration of one logical option.

    Example usage:

    .. code-block:: python

        from cmdargs import Cmd, OptionConfig
        from cmdargs.validators import Number

        cmd = Cmd(["--foo-bar", "3", "-q", "quux"])
        cmd.parse_with(
            [
                OptionConfig(names=["foo-bar", "f"], has_arg=True, defaults=["1"], validator=Number()),
                OptionConfig(names=["q"]),
            ]
        )
        assert cmd.opt_arg("foo-bar") == 3
        assert cmd.has_opt("q")
        assert cmd.args == ["quux"]
    """

    # Falls back to ``names[0]``; see ``key``.
    store_key: str = ""

    # This can ONLY ever be a Tuple[str, ...]
    names: None | str | Iterable[str] = field(default=(), converter=to_tuple_converter)

    has_arg: bool = False

    is_array: bool = False

    # This can ONLY ever be ``None`` or ``Tuple[str, ...]``
    defaults: None | str | Iterable[str] = field(default=None, converter=optional_to_tuple_converter)

    validator: Callable[[str], Any] | None = field(default=None, eq=False)

    desc: str = field(default="", eq=False)

    arg_in_help: str = field(default="", eq=False)

    @property
    def key(self) -> str:
        """The key under which parsed values are stored."""
        if self.store_key:
            return self.store_key
        if self.names:
            return self.names[0]  # pyright: ignore[reportIndexIssue]
        return ""

    @property
    def is_any_option(self) -> bool:
        return self.key == ANY_OPTION

    @property
    def display_names(self) -> tuple[str, ...]:
        """Names with their leading hyphens, e.g. ``("-f", "--foo")``."""
        return tuple(f"-{x}" if len(x) == 1 else f"--{x}" for x in self.names)  # pyright: ignore

    def convert(self, value: str) -> Any:
        """Run the validator on a raw ``value``; return the (possibly converted) value."""
        if self.validator is None:
            return value
        return self.validator(value)


def option(
    declaration: str,
    *,
    store_key: str = "",
    has_arg: bool | None = None,
    is_array: bool = False,
    validator: Callable[[str], Any] | None = None,
    desc: str = "",
    arg_in_help: str = "",
) -> OptionConfig:
    """Create an :class:`OptionConfig` from a compact declaration string.

    .. code-block:: python

        option("f,foo-bar=123", validator=Number())
        option("I,include=[]", is_array=True)
        option("v,verbose")

    Parameters
    ----------
    declaration: str
        Names and default values; see :func:`~cmdargs.declaration.parse_declaration`.
    has_arg: bool | None
        Defaults to :obj:`True` if the declaration carries defaults, or ``is_array`` is set.

    Raises
    ------
    MalformedSpecError
        If the declaration cannot be parsed.
    """
    parsed = parse_declaration(declaration)
    if has_arg is None:
        has_arg = parsed.defaults is not None or is_array
    return OptionConfig(
        store_key=store_key,
        names=parsed.names,
        has_arg=has_arg,
        is_array=is_array,
        defaults=parsed.defaults,
        validator=validator,
        desc=desc,
        arg_in_help=arg_in_help,
    )
