from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from attrs import define, field

from cmdargs.utils import UNSET, frozen, to_tuple_converter

__all__ = [
    "OptionState",
    "OptionValue",
    "ParsedArgs",
]


class OptionState(Enum):
    ABSENT = "absent"
    """The option was neither supplied nor has a default."""

    FLAG = "flag"
    """The option was supplied without a value."""

    SUPPLIED = "supplied"
    """The option was supplied with one or more values."""

    DEFAULT = "default"
    """The option was absent; values were seeded from its configured defaults."""


@frozen
class OptionValue:
    state: OptionState
    values: tuple[Any, ...] = field(default=(), converter=to_tuple_converter)
    is_array: bool = False

    @property
    def value(self) -> Any:
        """Pythonic view of the stored values.

        ``True`` for a flag, a list for an array option, otherwise the single value
        (or :obj:`None` if an option has an explicitly empty default).
        """
        if self.state is OptionState.FLAG:
            return True
        if self.is_array:
            return list(self.values)
        return self.values[0] if self.values else None


ABSENT = OptionValue(OptionState.ABSENT)


@define
class ParsedArgs(Mapping[str, OptionValue]):
    """Result of a parse: command arguments and option values by store key.

    Behaves as a read-only mapping of store keys to :class:`OptionValue`.
    """

    args: list[str] = field(factory=list, converter=list)
    """Command arguments in their original order."""

    opts: dict[str, OptionValue] = field(factory=dict)

    def __getitem__(self, key: str) -> OptionValue:
        return self.opts[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.opts)

    def __len__(self) -> int:
        return len(self.opts)

    def state(self, key: str) -> OptionState:
        return self.opts.get(key, ABSENT).state

    def has_opt(self, key: str) -> bool:
        return key in self.opts

    def is_default(self, key: str) -> bool:
        return self.state(key) is OptionState.DEFAULT

    def opt_arg(self, key: str) -> Any:
        """First value of an option; :obj:`None` if absent or valueless."""
        values = self.opts.get(key, ABSENT).values
        return values[0] if values else None

    def opt_args(self, key: str) -> list[Any] | None:
        """All values of an option; an empty list for a flag, :obj:`None` if absent."""
        try:
            return list(self.opts[key].values)
        except KeyError:
            return None

    def value(self, key: str, default: Any = UNSET) -> Any:
        """See :attr:`OptionValue.value`; returns ``default`` (:obj:`None` if unset) for absent options."""
        try:
            return self.opts[key].value
        except KeyError:
            return None if default is UNSET else default

    def as_dict(self) -> dict[str, Any]:
        return {key: x.value for key, x in self.opts.items()}
