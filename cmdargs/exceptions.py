from collections.abc import Sequence
from typing import TYPE_CHECKING

from attrs import define, field

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ArrayWithoutArgError",
    "CmdargsError",
    "DefaultsWithoutArgError",
    "DuplicateNameError",
    "DuplicateStoreKeyError",
    "InvalidConfigError",
    "InvalidOptionError",
    "MalformedSpecError",
    "MultipleDefaultsWithoutArrayError",
    "OptionArgIsInvalidError",
    "OptionContainsInvalidCharError",
    "OptionIsNotArrayError",
    "OptionNeedsArgError",
    "OptionTakesNoArgError",
    "UnconfiguredOptionError",
]


@define
class CmdargsError(Exception):
    """Root exception for every error raised while building configurations or parsing tokens.

    Errors are terminal: the first one aborts the parse call that raised it.
    """

    msg: str | None = None
    """
    If set, override automatic message generation.
    """

    root_input_tokens: Sequence[str] | None = None
    """
    The CLI tokens that were fed into the parse call, if known.
    """

    console: "Console | None" = field(default=None, kw_only=True)
    """:class:`~rich.console.Console` to display the error with :func:`~cmdargs.print_error`."""

    def _message(self) -> str:
        return ""

    def __str__(self):
        if self.msg is not None:
            return self.msg
        return self._message()


@define(kw_only=True)
class MalformedSpecError(CmdargsError):
    """An option declaration string like ``"f,foo=[1,2]"`` could not be parsed."""

    declaration: str
    """The offending declaration string."""

    reason: str = ""
    """Human readable description of what is wrong."""

    def _message(self):
        message = f'Malformed option declaration "{self.declaration}".'
        if self.reason:
            message += f" {self.reason}"
        return message


########################
# Configuration errors #
########################


@define(kw_only=True)
class InvalidConfigError(CmdargsError):
    """Option configurations are inconsistent. Raised before any token is classified."""

    store_key: str
    """Store key of the offending configuration."""

    def _message(self):
        return f'Invalid option configuration (store_key: "{self.store_key}").'


@define(kw_only=True)
class DuplicateNameError(InvalidConfigError):
    """Two option configurations declare the same option name."""

    name: str
    """The duplicated option name."""

    def _message(self):
        return f'Option name "{self.name}" is declared more than once (store_key: "{self.store_key}").'


@define(kw_only=True)
class DuplicateStoreKeyError(InvalidConfigError):
    """Two option configurations store their values under the same key."""

    def _message(self):
        return f'Store key "{self.store_key}" is used by more than one option configuration.'


@define(kw_only=True)
class ArrayWithoutArgError(InvalidConfigError):
    """An option configuration is an array but doesn't take an argument."""

    def _message(self):
        return f'Option "{self.store_key}" is configured as an array but takes no argument.'


@define(kw_only=True)
class DefaultsWithoutArgError(InvalidConfigError):
    """An option configuration has default values but doesn't take an argument."""

    def _message(self):
        return f'Option "{self.store_key}" has default values but takes no argument.'


@define(kw_only=True)
class MultipleDefaultsWithoutArrayError(InvalidConfigError):
    """An option configuration has more than one default value but isn't an array."""

    def _message(self):
        return f'Option "{self.store_key}" has multiple default values but is not configured as an array.'


#################
# Option errors #
#################


@define(kw_only=True)
class InvalidOptionError(CmdargsError):
    """An option supplied on the command line is invalid."""

    option: str
    """The option name as written by the user, without leading hyphens."""

    store_key: str = ""
    """Store key of the matched configuration; empty if none was matched."""

    def _message(self):
        return f'Invalid option "{self.option}".'


@define(kw_only=True)
class OptionContainsInvalidCharError(InvalidOptionError):
    """The option name contains a character other than letters, digits, ``-`` and ``_``."""

    def _message(self):
        return f'Option "{self.option}" contains an invalid character.'


@define(kw_only=True)
class UnconfiguredOptionError(InvalidOptionError):
    """Unknown/unregistered option provided by the cli."""

    def _message(self):
        return f'Unknown option: "{self.option}".'


@define(kw_only=True)
class OptionNeedsArgError(InvalidOptionError):
    """An option that takes an argument was supplied without one."""

    def _message(self):
        return f'Option "{self.option}" requires an argument.'


@define(kw_only=True)
class OptionTakesNoArgError(InvalidOptionError):
    """An argument was supplied to a flag option."""

    def _message(self):
        return f'Option "{self.option}" does not take an argument.'


@define(kw_only=True)
class OptionIsNotArrayError(InvalidOptionError):
    """A non-array option has erroneously been specified multiple times."""

    def _message(self):
        return f'Option "{self.option}" specified multiple times.'


@define(kw_only=True)
class OptionArgIsInvalidError(InvalidOptionError):
    """Validator function rejected an option argument."""

    opt_arg: str = ""
    """The raw option argument that was rejected."""

    details: str = ""
    """Parenting Assertion/Value/Type Error message."""

    def _message(self):
        message = f'Invalid value "{self.opt_arg}" for "{self.option}".'
        if self.details:
            message += f" {self.details}"
        return message
