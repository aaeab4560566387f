__version__ = "0.1.0"

__all__ = [
    "ANY_OPTION",
    "ArrayWithoutArgError",
    "Classification",
    "Cmd",
    "CmdargsError",
    "Declaration",
    "DefaultsWithoutArgError",
    "DuplicateNameError",
    "DuplicateStoreKeyError",
    "ErrorPanel",
    "InvalidConfigError",
    "InvalidOptionError",
    "MalformedSpecError",
    "MultipleDefaultsWithoutArrayError",
    "OptionArgIsInvalidError",
    "OptionConfig",
    "OptionContainsInvalidCharError",
    "OptionIsNotArrayError",
    "OptionNeedsArgError",
    "OptionState",
    "OptionStore",
    "OptionTakesNoArgError",
    "OptionValue",
    "ParsedArgs",
    "Registry",
    "SubCommandSplit",
    "Token",
    "UNSET",
    "UnconfiguredOptionError",
    "bind_options",
    "classify",
    "format_declaration",
    "option",
    "parse_declaration",
    "print_error",
    "split_at_sub_command",
    "validators",
]

from cmdargs import validators
from cmdargs.bind import bind_options
from cmdargs.classify import Classification, SubCommandSplit, classify, split_at_sub_command
from cmdargs.config import ANY_OPTION, OptionConfig, option
from cmdargs.core import Cmd
from cmdargs.declaration import Declaration, format_declaration, parse_declaration
from cmdargs.exceptions import (
    ArrayWithoutArgError,
    CmdargsError,
    DefaultsWithoutArgError,
    DuplicateNameError,
    DuplicateStoreKeyError,
    InvalidConfigError,
    InvalidOptionError,
    MalformedSpecError,
    MultipleDefaultsWithoutArrayError,
    OptionArgIsInvalidError,
    OptionContainsInvalidCharError,
    OptionIsNotArrayError,
    OptionNeedsArgError,
    OptionTakesNoArgError,
    UnconfiguredOptionError,
)
from cmdargs.panel import ErrorPanel, print_error
from cmdargs.protocols import OptionStore
from cmdargs.registry import Registry
from cmdargs.result import OptionState, OptionValue, ParsedArgs
from cmdargs.token import Token
from cmdargs.utils import UNSET
