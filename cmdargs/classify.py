from collections.abc import Sequence

from attrs import field

from cmdargs.config import OptionConfig
from cmdargs.exceptions import OptionContainsInvalidCharError, OptionNeedsArgError, UnconfiguredOptionError
from cmdargs.registry import Registry
from cmdargs.token import Token
from cmdargs.utils import frozen, is_allowed_first_character, is_option_like, is_valid_option_name, to_tuple_converter

__all__ = [
    "Classification",
    "SubCommandSplit",
    "classify",
    "split_at_sub_command",
]


@frozen(kw_only=True)
class Classification:
    args: tuple[str, ...] = field(default=(), converter=to_tuple_converter)
    """Command arguments, in order, excluding consumed option values."""

    options: tuple[Token, ...] = field(default=(), converter=to_tuple_converter)
    """Recognized options, in order."""

    stop_index: int | None = None
    """Index of the first command argument if classification stopped there."""


@frozen(kw_only=True)
class SubCommandSplit:
    prefix: tuple[str, ...]
    """Tokens before the sub-command."""

    options: tuple[Token, ...]
    """Options recognized in ``prefix``."""

    remainder: tuple[str, ...]
    """The sub-command name followed by its own raw tokens."""

    @property
    def name(self) -> str:
        return self.remainder[0]


def _resolve(registry: Registry | None, name: str) -> OptionConfig | None:
    if registry is None:
        return None
    config = registry.find(name)
    if config is None and not registry.accepts_any:
        raise UnconfiguredOptionError(option=name)
    return config


class _Classifier:
    """Single left-to-right pass over a token stream; no backtracking."""

    def __init__(self, tokens: Sequence[str], registry: Registry | None, end_of_options: str):
        self.tokens = tokens
        self.registry = registry
        self.end_of_options = end_of_options
        self.args: list[str] = []
        self.options: list[Token] = []
        self.index = 0

    def _is_value(self, token: str) -> bool:
        if self.end_of_options and token == self.end_of_options:
            return False
        return not is_option_like(token)

    def _take_next_value(self, name: str, config: OptionConfig) -> str:
        """Consume the following token as the argument of option ``name``."""
        next_index = self.index + 1
        if next_index >= len(self.tokens) or not self._is_value(self.tokens[next_index]):
            raise OptionNeedsArgError(option=name, store_key=config.key)
        self.index = next_index
        return self.tokens[next_index]

    def _add_option(self, name: str, config: OptionConfig | None, value: str | None, position: int):
        self.options.append(Token(keyword=name, value=value, index=position, config=config))

    def _long(self, body: str):
        position = self.index
        name, eq, value = body.partition("=")
        if not is_valid_option_name(name):
            raise OptionContainsInvalidCharError(option=name)
        config = _resolve(self.registry, name)
        if eq:
            self._add_option(name, config, value, position)
        elif config is not None and config.has_arg:
            self._add_option(name, config, self._take_next_value(name, config), position)
        else:
            self._add_option(name, config, None, position)

    def _short(self, body: str):
        """Handle a run of bundled short options like ``-xyz=3``."""
        position = self.index
        names, eq, value = body.partition("=")
        if not names:
            raise OptionContainsInvalidCharError(option=body)

        for name in names[:-1]:
            if not is_allowed_first_character(name):
                raise OptionContainsInvalidCharError(option=name)
            config = _resolve(self.registry, name)
            if config is not None and config.has_arg:
                # Only the last option of a bundle may take an argument.
                raise OptionNeedsArgError(option=name, store_key=config.key)
            self._add_option(name, config, None, position)

        name = names[-1]
        if not is_allowed_first_character(name):
            raise OptionContainsInvalidCharError(option=name)
        config = _resolve(self.registry, name)
        if eq:
            self._add_option(name, config, value, position)
        elif config is not None and config.has_arg:
            self._add_option(name, config, self._take_next_value(name, config), position)
        else:
            self._add_option(name, config, None, position)

    def run(self, stop_at_first_arg: bool) -> Classification:
        literal = False
        while self.index < len(self.tokens):
            token = self.tokens[self.index]
            if literal:
                self.args.append(token)
            elif self.end_of_options and token == self.end_of_options:
                literal = True
            elif not is_option_like(token) or token == "--":
                # A lone "--" that isn't the end-of-options delimiter names no option.
                if stop_at_first_arg:
                    return Classification(args=self.args, options=self.options, stop_index=self.index)
                self.args.append(token)
            elif token.startswith("--"):
                self._long(token[2:])
            else:
                self._short(token[1:])
            self.index += 1
        return Classification(args=self.args, options=self.options)


def classify(
    tokens: Sequence[str],
    registry: Registry | None = None,
    *,
    stop_at_first_arg: bool = False,
    end_of_options: str = "--",
) -> Classification:
    """Split ``tokens`` into command arguments and recognized options.

    Parameters
    ----------
    tokens: Sequence[str]
        Raw CLI tokens, without the program name.
    registry: Registry | None
        If :obj:`None`, every option-shaped token is accepted verbatim, and only an inline
        ``=value`` gives an option a value.
        Otherwise, every option name must be configured, and options configured with
        ``has_arg`` consume the following token if they have no inline value.
    stop_at_first_arg: bool
        Stop at the first command argument outside of literal mode (see ``stop_index``).
    end_of_options: str
        Token after which every token is a command argument. Empty string disables.

    Raises
    ------
    OptionContainsInvalidCharError
    UnconfiguredOptionError
    OptionNeedsArgError
        A value-taking option has no value, or is not the last of a short-option bundle.
    """
    return _Classifier(tokens, registry, end_of_options).run(stop_at_first_arg)


def split_at_sub_command(
    tokens: Sequence[str],
    registry: Registry | None = None,
    *,
    end_of_options: str = "--",
) -> SubCommandSplit | None:
    """Split ``tokens`` at the first command argument, the sub-command name.

    Returns :obj:`None` if there is no command argument before the end-of-options delimiter.
    """
    tokens = tuple(tokens)
    classification = classify(tokens, registry, stop_at_first_arg=True, end_of_options=end_of_options)
    if classification.stop_index is None:
        return None
    return SubCommandSplit(
        prefix=tokens[: classification.stop_index],
        options=classification.options,
        remainder=tokens[classification.stop_index :],
    )
