import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Optional

from attrs import define, field

import cmdargs.panel
from cmdargs.bind import bind_options
from cmdargs.classify import classify
from cmdargs.config import OptionConfig
from cmdargs.exceptions import CmdargsError
from cmdargs.protocols import OptionStore
from cmdargs.registry import Registry
from cmdargs.result import ParsedArgs
from cmdargs.utils import normalize_tokens

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["Cmd"]


@define
class Cmd:
    """A command: its name, raw tokens and, once parsed, its arguments and option values.

    Example usage:

    .. code-block:: python

        from cmdargs import Cmd, option

        cmd = Cmd.from_argv(["/usr/bin/app", "--verbose", "build", "--release"])
        sub_cmd = cmd.parse_until_sub_cmd_with([option("verbose,v")])
        assert cmd.has_opt("verbose")

        assert sub_cmd.name == "build"
        sub_cmd.parse_with([option("release")])
        assert sub_cmd.has_opt("release")
    """

    # This can ONLY ever be a Tuple[str, ...] due to converter.
    _tokens: None | str | Iterable[str] = field(default=None, alias="tokens", converter=normalize_tokens)

    name: str = ""

    # Everything below must be kw_only

    end_of_options: str = field(default="--", kw_only=True)
    """All tokens after this delimiter are command arguments. Set to an empty string to disable."""

    print_error: bool = field(default=False, kw_only=True)
    """Print a rich-formatted panel when a parse call raises."""

    exit_on_error: bool = field(default=False, kw_only=True)
    """Invoke ``sys.exit(1)`` when a parse call raises, instead of propagating the exception."""

    error_console: Optional["Console"] = field(default=None, kw_only=True)
    """Console for :attr:`print_error`; defaults to a new stderr console."""

    cfgs: tuple[OptionConfig, ...] = field(factory=tuple, init=False)
    """Option configurations used by the last configured parse; e.g. to render help."""

    result: ParsedArgs = field(factory=ParsedArgs, init=False)

    @classmethod
    def from_argv(cls, argv: Iterable[str] | None = None, **kwargs) -> "Cmd":
        """Create a :class:`Cmd` from a full argument vector, program path first.

        If ``argv`` is :obj:`None`, :data:`sys.argv` is used.
        The basename of the program path becomes the command name.
        """
        argv = list(sys.argv if argv is None else argv)
        if not argv:
            return cls((), **kwargs)
        return cls(argv[1:], PurePath(argv[0]).name, **kwargs)

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens  # pyright: ignore[reportReturnType]

    @property
    def args(self) -> list[str]:
        return list(self.result.args)

    @property
    def opts(self) -> dict[str, Any]:
        return self.result.as_dict()

    def has_opt(self, key: str) -> bool:
        return self.result.has_opt(key)

    def opt_arg(self, key: str) -> Any:
        return self.result.opt_arg(key)

    def opt_args(self, key: str) -> list[Any] | None:
        return self.result.opt_args(key)

    @contextmanager
    def _error_handling(self) -> Iterator[None]:
        try:
            yield
        except CmdargsError as e:
            e.root_input_tokens = self.tokens
            if self.print_error:
                cmdargs.panel.print_error(e, console=self.error_console)
            if self.exit_on_error:
                sys.exit(1)
            raise

    def _parse(self, registry: Registry | None, until_sub_cmd: bool) -> Optional["Cmd"]:
        with self._error_handling():
            classification = classify(
                self.tokens,
                registry,
                stop_at_first_arg=until_sub_cmd,
                end_of_options=self.end_of_options,
            )
            opts = bind_options(classification.options, registry)

        # Only update state once everything succeeded.
        self.result = ParsedArgs(classification.args, opts)
        self.cfgs = registry.configs if registry is not None else ()

        if classification.stop_index is None:
            return None
        remainder = self.tokens[classification.stop_index :]
        return Cmd(
            remainder[1:],
            remainder[0],
            end_of_options=self.end_of_options,
            print_error=self.print_error,
            exit_on_error=self.exit_on_error,
            error_console=self.error_console,
        )

    def _build_registry(self, cfgs: Iterable[OptionConfig]) -> Registry:
        with self._error_handling():
            return Registry.build(cfgs)

    def parse(self) -> None:
        """Parse tokens without option configurations.

        Every option-shaped token is accepted. Options only get a value through ``=``,
        e.g. ``--foo=bar`` or ``-f=bar``.

        Raises
        ------
        OptionContainsInvalidCharError
        """
        self._parse(None, False)

    def parse_with(self, cfgs: Iterable[OptionConfig]) -> None:
        """Parse tokens against option configurations.

        Parameters
        ----------
        cfgs: Iterable[OptionConfig]
            Option configurations; kept in :attr:`cfgs` on success.

        Raises
        ------
        InvalidConfigError
            The configurations are inconsistent.
        InvalidOptionError
            The tokens don't satisfy the configurations.
        """
        self._parse(self._build_registry(cfgs), False)

    def parse_for(self, store: OptionStore) -> None:
        """Parse tokens against the configurations of ``store``, then hand it the result."""
        self.parse_with(store.make_option_configs())
        store.set_field_values(self.result)

    def parse_until_sub_cmd(self) -> Optional["Cmd"]:
        """Like :meth:`parse`, but stop at the first command argument.

        Returns
        -------
        Cmd | None
            A new, unparsed :class:`Cmd` named after the first command argument holding the
            tokens that follow it; :obj:`None` if there is no command argument.
        """
        return self._parse(None, True)

    def parse_until_sub_cmd_with(self, cfgs: Iterable[OptionConfig]) -> Optional["Cmd"]:
        """Like :meth:`parse_with`, but stop at the first command argument. See :meth:`parse_until_sub_cmd`."""
        return self._parse(self._build_registry(cfgs), True)

    def parse_until_sub_cmd_for(self, store: OptionStore) -> Optional["Cmd"]:
        """Like :meth:`parse_for`, but stop at the first command argument. See :meth:`parse_until_sub_cmd`."""
        sub_cmd = self.parse_until_sub_cmd_with(store.make_option_configs())
        store.set_field_values(self.result)
        return sub_cmd
