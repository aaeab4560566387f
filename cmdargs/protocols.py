from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cmdargs.config import OptionConfig
    from cmdargs.result import ParsedArgs


@runtime_checkable
class OptionStore(Protocol):
    """Object that declares its own option configurations and receives the parsed values.

    Used by :meth:`Cmd.parse_for <cmdargs.Cmd.parse_for>`.
    """

    def make_option_configs(self) -> "list[OptionConfig]": ...

    def set_field_values(self, result: "ParsedArgs", /) -> None: ...
