from cmdargs.config import OptionConfig
from cmdargs.utils import frozen


@frozen(kw_only=True)
class Token:
    """An option recognized on the command line."""

    keyword: str
    """Option name as written, without leading hyphens (e.g. ``"f"`` for ``-f``)."""

    value: str | None = None
    """Option argument; :obj:`None` if the option was given without one."""

    index: int = 0
    """Position in the raw token stream where the option appeared."""

    config: OptionConfig | None = None
    """Matched configuration; :obj:`None` for unconfigured options."""

    @property
    def has_value(self) -> bool:
        return self.value is not None
