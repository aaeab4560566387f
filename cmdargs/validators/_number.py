from typing import Any

from attrs import field

from cmdargs.utils import frozen


def _check_type(instance, attribute, value):
    if value not in (int, float):
        raise TypeError(f"{attribute.alias} must be int or float, not {value!r}.")


@frozen(kw_only=True)
class Number:
    """Convert an option argument to a number, optionally limited to a value range.

    Example Usage:

    .. code-block:: python

        from cmdargs import Cmd, option
        from cmdargs.validators import Number

        cmd = Cmd(["--age", "200"])
        cmd.parse_with([option("age", has_arg=True, validator=Number(gte=0, lte=150))])

    .. code-block:: text

        OptionArgIsInvalidError: Invalid value "200" for "age". Must be <= 150.
    """

    _type: type = field(default=int, alias="type", validator=_check_type)
    """Target type; ``int`` or ``float``."""

    lt: int | float | None = None
    """Input value must be **less than** this value."""

    lte: int | float | None = None
    """Input value must be **less than or equal** this value."""

    gt: int | float | None = None
    """Input value must be **greater than** this value."""

    gte: int | float | None = None
    """Input value must be **greater than or equal** this value."""

    def __call__(self, value: str) -> Any:
        if not isinstance(value, str):
            raise TypeError
        try:
            number = self._type(value)
        except ValueError:
            raise ValueError(f"Must be a valid {self._type.__name__}.") from None

        if self.lt is not None and number >= self.lt:
            raise ValueError(f"Must be < {self.lt}.")

        if self.lte is not None and number > self.lte:
            raise ValueError(f"Must be <= {self.lte}.")

        if self.gt is not None and number <= self.gt:
            raise ValueError(f"Must be > {self.gt}.")

        if self.gte is not None and number < self.gte:
            raise ValueError(f"Must be >= {self.gte}.")

        return number
