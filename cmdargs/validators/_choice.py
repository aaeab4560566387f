from collections.abc import Iterable

from attrs import field

from cmdargs.utils import frozen, to_tuple_converter


@frozen
class Choice:
    """Only accept one of ``choices``.

    With ``case_sensitive=False`` the matching choice, as declared, is returned.
    """

    # This can ONLY ever be a Tuple[str, ...]
    choices: str | Iterable[str] = field(converter=to_tuple_converter)

    case_sensitive: bool = field(default=True, kw_only=True)

    def __call__(self, value: str) -> str:
        for choice in self.choices:  # pyright: ignore[reportGeneralTypeIssues]
            if value == choice or (not self.case_sensitive and value.casefold() == choice.casefold()):
                return choice
        raise ValueError(f"Must be one of {{{', '.join(repr(x) for x in self.choices)}}}.")  # pyright: ignore
