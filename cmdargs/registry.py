from collections.abc import Iterable, Iterator, Mapping

from attrs import field

from cmdargs.config import OptionConfig
from cmdargs.exceptions import (
    ArrayWithoutArgError,
    DefaultsWithoutArgError,
    DuplicateNameError,
    DuplicateStoreKeyError,
    MultipleDefaultsWithoutArrayError,
    OptionContainsInvalidCharError,
)
from cmdargs.utils import frozen, is_valid_option_name

__all__ = ["Registry"]


def _check_config(config: OptionConfig):
    if not config.has_arg:
        if config.is_array:
            raise ArrayWithoutArgError(store_key=config.key)
        if config.defaults:
            raise DefaultsWithoutArgError(store_key=config.key)
    if not config.is_array and config.defaults and len(config.defaults) > 1:  # pyright: ignore[reportArgumentType]
        raise MultipleDefaultsWithoutArrayError(store_key=config.key)


@frozen
class Registry:
    """Immutable index of option configurations by every option name.

    Built fresh for every configured parse call with :meth:`build`.
    """

    configs: tuple[OptionConfig, ...]
    _by_name: Mapping[str, OptionConfig] = field(hash=False, alias="by_name")
    accepts_any: bool = False
    """A wildcard (``"*"``) configuration was supplied; unconfigured options are let through."""

    @classmethod
    def build(cls, configs: Iterable[OptionConfig]) -> "Registry":
        """Index ``configs``.

        A configuration without names is matched by its store key.

        Raises
        ------
        InvalidConfigError
            Duplicated option name or store key, or an inconsistent configuration.
        OptionContainsInvalidCharError
            A configured name isn't a valid option name.
        """
        configs = tuple(configs)
        by_name: dict[str, OptionConfig] = {}
        store_keys: set[str] = set()
        accepts_any = False

        for config in configs:
            store_key = config.key
            if not store_key:
                continue
            if config.is_any_option:
                accepts_any = True
                continue

            if store_key in store_keys:
                raise DuplicateStoreKeyError(store_key=store_key)
            store_keys.add(store_key)

            _check_config(config)

            for name in config.names or (store_key,):  # pyright: ignore[reportGeneralTypeIssues]
                if not is_valid_option_name(name):
                    raise OptionContainsInvalidCharError(option=name, store_key=store_key)
                if name in by_name:
                    raise DuplicateNameError(name=name, store_key=store_key)
                by_name[name] = config

        return cls(configs, by_name, accepts_any)

    def find(self, name: str) -> OptionConfig | None:
        return self._by_name.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[OptionConfig]:
        return iter(self.configs)

    def __len__(self) -> int:
        return len(self.configs)
