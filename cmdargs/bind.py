from collections.abc import Iterable
from typing import Any

from cmdargs.config import OptionConfig
from cmdargs.exceptions import (
    OptionArgIsInvalidError,
    OptionIsNotArrayError,
    OptionNeedsArgError,
    OptionTakesNoArgError,
    UnconfiguredOptionError,
)
from cmdargs.registry import Registry
from cmdargs.result import OptionState, OptionValue
from cmdargs.token import Token

__all__ = ["bind_options"]


def _convert(config: OptionConfig, option: str, value: str) -> Any:
    try:
        return config.convert(value)
    except OptionArgIsInvalidError as e:
        raise OptionArgIsInvalidError(
            option=e.option or option,
            store_key=e.store_key or config.key,
            opt_arg=e.opt_arg or value,
            details=e.details,
            msg=e.msg,
        ) from e
    except (AssertionError, ValueError, TypeError) as e:
        raise OptionArgIsInvalidError(
            option=option,
            store_key=config.key,
            opt_arg=value,
            details=str(e),
        ) from e


def _bind_unconfigured(token: Token, values: dict[str, list[Any]]):
    bucket = values.setdefault(token.keyword, [])
    if token.has_value:
        bucket.append(token.value)


def _bind_configured(token: Token, config: OptionConfig, values: dict[str, list[Any]]):
    store_key = config.key

    if not token.has_value:
        if config.has_arg:
            raise OptionNeedsArgError(option=token.keyword, store_key=store_key)
        # Repeating a flag is harmless.
        values.setdefault(store_key, [])
        return

    if not config.has_arg:
        raise OptionTakesNoArgError(option=token.keyword, store_key=store_key)

    if values.get(store_key) and not config.is_array:
        raise OptionIsNotArrayError(option=token.keyword, store_key=store_key)

    # Convert before storing; a rejected value leaves ``values`` untouched.
    converted = _convert(config, token.keyword, token.value)
    values.setdefault(store_key, []).append(converted)


def bind_options(options: Iterable[Token], registry: Registry | None = None) -> dict[str, OptionValue]:
    """Accumulate recognized options into values by store key.

    Parameters
    ----------
    options: Iterable[Token]
        Options in command-line order, as produced by :func:`~cmdargs.classify.classify`.
    registry: Registry | None
        Option configurations. If :obj:`None`, options are stored verbatim under their names
        and no defaults are seeded.

    Raises
    ------
    UnconfiguredOptionError
    OptionNeedsArgError
    OptionTakesNoArgError
    OptionIsNotArrayError
    OptionArgIsInvalidError
        A validator rejected an option argument or a default value.

    Returns
    -------
    dict[str, OptionValue]
        Keys appear in the order options were first supplied, followed by defaulted keys
        in configuration order.
    """
    values: dict[str, list[Any]] = {}
    array_keys: set[str] = set()

    for token in options:
        config = token.config
        if config is None and registry is not None:
            config = registry.find(token.keyword)
            if config is None and not registry.accepts_any:
                raise UnconfiguredOptionError(option=token.keyword)

        if config is None:
            _bind_unconfigured(token, values)
        else:
            _bind_configured(token, config, values)
            if config.is_array:
                array_keys.add(config.key)

    result = {}
    for key, bucket in values.items():
        result[key] = OptionValue(
            OptionState.SUPPLIED if bucket else OptionState.FLAG,
            bucket,
            is_array=key in array_keys or len(bucket) > 1,
        )

    if registry is None:
        return result

    for config in registry:
        key = config.key
        if not key or config.is_any_option or key in result or config.defaults is None:
            continue
        defaults = [_convert(config, key, x) for x in config.defaults]  # pyright: ignore[reportGeneralTypeIssues]
        result[key] = OptionValue(OptionState.DEFAULT, defaults, is_array=config.is_array)

    return result
