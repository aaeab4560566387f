import pytest
from rich.console import Console

from cmdargs import Cmd, option


@pytest.fixture
def console():
    return Console(width=70, force_terminal=True, highlight=False, color_system=None, legacy_windows=False)


@pytest.fixture
def cfgs():
    """A small, typical set of option configurations."""
    return [
        option("foo-bar"),
        option("baz,z", has_arg=True),
        option("x"),
        option("y"),
        option("I,include", is_array=True),
    ]


@pytest.fixture
def parse_with():
    def inner(cmd: str | list[str], cfgs):
        cmd_ = Cmd(cmd, "app")
        cmd_.parse_with(cfgs)
        return cmd_

    return inner
