import pytest

from cmdargs import (
    Cmd,
    CmdargsError,
    DuplicateStoreKeyError,
    ErrorPanel,
    MalformedSpecError,
    OptionArgIsInvalidError,
    OptionContainsInvalidCharError,
    OptionIsNotArrayError,
    OptionNeedsArgError,
    OptionTakesNoArgError,
    UnconfiguredOptionError,
    option,
    print_error,
)

TOP = "╭─ Error ────────────────────────────────────────────────────────────╮"
BOTTOM = "╰────────────────────────────────────────────────────────────────────╯"


def panel(message: str) -> str:
    return f"{TOP}\n│ {message:<66} │\n{BOTTOM}\n"


@pytest.mark.parametrize(
    "error, expected",
    [
        (OptionContainsInvalidCharError(option="f!"), 'Option "f!" contains an invalid character.'),
        (UnconfiguredOptionError(option="nope"), 'Unknown option: "nope".'),
        (OptionNeedsArgError(option="n", store_key="num"), 'Option "n" requires an argument.'),
        (OptionTakesNoArgError(option="v"), 'Option "v" does not take an argument.'),
        (OptionIsNotArrayError(option="n"), 'Option "n" specified multiple times.'),
        (OptionArgIsInvalidError(option="n", opt_arg="x"), 'Invalid value "x" for "n".'),
        (DuplicateStoreKeyError(store_key="k"), 'Store key "k" is used by more than one option configuration.'),
        (
            MalformedSpecError(declaration="q=[1", reason='Missing closing "]".'),
            'Malformed option declaration "q=[1". Missing closing "]".',
        ),
        (UnconfiguredOptionError(msg="Custom message.", option="nope"), "Custom message."),
    ],
)
def test_exception_messages(error, expected):
    assert isinstance(error, CmdargsError)
    assert str(error) == expected


def test_error_panel(console):
    with console.capture() as capture:
        console.print(ErrorPanel(UnconfiguredOptionError(option="nope")))
    assert capture.get() == panel('Unknown option: "nope".')


def test_print_error_uses_error_console(console):
    error = OptionNeedsArgError(option="baz", console=console)
    with console.capture() as capture:
        print_error(error)
    assert capture.get() == panel('Option "baz" requires an argument.')


def test_cmd_print_error(console):
    cmd = Cmd(["--nope"], print_error=True, error_console=console)
    with console.capture() as capture, pytest.raises(UnconfiguredOptionError):
        cmd.parse_with([option("v,verbose")])
    assert capture.get() == panel('Unknown option: "nope".')


def test_cmd_print_error_config_error(console):
    cmd = Cmd([], print_error=True, error_console=console)
    with console.capture() as capture, pytest.raises(DuplicateStoreKeyError):
        cmd.parse_with([option("a", store_key="k"), option("b", store_key="k")])
    assert capture.get() == panel('Store key "k" is used by more than one option configuration.')


def test_cmd_exit_on_error(console):
    cmd = Cmd(["--nope"], print_error=True, exit_on_error=True, error_console=console)
    with console.capture() as capture, pytest.raises(SystemExit) as e:
        cmd.parse_with([])
    assert e.value.code == 1
    assert capture.get() == panel('Unknown option: "nope".')


def test_cmd_no_print_by_default(console, capsys):
    with pytest.raises(UnconfiguredOptionError) as e:
        Cmd(["-x"]).parse_with([])
    assert e.value.root_input_tokens == ("-x",)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
