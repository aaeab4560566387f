import pytest

from cmdargs import (
    ANY_OPTION,
    Cmd,
    DuplicateNameError,
    OptionArgIsInvalidError,
    OptionConfig,
    OptionIsNotArrayError,
    OptionNeedsArgError,
    OptionState,
    OptionTakesNoArgError,
    UnconfiguredOptionError,
    option,
)
from cmdargs.validators import Number


def test_parse_with_zero_cfg(parse_with):
    cmd = parse_with(["foo-bar"], [])
    assert cmd.args == ["foo-bar"]
    assert cmd.opts == {}


@pytest.mark.parametrize("tokens, option_name", [(["--foo-bar"], "foo-bar"), (["-f"], "f")])
def test_parse_with_zero_cfg_rejects_options(tokens, option_name):
    cmd = Cmd(tokens)
    with pytest.raises(UnconfiguredOptionError) as e:
        cmd.parse_with([])
    assert e.value.option == option_name
    assert cmd.has_opt(option_name) is False


def test_parse_with_scenario_scalar(cfgs):
    # "z" is a scalar: "--baz 1" followed by "-z=2" is a repeat.
    cmd = Cmd(["--foo-bar", "hoge", "--baz", "1", "-z=2", "-xyz=3", "fuga"])
    with pytest.raises(OptionIsNotArrayError) as e:
        cmd.parse_with(cfgs)
    assert e.value.option == "z"
    assert e.value.store_key == "baz"


def test_parse_with_scenario_array(parse_with):
    cfgs = [option("foo-bar"), option("baz,z", is_array=True), option("x"), option("y")]
    cmd = parse_with(["--foo-bar", "hoge", "--baz", "1", "-z=2", "-xyz=3", "fuga"], cfgs)
    assert cmd.args == ["hoge", "fuga"]
    assert cmd.opt_args("baz") == ["1", "2", "3"]
    assert cmd.opt_arg("baz") == "1"
    assert cmd.has_opt("foo-bar")
    assert cmd.has_opt("x")
    assert cmd.has_opt("y")
    assert cmd.has_opt("z") is False


def test_parse_with_round_trip(parse_with, cfgs):
    tokens = ["--foo-bar", "-z", "value", "-x", "--include=a", "arg"]
    first = parse_with(tokens, cfgs)
    assert first.opts == {"foo-bar": True, "baz": "value", "x": True, "I": ["a"]}
    second = parse_with(tokens, cfgs)
    assert first.result == second.result


def test_parse_with_store_key(parse_with):
    cfgs = [OptionConfig(store_key="fooBar", names=["f", "foo-bar"], has_arg=True)]
    cmd = parse_with(["-f", "1"], cfgs)
    assert cmd.opt_arg("fooBar") == "1"
    assert cmd.has_opt("f") is False
    assert cmd.has_opt("foo-bar") is False


def test_parse_with_array_order(parse_with, cfgs):
    cmd = parse_with(["-I", "a", "--foo-bar", "--include=b", "arg", "-xI", "c"], cfgs)
    assert cmd.opt_args("I") == ["a", "b", "c"]
    assert cmd.args == ["arg"]


def test_parse_with_repeated_flag(parse_with, cfgs):
    cmd = parse_with(["-x", "-x", "-xx"], cfgs)
    assert cmd.opt_args("x") == []


def test_parse_with_takes_no_arg(cfgs):
    with pytest.raises(OptionTakesNoArgError) as e:
        Cmd(["--foo-bar=1"]).parse_with(cfgs)
    assert e.value.option == "foo-bar"
    assert e.value.store_key == "foo-bar"


def test_parse_with_takes_no_arg_short(cfgs):
    with pytest.raises(OptionTakesNoArgError) as e:
        Cmd(["-yx=1"]).parse_with(cfgs)
    assert e.value.option == "x"


def test_parse_with_needs_arg(cfgs):
    with pytest.raises(OptionNeedsArgError) as e:
        Cmd(["arg", "--baz"]).parse_with(cfgs)
    assert e.value.option == "baz"
    assert str(e.value) == 'Option "baz" requires an argument.'


def test_parse_with_is_not_array(cfgs):
    with pytest.raises(OptionIsNotArrayError):
        Cmd(["--baz=1", "--baz", "2"]).parse_with(cfgs)


def test_parse_with_defaults(parse_with):
    cfgs = [
        option("f,foo=123"),
        option("q=[1,2,3]", is_array=True),
        option("e,empty=[]", is_array=True),
        option("s,str="),
        option("n,none", has_arg=True),
    ]
    cmd = parse_with([], cfgs)
    assert cmd.opt_arg("f") == "123"
    assert cmd.opt_args("q") == ["1", "2", "3"]
    assert cmd.opt_args("e") == []
    assert cmd.opt_args("s") == [""]
    assert cmd.has_opt("n") is False
    assert cmd.opts == {"f": "123", "q": ["1", "2", "3"], "e": [], "s": ""}
    assert all(cmd.result.is_default(x) for x in "fqes")


def test_parse_with_supplied_values_replace_defaults(parse_with):
    cfgs = [option("q=[1,2,3]", is_array=True), option("s,str=")]
    cmd = parse_with(["-q", "4", "--str="], cfgs)
    assert cmd.opt_args("q") == ["4"]
    # An explicit empty string is not the default empty string.
    assert cmd.opt_arg("s") == ""
    assert cmd.result.state("s") is OptionState.SUPPLIED
    assert cmd.result.state("q") is OptionState.SUPPLIED


def test_parse_with_validator_converts(parse_with):
    cfgs = [
        option("n,num=10", validator=Number()),
        option("r,ratio", is_array=True, validator=Number(type=float)),
    ]
    cmd = parse_with(["-r", "0.5", "--ratio=2"], cfgs)
    assert cmd.opt_arg("n") == 10
    assert cmd.opt_args("r") == [0.5, 2.0]


def test_parse_with_validator_rejects():
    cfgs = [option("n,num", has_arg=True, validator=Number(lte=5))]
    with pytest.raises(OptionArgIsInvalidError) as e:
        Cmd(["-n", "6"]).parse_with(cfgs)
    assert e.value.option == "n"
    assert e.value.store_key == "n"
    assert e.value.opt_arg == "6"
    assert e.value.details == "Must be <= 5."
    assert str(e.value) == 'Invalid value "6" for "n". Must be <= 5.'


def test_parse_with_validator_rejects_array_element():
    cfgs = [option("n,num", is_array=True, validator=Number())]
    cmd = Cmd(["-n", "1", "--num", "two"])
    with pytest.raises(OptionArgIsInvalidError) as e:
        cmd.parse_with(cfgs)
    assert e.value.option == "num"
    assert e.value.opt_arg == "two"
    assert cmd.has_opt("n") is False


def test_parse_with_validator_raises_option_arg_is_invalid():
    def validator(value):
        raise OptionArgIsInvalidError(option="", details="Nope.")

    with pytest.raises(OptionArgIsInvalidError) as e:
        Cmd(["--foo", "bar"]).parse_with([option("foo", has_arg=True, validator=validator)])
    assert e.value.option == "foo"
    assert e.value.opt_arg == "bar"
    assert e.value.details == "Nope."


def test_parse_with_invalid_default():
    with pytest.raises(OptionArgIsInvalidError) as e:
        Cmd([]).parse_with([option("n=abc", validator=Number())])
    assert e.value.opt_arg == "abc"
    assert e.value.details == "Must be a valid int."


def test_parse_with_config_error_before_parsing():
    cmd = Cmd(["--nope"])
    with pytest.raises(DuplicateNameError) as e:
        cmd.parse_with([option("f,foo"), option("f,fizz")])
    assert e.value.name == "f"


def test_parse_with_any_option(parse_with):
    cfgs = [option("foo", has_arg=True), OptionConfig(store_key=ANY_OPTION)]
    cmd = parse_with(["--foo", "1", "--bar=2", "-b", "arg"], cfgs)
    assert cmd.opt_arg("foo") == "1"
    assert cmd.opt_arg("bar") == "2"
    assert cmd.has_opt("b")
    assert cmd.args == ["arg"]


def test_parse_with_keeps_cfgs(parse_with, cfgs):
    cmd = parse_with([], cfgs)
    assert cmd.cfgs == tuple(cfgs)


def test_parse_with_end_of_options(parse_with, cfgs):
    cmd = parse_with(["-x", "--", "--baz", "-y"], cfgs)
    assert cmd.args == ["--baz", "-y"]
    assert cmd.has_opt("x")
    assert cmd.has_opt("y") is False


def test_parse_with_custom_end_of_options_is_not_a_value(cfgs):
    cmd = Cmd(["--baz", "++", "x"], "app", end_of_options="++")
    with pytest.raises(OptionNeedsArgError) as e:
        cmd.parse_with(cfgs)
    assert e.value.option == "baz"
    assert cmd.has_opt("baz") is False
