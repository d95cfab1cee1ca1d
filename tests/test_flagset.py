import warnings
from typing import List

import pytest
from helptext_utils import get_error_output

import flagslice


def test_bool_slice_returns_bound_list() -> None:
    fs = flagslice.FlagSet("test")
    bs = fs.bool_slice("bs", [True], "usage")
    assert bs == [True]
    fs.parse(["--bs", "0,1"])
    assert bs == [False, True]
    assert fs.parsed()


def test_all_slice_kinds() -> None:
    fs = flagslice.FlagSet("test")
    bs = fs.bool_slice("bs", [], "bools")
    ints: List[int] = []
    fs.int_slice_var(ints, "is", [7], "ints")
    floats = fs.float_slice("fs", [1.5], "floats")
    ss: List[str] = []
    fs.string_slice_var(ss, "ss", ["x"], "strings")

    fs.parse(["--bs=T", "--is=1,2", "--fs", "0.25", "--ss", '"a,b",c'])
    assert bs == [True]
    assert ints == [1, 2]
    assert floats == [0.25]
    assert ss == ["a,b", "c"]
    assert fs.get_int_slice("is") == [1, 2]
    assert fs.get_float_slice("fs") == [0.25]
    assert fs.get_string_slice("ss") == ["a,b", "c"]


def test_shorthand() -> None:
    fs = flagslice.FlagSet("test")
    bs = fs.bool_slice("bs", [], "usage", shorthand="b")
    fs.parse(["-b", "1", "-bF", "-b=true"])
    assert bs == [True, False, True]


def test_positional_args() -> None:
    fs = flagslice.FlagSet("test")
    bs = fs.bool_slice("bs", [], "usage")
    fs.parse(["a", "--bs=1", "-", "b", "--", "--bs=0", "c"])
    assert bs == [True]
    assert fs.args() == ["a", "-", "b", "--bs=0", "c"]


def test_value_can_look_like_a_flag() -> None:
    fs = flagslice.FlagSet("test")
    ss = fs.string_slice("ss", [], "usage")
    fs.parse(["--ss", "--other"])
    assert ss == ["--other"]


def test_redefined() -> None:
    fs = flagslice.FlagSet("test")
    fs.bool_slice("bs", [], "usage", shorthand="b")
    with pytest.raises(flagslice.FlagRedefinedError):
        fs.bool_slice("bs", [], "usage")
    with pytest.raises(flagslice.FlagRedefinedError):
        fs.int_slice("other", [], "usage", shorthand="b")


def test_invalid_names() -> None:
    fs = flagslice.FlagSet("test")
    for name in ("", "-bs", "a=b"):
        with pytest.raises(ValueError):
            fs.bool_slice(name, [], "usage")
    with pytest.raises(ValueError):
        fs.bool_slice("bs", [], "usage", shorthand="bs")


def test_lookup_errors() -> None:
    fs = flagslice.FlagSet("test")
    fs.int_slice("is", [], "usage")

    with pytest.raises(flagslice.FlagNotFoundError):
        fs.get_bool_slice("missing")
    with pytest.raises(flagslice.FlagTypeError) as exc_info:
        fs.get_bool_slice("is")
    assert exc_info.value.expected == "boolSlice"
    assert exc_info.value.actual == "intSlice"

    # Both are LookupErrors.
    with pytest.raises(LookupError):
        fs.get_bool_slice("is")
    assert fs.lookup("missing") is None
    assert not fs.changed("missing")


def test_custom_value_type() -> None:
    class Counter:
        def __init__(self) -> None:
            self.count = 0

        def set(self, raw: str) -> None:
            self.count += 1

        def __str__(self) -> str:
            return str(self.count)

        def type(self) -> str:
            return "counter"

    fs = flagslice.FlagSet("test")
    counter = Counter()
    fs.var(counter, "v", "verbosity")
    fs.parse(["--v=x", "--v", "y"])
    assert counter.count == 2
    with pytest.raises(flagslice.FlagTypeError):
        fs.get_bool_slice("v")


def test_visit_order_and_changed() -> None:
    fs = flagslice.FlagSet("test")
    fs.bool_slice("c", [], "usage")
    fs.bool_slice("a", [], "usage")
    fs.bool_slice("b", [], "usage")
    fs.parse(["--c=1", "--a=0"])

    visited_all: List[str] = []
    fs.visit_all(lambda flag: visited_all.append(flag.name))
    assert visited_all == ["a", "b", "c"]

    visited: List[str] = []
    fs.visit(lambda flag: visited.append(flag.name))
    assert visited == ["a", "c"]


def test_set() -> None:
    fs = flagslice.FlagSet("test")
    bs = fs.bool_slice("bs", [True], "usage")
    fs.set("bs", "0")
    fs.set("bs", "1")
    assert bs == [False, True]
    assert fs.changed("bs")
    with pytest.raises(flagslice.FlagNotFoundError):
        fs.set("missing", "0")


def test_continue_on_error() -> None:
    fs = flagslice.FlagSet("test", flagslice.ErrorHandling.CONTINUE_ON_ERROR)
    fs.bool_slice("bs", [], "usage")

    with pytest.raises(flagslice.UnknownFlagError) as exc_info:
        fs.parse(["--bss=1"])
    assert exc_info.value.suggestions == ("--bs",)
    assert "did you mean --bs" in str(exc_info.value)

    with pytest.raises(flagslice.MissingFlagValueError):
        fs.parse(["--bs"])
    with pytest.raises(flagslice.UnknownFlagError):
        fs.parse(["-x", "1"])
    with pytest.raises(flagslice.ParseError):
        fs.parse(['--bs="1,0'])


def test_panic_on_error() -> None:
    fs = flagslice.FlagSet("test", flagslice.ErrorHandling.PANIC_ON_ERROR)
    fs.bool_slice("bs", [], "usage")
    with pytest.raises(RuntimeError) as exc_info:
        fs.parse(["--bs=maybe"])
    assert isinstance(exc_info.value.__cause__, flagslice.TokenDecodeError)


def test_exit_on_error() -> None:
    fs = flagslice.FlagSet("test")
    bs = fs.bool_slice("bs", [False, True], "Comma-separated list!")
    fs.parse(["--bs=1"])

    output = get_error_output(fs, ["--bs=maybe"])
    assert "Parsing error" in output
    assert "maybe" in output
    assert "--bs" in output
    assert bs == [True]

    output = get_error_output(fs, ["--nope"])
    assert "Unrecognized options" in output


def test_exit_on_error_without_console_outputs(options) -> None:
    options["console_outputs"] = False
    fs = flagslice.FlagSet("test")
    fs.bool_slice("bs", [], "usage")
    assert get_error_output(fs, ["--bs=maybe"]) == ""


def test_default_error_handling_from_options(options) -> None:
    options["error_handling"] = "panic"
    assert (
        flagslice.FlagSet("test").error_handling
        is flagslice.ErrorHandling.PANIC_ON_ERROR
    )
    assert (
        flagslice.FlagSet("test", flagslice.ErrorHandling.EXIT_ON_ERROR).error_handling
        is flagslice.ErrorHandling.EXIT_ON_ERROR
    )


def test_deprecated() -> None:
    fs = flagslice.FlagSet("test")
    bs = fs.bool_slice("bs", [], "usage")
    fs.bool_slice("new", [], "usage")
    fs.mark_deprecated("bs", "use --new instead")

    with pytest.warns(flagslice.FlagSliceDeprecationWarning, match="use --new"):
        fs.parse(["--bs=1"])
    assert bs == [True]
    assert "--bs" not in fs.flag_usages()
    assert "--new" in fs.flag_usages()

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        fs.parse(["--new=1"])

    with pytest.raises(ValueError):
        fs.mark_deprecated("new", "")
    with pytest.raises(flagslice.FlagNotFoundError):
        fs.mark_deprecated("missing", "gone")


def test_flag_usages() -> None:
    fs = flagslice.FlagSet("test")
    fs.bool_slice("bs", [False, True], "Comma-separated list!", shorthand="b")
    fs.int_slice("ints", [], "Some ints.")
    assert fs.flag_usages() == (
        "  -b, --bs boolSlice    Comma-separated list! (default [false,true])\n"
        "      --ints intSlice   Some ints."
    )


class _Level:
    def __init__(self) -> None:
        self.level = 0

    def set(self, raw: str) -> None:
        self.level = int(raw)

    def __str__(self) -> str:
        return str(self.level)

    def type(self) -> str:
        return "level"


def test_custom_value_error_gets_flag_name() -> None:
    fs = flagslice.FlagSet("test", flagslice.ErrorHandling.CONTINUE_ON_ERROR)
    level = _Level()
    fs.var(level, "lvl", "verbosity level")

    with pytest.raises(flagslice.InvalidValueError) as exc_info:
        fs.parse(["--lvl=abc"])
    assert exc_info.value.token == "abc"
    assert exc_info.value.flag_name == "lvl"
    assert "--lvl" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert not fs.changed("lvl")

    with pytest.raises(flagslice.InvalidValueError):
        fs.set("lvl", "abc")


def test_custom_value_error_exits() -> None:
    fs = flagslice.FlagSet("test")
    fs.var(_Level(), "lvl", "verbosity level")

    output = get_error_output(fs, ["--lvl=abc"])
    assert "Parsing error" in output
    assert "abc" in output


def test_custom_value_error_panics() -> None:
    fs = flagslice.FlagSet("test", flagslice.ErrorHandling.PANIC_ON_ERROR)
    fs.var(_Level(), "lvl", "verbosity level")
    with pytest.raises(RuntimeError) as exc_info:
        fs.parse(["--lvl", "abc"])
    assert isinstance(exc_info.value.__cause__, flagslice.InvalidValueError)


def test_deprecation_warning_points_at_caller() -> None:
    fs = flagslice.FlagSet("test")
    fs.bool_slice("bs", [], "usage", shorthand="b")
    fs.mark_deprecated("bs", "use --new instead")

    for args in (["--bs=1"], ["--bs", "1"], ["-b", "1"]):
        with pytest.warns(flagslice.FlagSliceDeprecationWarning) as record:
            fs.parse(args)
        assert record[0].filename == __file__

    with pytest.warns(flagslice.FlagSliceDeprecationWarning) as record:
        fs.set("bs", "0")
    assert record[0].filename == __file__
