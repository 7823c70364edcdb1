import pytest

from pushswap.complexity.options import (
    ProgramOptions,
    UsageError,
    assert_executable,
    get_options,
    get_parameters,
    parse_number,
)


@pytest.fixture
def executable(tmp_path):
    path = tmp_path / "prog"
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return str(path)


def test_parse_number_plain():
    assert parse_number("42", 0) == 42


def test_parse_number_sign_and_leading_space():
    assert parse_number("+5", 0) == 5
    assert parse_number(" 7", 0) == 7


def test_parse_number_trailing_garbage():
    with pytest.raises(UsageError, match="12abc is not a valid number"):
        parse_number("12abc", 0)


def test_parse_number_empty():
    with pytest.raises(UsageError, match="is not a valid number"):
        parse_number("", 0)


def test_parse_number_below_minimum():
    with pytest.raises(UsageError, match="must be at least equal to 0"):
        parse_number("-1", 0)
    with pytest.raises(UsageError, match="must be at least equal to 1"):
        parse_number("0", 1)


def test_assert_executable_accepts(executable):
    assert assert_executable(executable) == executable


def test_assert_executable_rejects_plain_file(tmp_path):
    path = tmp_path / "data"
    path.write_text("x")
    path.chmod(0o644)
    with pytest.raises(UsageError, match="is not a valid file"):
        assert_executable(str(path))


def test_assert_executable_rejects_directory_and_missing(tmp_path):
    with pytest.raises(UsageError):
        assert_executable(str(tmp_path))
    with pytest.raises(UsageError):
        assert_executable(str(tmp_path / "missing"))


def test_get_options_flags():
    opts, rest = get_options(["-v", "-h"])
    assert opts.version and opts.help
    assert rest == []


def test_get_options_defaults():
    opts, rest = get_options(["100", "5"])
    assert opts == ProgramOptions()
    assert rest == ["100", "5"]


def test_get_options_values_and_permutation():
    opts, rest = get_options(["100", "--sorted", "-s", "12", "-f", "prog", "5", "--output=log.txt"])
    assert opts.sorted
    assert opts.seed == 12
    assert opts.program == "prog"
    assert opts.output == "log.txt"
    assert rest == ["100", "5"]


def test_get_options_unknown_option():
    with pytest.raises(UsageError):
        get_options(["-x"])


def test_get_options_bad_seed():
    with pytest.raises(UsageError, match="must be at least equal to 0"):
        get_options(["--seed", "-3"])


def test_get_parameters_two():
    params = get_parameters(["100", "5"])
    assert (params.numbers, params.iterations) == (100, 5)
    assert params.objective is None and params.checker is None


def test_get_parameters_with_goal_and_checker(executable):
    params = get_parameters(["100", "5", "700", executable])
    assert params.objective == 700
    assert params.checker == executable


@pytest.mark.parametrize("args", [[], ["1"], ["1", "2", "3", "4", "5"]])
def test_get_parameters_wrong_count(args):
    with pytest.raises(UsageError):
        get_parameters(args)


def test_get_parameters_zero_iterations():
    with pytest.raises(UsageError, match="must be at least equal to 1"):
        get_parameters(["10", "0"])


def test_get_parameters_bad_checker(tmp_path):
    with pytest.raises(UsageError, match="is not a valid file"):
        get_parameters(["10", "1", "5", str(tmp_path / "nope")])