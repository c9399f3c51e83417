import pytest

from philosophers.arguments import ArgumentError, Settings, is_valid_number, parse_arguments


@pytest.mark.parametrize(
    "text",
    ["42", "+42", "  7", "\t7", "2147483647", "-0", "+0000000001", "0"],
)
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "abc", "12a", "7 ", "-1", "2147483648", "99999999999", "00000000001", "1.5"],
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_parse_four_arguments_has_no_meal_limit():
    settings = parse_arguments(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, -1)


def test_parse_five_arguments_sets_meal_limit():
    settings = parse_arguments(["4", " 410", "+200", "200", "7"])
    assert settings == Settings(4, 410, 200, 200, 7)


@pytest.mark.parametrize(
    "args",
    [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]],
)
def test_wrong_argument_count(args):
    with pytest.raises(ArgumentError) as info:
        parse_arguments(args)
    assert str(info.value) == "Wrong number of arguments."


def test_invalid_argument_value():
    with pytest.raises(ArgumentError) as info:
        parse_arguments(["5", "800", "abc", "200"])
    assert str(info.value) == "Invalid arguments."


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["-3", "800", "200", "200"])