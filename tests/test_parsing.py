import pytest

from philosophers.parsing import (
    USAGE,
    ArgumentError,
    Settings,
    parse_arguments,
    philo_atoi,
    validate_argument,
)


@pytest.mark.parametrize("text", ["42", "0", "2147483647", "800", "007"])
def test_atoi_parses_digits(text):
    assert philo_atoi(text) == int(text)


@pytest.mark.parametrize("text", ["abc", "-5", "+5", "12a", " 1", "1.5"])
def test_atoi_rejects_non_digits(text):
    assert philo_atoi(text) == -1


def test_atoi_rejects_overflow():
    assert philo_atoi("2147483648") == -1
    assert philo_atoi("99999999999999999999") == -1


def test_atoi_empty_string_is_zero():
    assert philo_atoi("") == 0


def test_validate_argument_returns_value():
    assert validate_argument("800", "time to die") == 800


def test_validate_argument_zero():
    with pytest.raises(ArgumentError, match="time to die cannot be 0"):
        validate_argument("0", "time to die")


def test_validate_argument_invalid():
    with pytest.raises(ArgumentError, match="invalid time to eat"):
        validate_argument("x1", "time to eat")


def test_parse_four_arguments():
    settings = parse_arguments(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, 0)


def test_parse_five_arguments():
    settings = parse_arguments(["4", "410", "200", "200", "7"])
    assert settings.nb_meals == 7
    assert settings.nb_philo == 4


@pytest.mark.parametrize(
    "args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]]
)
def test_parse_wrong_count(args):
    with pytest.raises(ArgumentError) as info:
        parse_arguments(args)
    assert str(info.value) == USAGE


def test_parse_too_many_philosophers():
    with pytest.raises(ArgumentError, match="<= 200"):
        parse_arguments(["201", "800", "200", "200"])


def test_parse_two_hundred_allowed():
    assert parse_arguments(["200", "800", "200", "200"]).nb_philo == 200


def test_parse_zero_philosophers():
    with pytest.raises(ArgumentError, match="number of philo cannot be 0"):
        parse_arguments(["0", "800", "200", "200"])


def test_parse_invalid_meals():
    with pytest.raises(ArgumentError, match="invalid number of meal"):
        parse_arguments(["5", "800", "200", "200", "-1"])


def test_parse_zero_sleep():
    with pytest.raises(ArgumentError, match="time to sleep cannot be 0"):
        parse_arguments(["5", "800", "200", "0"])