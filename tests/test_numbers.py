import pytest

from pipexpy.numbers import atoi, atol, itoa

SAMPLES = [0, 1, -1, 42, -42, 2147483647, -2147483648, 1000000, -999]


@pytest.mark.parametrize("n", SAMPLES)
def test_atoi_round_trips_itoa(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_itoa_is_decimal(n):
    assert itoa(n) == str(n)
    assert int(itoa(n)) == n


@pytest.mark.parametrize("prefix", [" ", "\t", "\n", "\v", "\f", "\r", "\b", "  \t "])
def test_atoi_skips_leading_space(prefix):
    assert atoi(prefix + "123") == atoi("123") == int("123")


def test_atoi_signs():
    assert atoi("+77") == int("77")
    assert atoi("-77") == -int("77")
    assert atoi("--77") == atoi("")
    assert atoi("+-77") == atoi("")


def test_atoi_stops_at_non_digit():
    assert atoi("42abc") == atoi("42")
    assert atoi("12 34") == atoi("12")


def test_atoi_empty_and_garbage_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == atoi("")


def test_atoi_truncates_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == atoi("0")


def test_atoi_long_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == atoi("0")


@pytest.mark.parametrize("n", [0, 5, -5, 9223372036854775807, -9223372036854775807, 123456789012])
def test_atol_round_trip(n):
    assert atol(str(n)) == n


def test_atol_stops_before_overflow():
    assert atol("92233720368547758079") == 9223372036854775807
    assert atol("-92233720368547758079") == -9223372036854775807


def test_atol_whitespace_and_trailing():
    assert atol(" \t\n\r\f\v-314xyz") == atol("-314") == -int("314")


def test_atol_does_not_skip_backspace():
    assert atol("\b7") == atol("")
    assert atoi("\b7") == int("7")