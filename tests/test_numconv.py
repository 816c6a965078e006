import pytest

from pushswap.numconv import (
    BASE_10,
    BASE_16,
    ERROR_COLOR,
    atoi,
    atoi_base,
    atou32_base,
    count_digits,
    has_unique_chars,
    itoa,
    split,
    strtol,
    ucount_digits,
    uitoa,
)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-123abc") == -123


def test_atoi_accepts_plus():
    assert atoi("+42") == 42


def test_atoi_double_sign_reads_nothing():
    assert atoi("--5") == 0


def test_strtol_whole_number():
    assert strtol("2147483647") == (2147483647, "")


def test_strtol_reports_trailing_text():
    assert strtol("12ab") == (12, "ab")


def test_strtol_negative_with_leading_space():
    assert strtol(" -7") == (-7, "")


def test_strtol_trailing_space_is_left_over():
    assert strtol("5 ")[1] == " "


@pytest.mark.parametrize("text", ["-", "+", "abc", ""])
def test_strtol_without_digits_has_no_rest(text):
    assert strtol(text)[1] is None


@pytest.mark.parametrize("base", [BASE_10, BASE_16, "01", "abc"])
@pytest.mark.parametrize("n", [-1000, -1, 0, 7, 255, 123456])
def test_atoi_base_round_trips_itoa(n, base):
    assert atoi_base(itoa(n, base), base) == n


def test_atoi_base_stops_at_foreign_character():
    assert atoi_base("12z9", BASE_10) == 12


@pytest.mark.parametrize("base", ["", "aa", "0120"])
def test_atoi_base_rejects_invalid_base(base):
    with pytest.raises(ValueError):
        atoi_base("1", base)


def test_atou32_base_plus_sign_is_ignored():
    assert atou32_base("+FF", BASE_16) == atou32_base("FF", BASE_16)
    assert atou32_base("FF", BASE_16) == atoi_base("FF", BASE_16)


def test_atou32_base_invalid_character_gives_error_color():
    assert atou32_base("12G", BASE_16) == ERROR_COLOR


def test_atou32_base_wraps_at_32_bits():
    assert atou32_base("1FFFFFFFF", BASE_16) == atou32_base("FFFFFFFF", BASE_16)


def test_atou32_base_rejects_invalid_base():
    with pytest.raises(ValueError):
        atou32_base("1", "00")


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", False), ("abca", False), (BASE_16, True), (BASE_10, True)],
)
def test_has_unique_chars(text, expected):
    assert has_unique_chars(text) is expected


@pytest.mark.parametrize("n", [0, 9, 10, -10, 99999, -2147483648])
def test_count_digits_decimal_matches_str(n):
    assert count_digits(n, 10) == len(str(abs(n)))


@pytest.mark.parametrize("n", [0, 15, 16, 4096, 2**40])
def test_ucount_digits_hex_matches_format(n):
    assert ucount_digits(n, 16) == len(format(n, "x"))


def test_count_digits_rejects_zero_base():
    with pytest.raises(ValueError):
        count_digits(5, 0)


def test_ucount_digits_rejects_negative():
    with pytest.raises(ValueError):
        ucount_digits(-1, 10)


def test_itoa_int_min():
    assert itoa(-2147483648, BASE_10) == "-2147483648"


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -99])
def test_itoa_decimal_matches_str(n):
    assert itoa(n, BASE_10) == str(n)


def test_itoa_rejects_invalid_base():
    with pytest.raises(ValueError):
        itoa(1, "aba")


def test_itoa_rejects_unary_base_for_nonzero():
    with pytest.raises(ValueError):
        itoa(3, "a")


@pytest.mark.parametrize("n", [0, 1, 255, 3735928559, 2**63])
def test_uitoa_hex_matches_format(n):
    assert uitoa(n, BASE_16) == format(n, "X")


def test_uitoa_rejects_negative():
    with pytest.raises(ValueError):
        uitoa(-1, BASE_10)


def test_split_collapses_runs_of_separator():
    assert split("  1 2   3 ", " ") == ["1", "2", "3"]


def test_split_other_separator():
    assert split("a,,b,", ",") == ["a", "b"]


def test_split_only_separators_gives_no_words():
    assert split("   ", " ") == []


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")