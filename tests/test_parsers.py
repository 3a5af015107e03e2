#
# XValues - Parsers Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from xvalues.parsers import ParseError, ParseErrorKind, parse_binary, parse_value, parse_values
from xvalues.units import KB, MB, GB, TB, PB, EB, MAX_UINT64


# Tests ----------------------------------------------------------------------------------------------------------------

class TestParseValueLiterals:

    @pytest.mark.parametrize("token, expected", [
        pytest.param("0", 0, id="zero"),
        pytest.param("1024", 1024, id="decimal"),
        pytest.param("0x10", 16, id="hex_lower"),
        pytest.param("0XfF", 255, id="hex_upper_prefix"),
        pytest.param("010", 8, id="octal"),
        pytest.param("+42", 42, id="plus_sign"),
        pytest.param("18446744073709551615", MAX_UINT64, id="max_uint64"),
        pytest.param("", 0, id="empty"),
    ])
    def test_plain(self, token, expected):
        assert parse_value(token) == expected

    def test_overflow_saturates(self):
        assert parse_value("18446744073709551616") == MAX_UINT64
        assert parse_value("0x1" + "0" * 20) == MAX_UINT64
        assert parse_value("-99999999999999999999999") == MAX_UINT64

    def test_huge_decimal_saturates(self):
        assert parse_value("9" * 5000) == MAX_UINT64
        assert parse_value("-" + "1" * 5000) == MAX_UINT64
        assert parse_value("9" * 5000 + "k") == (MAX_UINT64 * KB) & MAX_UINT64

    def test_zero_padded_literals_do_not_saturate(self):
        assert parse_value("1" + "0" * 4) == 10000
        assert parse_value("0" * 30) == 0
        assert parse_value("+" + "0" * 5000 + "7") == 7

    def test_negative_wraps(self):
        assert parse_value("-1") == MAX_UINT64
        assert parse_value("-0x10") == 2 ** 64 - 16


class TestParseValueSuffix:

    @pytest.mark.parametrize("token, expected", [
        pytest.param("4k", 4 * KB, id="k"),
        pytest.param("4K", 4 * KB, id="K"),
        pytest.param("1m", MB, id="m"),
        pytest.param("16M", 16 * MB, id="M"),
        pytest.param("2g", 2 * GB, id="g"),
        pytest.param("1T", TB, id="T"),
        pytest.param("1p", PB, id="p"),
        pytest.param("1E", EB, id="E"),
        pytest.param("0x10k", 16 * KB, id="hex_k"),
        pytest.param("010k", 8 * KB, id="octal_k"),
        pytest.param("k", 0, id="bare_suffix"),
    ])
    def test_scaled(self, token, expected):
        assert parse_value(token) == expected

    def test_hex_digit_is_not_suffix(self):
        # 'e' continues a hex literal
        assert parse_value("0x1e") == 0x1E

    def test_scaled_wraps(self):
        assert parse_value("16E") == 0
        assert parse_value("17e") == EB

    @pytest.mark.parametrize("token, offset", [
        pytest.param("ff", 0, id="hex_without_prefix"),
        pytest.param("4kb", 1, id="two_trailing"),
        pytest.param("1x2k", 1, id="internal_garbage"),
        pytest.param("12z", 2, id="unknown_letter"),
        pytest.param("08", 1, id="bad_octal_digit"),
        pytest.param("0x", 1, id="hex_prefix_only"),
        pytest.param("0b", 1, id="binary_prefix_only"),
        pytest.param("1.5k", 1, id="fraction"),
        pytest.param(" 1", 0, id="leading_space"),
    ])
    def test_invalid_suffix(self, token, offset):
        with pytest.raises(ParseError) as excinfo:
            parse_value(token)
        assert excinfo.value.kind == ParseErrorKind.INVALID_SUFFIX
        assert excinfo.value.token == token
        assert excinfo.value.offset == offset
        assert str(excinfo.value) == f"Error in value {token}:{offset}"

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_value("ff")


class TestParseBinary:

    @pytest.mark.parametrize("token, expected", [
        pytest.param("0b101", 5, id="lower_prefix"),
        pytest.param("0B101", 5, id="upper_prefix"),
        pytest.param("0b0", 0, id="zero"),
        pytest.param("0b0001", 1, id="leading_zeros"),
        pytest.param("0b" + "1" * 64, MAX_UINT64, id="64_bits"),
        pytest.param("0b1" + "0" * 63, 2 ** 63, id="top_bit"),
    ])
    def test_valid(self, token, expected):
        assert parse_value(token) == expected
        assert parse_binary(token) == expected

    def test_too_long(self):
        token = "0b" + "1" * 65
        with pytest.raises(ParseError) as excinfo:
            parse_value(token)
        assert excinfo.value.kind == ParseErrorKind.TOO_LONG
        assert excinfo.value.offset is None
        assert "max 64 bits" in str(excinfo.value)

    def test_leading_zeros_count_towards_length(self):
        with pytest.raises(ParseError) as excinfo:
            parse_value("0b" + "0" * 65)
        assert excinfo.value.kind == ParseErrorKind.TOO_LONG

    @pytest.mark.parametrize("token", ["0b102", "0b1k", "0bx", "0B12"])
    def test_invalid_digit(self, token):
        with pytest.raises(ParseError) as excinfo:
            parse_value(token)
        assert excinfo.value.kind == ParseErrorKind.INVALID_DIGIT
        assert "only contain 0 or 1" in str(excinfo.value)


class TestParseValues:

    def test_all_parsed_in_order(self):
        assert parse_values(["1", "0x2", "0b11", "4k"]) == [1, 2, 3, 4096]

    def test_empty(self):
        assert parse_values([]) == []

    def test_first_failure_raises(self):
        with pytest.raises(ParseError) as excinfo:
            parse_values(["1", "bad", "0b2"])
        assert excinfo.value.token == "bad"

    @pytest.mark.parametrize("token", ["0", "4k", "0x1f", "0b1011", "017", "1E", "-1", "18446744073709551615"])
    def test_decimal_round_trip(self, token):
        value = parse_value(token)
        assert parse_value(str(value)) == value
