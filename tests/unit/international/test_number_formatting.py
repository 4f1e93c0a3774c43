"""Test locale-aware number formatting."""
import pytest
from bignumerics.international.number_formatting import format_value, group_integer_digits
from bignumerics.international.number_parsing import parse
from bignumerics.models.locale import LocaleConvention
from bignumerics.models.value import BigDecimalValue, Sign


class TestGroupIntegerDigits:
    @pytest.mark.parametrize("digits,expected", [
        ((4,), "4"),
        ((4, 2), "42"),
        ((4, 2, 0), "420"),
        ((1, 2, 3, 4), "1,234"),
        ((1, 2, 3, 4, 5, 6), "123,456"),
        ((1, 2, 3, 4, 5, 6, 7), "1,234,567"),
    ])
    def test_boundaries(self, en_us, digits, expected):
        assert group_integer_digits(digits, en_us) == expected

    def test_secondary_group_size(self, hi_in):
        assert group_integer_digits((1, 2, 3, 4, 5, 6, 7), hi_in) == "12,34,567"

    def test_group_size_two(self):
        convention = LocaleConvention(group_size=2)
        assert group_integer_digits((1, 2, 3, 4, 5), convention) == "1,23,45"


class TestFormatValue:
    # en-US integer, leading-zero, large and decimal cases
    @pytest.mark.parametrize("raw,expected", [
        ("1234567890", "1,234,567,890"),
        ("+1234567890", "1,234,567,890"),
        ("-1234567890", "-1,234,567,890"),
        ("+1,234,567,890", "1,234,567,890"),
        ("-1,234,567,890", "-1,234,567,890"),
        ("0123456789", "123,456,789"),
        ("-0,123,456,789", "-123,456,789"),
        ("184467440737095516150", "184,467,440,737,095,516,150"),
        ("-184,467,440,737,095,516,150", "-184,467,440,737,095,516,150"),
        ("123456789.", "123,456,789"),
        ("-123,456,789.", "-123,456,789"),
        ("1234567.89", "1,234,567.89"),
        ("+1,234,567.89", "1,234,567.89"),
        ("-1,234,567.89", "-1,234,567.89"),
        ("42", "42"),
    ])
    def test_en_us(self, en_us, raw, expected):
        assert format_value(parse(raw, en_us), en_us) == expected

    def test_fraction_not_grouped(self, en_us):
        assert format_value(parse("1.23456789", en_us), en_us) == "1.23456789"

    def test_all_zeros(self, en_us):
        assert format_value(parse("000", en_us), en_us) == "0"

    def test_negative_zero(self, en_us):
        assert format_value(parse("-0", en_us), en_us) == "-0"

    def test_bare_fraction(self, en_us):
        assert format_value(parse(".5", en_us), en_us) == "0.5"

    def test_reformat_to_other_convention(self, en_us, de_de):
        value = parse("-1,234,567.89", en_us)
        assert format_value(value, de_de) == "-1.234.567,89"

    def test_indian_grouping(self, en_us, hi_in):
        value = parse("1234567890.5", en_us)
        assert format_value(value, hi_in) == "1,23,45,67,890.5"

    def test_default_convention(self):
        value = BigDecimalValue(integer_digits=(1, 0, 0, 0), sign=Sign.NEGATIVE)
        assert format_value(value) == "-1,000"

    def test_method(self, de_de):
        value = BigDecimalValue(integer_digits=(1, 0, 0, 0), fractional_digits=(2, 5))
        assert value.format(de_de) == "1.000,25"


class TestRoundTrip:
    @pytest.mark.parametrize("raw", [
        "0", "-0", "000", "0042", "12,3,456", "1,234,567.890", "-.5", "+7.",
        "184467440737095516150.000001",
    ])
    def test_en_us(self, en_us, raw):
        value = parse(raw, en_us)
        assert parse(format_value(value, en_us), en_us) == value

    @pytest.mark.parametrize("raw", ["1.234.567,89", "-0,5", "999"])
    def test_de_de(self, de_de, raw):
        value = parse(raw, de_de)
        assert parse(format_value(value, de_de), de_de) == value

    def test_hi_in(self, hi_in):
        value = parse("12,34,567.8", hi_in)
        assert format_value(value, hi_in) == "12,34,567.8"
