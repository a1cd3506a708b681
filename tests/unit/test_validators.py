"""
Unit tests for decimal and cents converters.
"""

import pytest
from decimal import Decimal


class TestParseDecimal:

    def test_keeps_exact_digits(self):
        from ofx_parser.validators import parse_decimal

        result = parse_decimal('-1234.50')

        assert result == Decimal('-1234.50')
        assert str(result) == '-1234.50'

    def test_absent_and_empty_are_none(self):
        from ofx_parser.validators import parse_decimal

        assert parse_decimal(None) is None
        assert parse_decimal('') is None
        assert parse_decimal('   ') is None

    @pytest.mark.parametrize("text,expected", [
        ('12,50', Decimal('12.50')),
        ('-0,99', Decimal('-0.99')),
        ('+7', Decimal('7')),
        ('.5', Decimal('0.5')),
    ])
    def test_accepted_forms(self, text, expected):
        from ofx_parser.validators import parse_decimal

        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ['abc', '1,234.56', 'NaN', 'Infinity', '12-'])
    def test_rejects_non_numbers(self, text):
        from ofx_parser.validators import parse_decimal
        from ofx_parser.exceptions import InvalidAmountFormat

        with pytest.raises(InvalidAmountFormat):
            parse_decimal(text)


class TestToCents:

    @pytest.mark.parametrize("amount,cents", [
        (Decimal('12.34'), 1234),
        (Decimal('-12.349'), -1234),
        (Decimal('7'), 700),
        (Decimal('0.001'), 0),
    ])
    def test_truncates_to_cents(self, amount, cents):
        from ofx_parser.validators import to_cents

        assert to_cents(amount) == cents

    def test_none(self):
        from ofx_parser.validators import to_cents

        assert to_cents(None) is None
