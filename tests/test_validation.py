"""
Tests for the validation module.

Covers PIN and username shape checks, amount validation, and the raw-text
amount parser used by the console.
"""

from decimal import Decimal

import pytest

from atm_system.errors import ATMError, EmptyUsername, InvalidAmount, InvalidPin
from atm_system.validation import (
    is_valid_pin,
    parse_amount,
    validate_amount,
    validate_pin,
    validate_username,
)


class TestPinValidation:
    """Test PIN shape checks."""

    @pytest.mark.parametrize("pin", ["1234", "0000", "0042", "9999"])
    def test_valid_pins(self, pin):
        assert is_valid_pin(pin) is True
        assert validate_pin(pin) == pin

    @pytest.mark.parametrize("pin", ["", "123", "12345", "12a4", " 123", "12.4", "١٢٣٤", "²³⁴⁵"])
    def test_invalid_pins(self, pin):
        assert is_valid_pin(pin) is False
        with pytest.raises(InvalidPin):
            validate_pin(pin)

    def test_non_string_pin(self):
        assert is_valid_pin(1234) is False
        with pytest.raises(InvalidPin):
            validate_pin(1234)

    def test_wrong_length_message(self):
        with pytest.raises(InvalidPin, match="PIN must be exactly 4 digits"):
            validate_pin("12")

    def test_non_digit_message(self):
        with pytest.raises(InvalidPin, match="PIN must contain digits only"):
            validate_pin("12ab")


class TestUsernameValidation:
    def test_valid_username(self):
        assert validate_username("anna") == "anna"

    def test_whitespace_username_is_not_empty(self):
        assert validate_username("   ") == "   "

    @pytest.mark.parametrize("username", ["", None])
    def test_empty_username(self, username):
        with pytest.raises(EmptyUsername, match="Username cannot be empty"):
            validate_username(username)


class TestValidateAmount:
    """Test amount validation for store operations."""

    @pytest.mark.parametrize("value, expected", [
        (Decimal('200.50'), Decimal('200.50')),
        ("0.01", Decimal('0.01')),
        (5, Decimal('5')),
        (0.5, Decimal('0.5')),
    ])
    def test_valid_amounts(self, value, expected):
        assert validate_amount(value) == expected

    @pytest.mark.parametrize("value", [Decimal('0'), Decimal('-1'), 0, -0.01, "-5"])
    def test_non_positive_amounts(self, value):
        with pytest.raises(InvalidAmount, match="Amount must be positive"):
            validate_amount(value)

    @pytest.mark.parametrize("value", ["abc", "", Decimal('NaN'), Decimal('Infinity'), float('inf'), True])
    def test_malformed_amounts(self, value):
        with pytest.raises(InvalidAmount):
            validate_amount(value)


class TestParseAmount:
    """Test parsing of typed amounts."""

    @pytest.mark.parametrize("text, expected", [
        ("200", Decimal('200')),
        ("200.50", Decimal('200.50')),
        (".5", Decimal('0.5')),
        ("7.", Decimal('7')),
    ])
    def test_valid_input(self, text, expected):
        assert parse_amount(text) == expected

    def test_empty_input(self):
        with pytest.raises(InvalidAmount, match="Amount cannot be empty"):
            parse_amount("")

    @pytest.mark.parametrize("text", ["1.2.3", "-5", "1,000", "12a", "1e5", "inf", " 200", "200 ", "   "])
    def test_bad_characters(self, text):
        with pytest.raises(InvalidAmount, match="use digits and at most one dot"):
            parse_amount(text)

    def test_lone_dot(self):
        with pytest.raises(InvalidAmount, match="Invalid amount format"):
            parse_amount(".")

    @pytest.mark.parametrize("text", ["0", "0.00", "000"])
    def test_zero(self, text):
        with pytest.raises(InvalidAmount, match="Amount must be positive"):
            parse_amount(text)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_amount("x")
        assert issubclass(InvalidAmount, ATMError)
