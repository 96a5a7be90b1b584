"""
Shape checks shared by the account store and the console layer.

The store re-checks PINs and amounts it receives so its invariants hold even
when a caller skips validation. ``parse_amount`` is only used by the console
to turn raw text into a ``Decimal``.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from . import config
from .errors import EmptyUsername, InvalidAmount, InvalidPin

AmountLike = Union[Decimal, int, float, str]

_DIGITS = frozenset("0123456789")


def is_valid_pin(pin: str) -> bool:
    """Return True if pin is exactly PIN_LENGTH ASCII decimal digits."""
    return (
        isinstance(pin, str)
        and len(pin) == config.PIN_LENGTH
        and all(c in _DIGITS for c in pin)
    )


def validate_pin(pin: str) -> str:
    """Return pin unchanged or raise InvalidPin."""
    if not isinstance(pin, str) or len(pin) != config.PIN_LENGTH:
        raise InvalidPin(f"PIN must be exactly {config.PIN_LENGTH} digits.")
    # str.isdigit() accepts non-ASCII digits, so check the set explicitly
    if not all(c in _DIGITS for c in pin):
        raise InvalidPin("PIN must contain digits only.")
    return pin


def validate_username(username: str) -> str:
    """Return username unchanged or raise EmptyUsername."""
    if not username:
        raise EmptyUsername()
    return username


def validate_amount(amount: AmountLike) -> Decimal:
    """Convert amount to Decimal and check it is finite and positive."""
    if isinstance(amount, bool):
        raise InvalidAmount(f"Invalid amount: {amount}")

    if not isinstance(amount, Decimal):
        try:
            amount = Decimal(str(amount))
        except (InvalidOperation, ValueError):
            raise InvalidAmount(f"Invalid amount: {amount}")

    if not amount.is_finite():
        raise InvalidAmount(f"Invalid amount: {amount}")

    if amount <= 0:
        raise InvalidAmount("Amount must be positive.")

    return amount


def parse_amount(text: str) -> Decimal:
    """
    Parse a money amount typed by the user.

    Accepts digits with at most one dot, e.g. ``200``, ``200.50`` or ``.5``.

    Args:
        text: Raw input line

    Returns:
        Positive Decimal amount

    Raises:
        InvalidAmount: If the text is empty, malformed or not positive
    """
    if not text:
        raise InvalidAmount("Amount cannot be empty.")

    if text.count('.') > 1 or any(c not in _DIGITS and c != '.' for c in text):
        raise InvalidAmount("Invalid amount, use digits and at most one dot.")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise InvalidAmount("Invalid amount format.")

    if amount <= 0:
        raise InvalidAmount("Amount must be positive.")

    return amount
