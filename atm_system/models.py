"""
Data models for the ATM ledger.

This module contains the account record, the read-only snapshot handed to
callers, and the states of the ATM application.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class AtmState(Enum):
    """States of the ATM application."""
    WELCOME = "welcome"
    REGISTERING = "registering"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    TERMINATED = "terminated"


@dataclass
class Account:
    """Represents a registered ATM account."""

    account_id: int = 0
    username: str = ""
    pin: str = ""
    balance: Decimal = Decimal('0.00')
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Initialize account after creation."""
        if self.created_at is None:
            self.created_at = datetime.now()

        # Ensure balance is a Decimal
        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

    def __repr__(self) -> str:
        # Keep the PIN out of logs and tracebacks
        return f"Account(account_id={self.account_id}, username={self.username!r}, balance={self.balance})"

    def can_withdraw(self, amount: Decimal) -> bool:
        """Check if withdrawal is possible without going below zero."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        return amount <= self.balance


@dataclass(frozen=True)
class AccountView:
    """Read-only snapshot of an account, safe to hand to the presentation layer."""

    account_id: int
    username: str
    balance: Decimal

    @classmethod
    def from_account(cls, account: Account) -> "AccountView":
        return cls(
            account_id=account.account_id,
            username=account.username,
            balance=account.balance
        )
