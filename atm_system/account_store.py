"""
Account store for the ATM ledger.

This module owns the in-memory accounts and contains the business logic for
registration, authentication and balance changes.
"""

import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from . import config
from .errors import (
    AccountNotFound,
    DuplicateUsername,
    InsufficientFunds,
    InvalidCredentials,
)
from .models import Account, AccountView
from .validation import AmountLike, validate_amount, validate_pin, validate_username


class AccountStore:
    """Manages ATM accounts and balance operations."""

    def __init__(self):
        """Initialize an empty store."""
        # Account ids are indexes into this list; accounts are never removed
        self._accounts: List[Account] = []
        self._index: Dict[str, int] = {}
        self._locks: List[threading.RLock] = []
        self._create_lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        return username in self._index

    def register(self, username: str, pin: str, initial_balance: AmountLike) -> AccountView:
        """Create a new account and return a snapshot of it."""
        validate_username(username)

        with self._create_lock:
            if username in self._index:
                self.logger.warning("Registration rejected: username already taken")
                raise DuplicateUsername(username)

            validate_pin(pin)
            balance = validate_amount(initial_balance)

            account = Account(
                account_id=len(self._accounts),
                username=username,
                pin=pin,
                balance=balance,
                created_at=datetime.now()
            )
            # Lock first: an id becomes visible once its account is appended
            self._locks.append(threading.RLock())
            self._accounts.append(account)
            self._index[username] = account.account_id

        self.logger.info(f"Created account {account.account_id} for {username!r}")
        return AccountView.from_account(account)

    def authenticate(self, username: str, pin: str) -> AccountView:
        """Verify credentials and return a snapshot of the matching account."""
        account = self.find_by_username(username)
        if account is None or account.pin != pin:
            self.logger.warning("Failed login attempt")
            raise InvalidCredentials()

        self.logger.info(f"Account {account.account_id} authenticated")
        return AccountView.from_account(account)

    def find_by_username(self, username: str) -> Optional[Account]:
        """Get account by username (exact, case-sensitive match)."""
        account_id = self._index.get(username)
        return self._accounts[account_id] if account_id is not None else None

    def get_account(self, account_id: int) -> Account:
        """Get account by ID."""
        if isinstance(account_id, bool) or not isinstance(account_id, int) \
                or not 0 <= account_id < len(self._accounts):
            raise AccountNotFound(f"Account {account_id} not found")
        return self._accounts[account_id]

    def get_view(self, account_id: int) -> AccountView:
        """Get a read-only snapshot of an account."""
        with self._lock_for(account_id):
            return AccountView.from_account(self.get_account(account_id))

    def get_balance(self, account_id: int) -> Decimal:
        """Get account balance."""
        with self._lock_for(account_id):
            return self.get_account(account_id).balance

    def deposit(self, account_id: int, amount: AmountLike) -> Decimal:
        """Deposit money to an account and return the new balance."""
        amount = validate_amount(amount)

        with self._lock_for(account_id):
            account = self.get_account(account_id)
            account.balance += amount
            new_balance = account.balance

        self.logger.debug(f"Deposit of {amount} to account {account_id}, balance {new_balance}")
        return new_balance

    def withdraw(self, account_id: int, amount: AmountLike) -> Decimal:
        """Withdraw money from an account and return the new balance."""
        with self._lock_for(account_id):
            account = self.get_account(account_id)

            # Checked before the amount, like the console does before prompting
            if account.balance <= 0:
                self.logger.warning(f"Withdrawal rejected for account {account_id}: empty balance")
                raise InsufficientFunds("Insufficient funds.")

            amount = validate_amount(amount)

            if not account.can_withdraw(amount):
                self.logger.warning(f"Withdrawal rejected for account {account_id}: insufficient funds")
                raise InsufficientFunds(
                    f"Insufficient funds. You only have {account.balance:.2f} {config.CURRENCY}."
                )

            account.balance -= amount
            new_balance = account.balance

        self.logger.debug(f"Withdrawal of {amount} from account {account_id}, balance {new_balance}")
        return new_balance

    def seed_demo_account(self) -> Optional[AccountView]:
        """Register the demo account unless its username is already taken."""
        if config.DEMO_USERNAME in self:
            return None
        return self.register(config.DEMO_USERNAME, config.DEMO_PIN, config.DEMO_BALANCE)

    def _lock_for(self, account_id: int) -> threading.RLock:
        self.get_account(account_id)
        return self._locks[account_id]
