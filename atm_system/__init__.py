"""
ATM Console Ledger

An interactive console ATM: register an account with a username, a 4-digit
PIN and an initial balance, then log in to check the balance, deposit and
withdraw against an in-memory ledger.
"""

__version__ = "0.1.0"

from .models import Account, AccountView, AtmState
from .errors import (
    ATMError,
    AccountNotFound,
    DuplicateUsername,
    EmptyUsername,
    InsufficientFunds,
    InvalidAmount,
    InvalidCredentials,
    InvalidPin,
    InvalidStateTransition,
)
from .account_store import AccountStore
from .session import AtmMachine, Session
from .cli import main


def create_account_store(with_demo: bool = True) -> AccountStore:
    """
    Create an AccountStore, optionally holding the demo account.

    Args:
        with_demo: Register the demo account (user / 1234)

    Returns:
        AccountStore instance
    """
    store = AccountStore()
    if with_demo:
        store.seed_demo_account()
    return store


__all__ = [
    "Account",
    "AccountView",
    "AtmState",
    "ATMError",
    "AccountNotFound",
    "DuplicateUsername",
    "EmptyUsername",
    "InsufficientFunds",
    "InvalidAmount",
    "InvalidCredentials",
    "InvalidPin",
    "InvalidStateTransition",
    "AccountStore",
    "AtmMachine",
    "Session",
    "create_account_store",
    "main"
]
