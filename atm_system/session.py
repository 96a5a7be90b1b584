"""
Authenticated sessions and the ATM application state machine.

A ``Session`` is bound to one account id and forwards balance operations to
the store. ``AtmMachine`` tracks where the user is in the
welcome -> register/login -> session -> welcome flow.
"""

import logging
from decimal import Decimal
from typing import Optional

from .account_store import AccountStore
from .errors import InvalidCredentials, InvalidStateTransition
from .models import AccountView, AtmState
from .validation import AmountLike

logger = logging.getLogger(__name__)


class Session:
    """Balance operations for one authenticated account."""

    def __init__(self, store: AccountStore, account_id: int):
        self._store = store
        self._account_id: Optional[int] = account_id
        self.username = store.get_account(account_id).username

    @property
    def is_active(self) -> bool:
        return self._account_id is not None

    @property
    def account_id(self) -> int:
        if self._account_id is None:
            raise InvalidStateTransition("Session is closed")
        return self._account_id

    def view(self) -> AccountView:
        """Get a fresh snapshot of the bound account."""
        return self._store.get_view(self.account_id)

    def get_balance(self) -> Decimal:
        return self._store.get_balance(self.account_id)

    def deposit(self, amount: AmountLike) -> Decimal:
        return self._store.deposit(self.account_id, amount)

    def withdraw(self, amount: AmountLike) -> Decimal:
        return self._store.withdraw(self.account_id, amount)

    def logout(self) -> None:
        """Release the account; later operations raise InvalidStateTransition."""
        self._account_id = None


class AtmMachine:
    """Drives the ATM through its states on top of an account store."""

    def __init__(self, store: AccountStore):
        self.store = store
        self.state = AtmState.WELCOME
        self._session: Optional[Session] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    def _require(self, *states: AtmState) -> None:
        if self.state not in states:
            raise InvalidStateTransition(f"Not allowed in state {self.state.value}")

    def _move(self, state: AtmState) -> None:
        logger.debug(f"ATM state {self.state.value} -> {state.value}")
        self.state = state

    def start_registration(self) -> None:
        self._require(AtmState.WELCOME)
        self._move(AtmState.REGISTERING)

    def start_login(self) -> None:
        self._require(AtmState.WELCOME)
        self._move(AtmState.AUTHENTICATING)

    def cancel(self) -> None:
        """Abandon a registration or login and go back to the welcome menu."""
        self._require(AtmState.REGISTERING, AtmState.AUTHENTICATING)
        self._move(AtmState.WELCOME)

    def register(self, username: str, pin: str, initial_balance: AmountLike) -> AccountView:
        """Register an account; the machine returns to WELCOME either way."""
        self._require(AtmState.REGISTERING)
        try:
            return self.store.register(username, pin, initial_balance)
        finally:
            self._move(AtmState.WELCOME)

    def login(self, username: str, pin: str) -> Session:
        """Authenticate and open a session; failures return to WELCOME."""
        self._require(AtmState.AUTHENTICATING)
        try:
            account = self.store.authenticate(username, pin)
        except InvalidCredentials:
            self._move(AtmState.WELCOME)
            raise

        self._session = Session(self.store, account.account_id)
        self._move(AtmState.AUTHENTICATED)
        return self._session

    def logout(self) -> None:
        self._require(AtmState.AUTHENTICATED)
        self._session.logout()
        self._session = None
        self._move(AtmState.WELCOME)

    def exit(self) -> None:
        self._require(AtmState.WELCOME)
        self._move(AtmState.TERMINATED)
