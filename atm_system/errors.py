"""
Error types for the ATM ledger.

Every error is recoverable: the console layer reports it and re-prompts.
"""


class ATMError(ValueError):
    """Base class for all ATM ledger errors."""


class EmptyUsername(ATMError):
    """Raised when a username is empty."""

    def __init__(self, message: str = "Username cannot be empty."):
        super().__init__(message)


class DuplicateUsername(ATMError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        super().__init__("Username already taken.")
        self.username = username


class InvalidCredentials(ATMError):
    """
    Raised when authentication fails.

    Unknown usernames and wrong PINs produce the same error so callers
    cannot tell which accounts exist.
    """

    def __init__(self):
        super().__init__("Wrong username or PIN.")


class InvalidPin(ATMError):
    """Raised when a PIN is not exactly four decimal digits."""


class InvalidAmount(ATMError):
    """Raised when an amount is missing, malformed, not finite or not positive."""


class InsufficientFunds(ATMError):
    """Raised when a withdrawal exceeds the available balance."""


class AccountNotFound(ATMError):
    """Raised when an account id does not exist in the store."""


class InvalidStateTransition(ATMError):
    """Raised when an operation is not allowed in the current ATM state."""
