"""
Central configuration for the ATM ledger.
"""

from decimal import Decimal

# --- Business rules ---
CURRENCY = "SEK"
PIN_LENGTH = 4

# --- Demo account created at start-up ---
DEMO_USERNAME = "user"
DEMO_PIN = "1234"
DEMO_BALANCE = Decimal("1500.00")

# --- Console ---
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
