"""
CLI interface for the ATM ledger.

This module provides the interactive console: a welcome menu for registering
and logging in, and an ATM menu for balance inquiry, deposits and withdrawals.
"""

import logging
from decimal import Decimal
from typing import Optional

import click

from . import config
from .account_store import AccountStore
from .errors import ATMError, InsufficientFunds, InvalidAmount, InvalidPin
from .models import AtmState
from .session import AtmMachine, Session
from .validation import parse_amount, validate_pin

RULE = "-" * 39


class AtmCLI:
    """Console wrapper around the account store and ATM state machine."""

    def __init__(self, store: Optional[AccountStore] = None, currency: str = config.CURRENCY):
        """Initialize CLI with an account store."""
        self.store = store if store is not None else AccountStore()
        self.machine = AtmMachine(self.store)
        self.currency = currency

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"{amount:,.2f} {self.currency}"

    def parse_amount(self, amount_str: str) -> Decimal:
        """Parse amount input."""
        return parse_amount(amount_str)

    def read_line(self, prompt: str) -> str:
        return click.prompt(prompt, default="", show_default=False, prompt_suffix="")

    def read_choice(self):
        """Read a menu choice; None if the input is not a number."""
        raw = self.read_line("> ").strip()
        try:
            return int(raw)
        except ValueError:
            click.echo("Please enter a number.")
            return None

    def read_pin(self, prompt: str) -> str:
        while True:
            try:
                return validate_pin(self.read_line(prompt))
            except InvalidPin as e:
                click.echo(str(e))

    def read_amount(self, prompt: str) -> Decimal:
        while True:
            try:
                return self.parse_amount(self.read_line(prompt))
            except InvalidAmount as e:
                click.echo(str(e))

    def run(self) -> None:
        """Run the welcome loop until the user exits or input ends."""
        try:
            while self.machine.state is not AtmState.TERMINATED:
                self.welcome()
        except click.Abort:
            click.echo("")
        click.echo("Goodbye!")

    def welcome(self) -> None:
        click.echo("\n=========== ATM Console Demo ==========")
        click.echo("1) Register new account")
        click.echo("2) Login")
        click.echo("0) Exit")
        click.echo(RULE)

        choice = self.read_choice()
        if choice is None:
            return

        if choice == 0:
            self.machine.exit()
        elif choice == 1:
            self.register()
        elif choice == 2:
            self.login()
        else:
            click.echo("Invalid choice. Use 0, 1, or 2.")

    def register(self) -> None:
        self.machine.start_registration()

        username = self.read_line("Choose username: ")
        if not username:
            click.echo("Username cannot be empty.", err=True)
            self.machine.cancel()
            return
        # Checked up front so a taken name does not cost the user a PIN prompt
        if username in self.store:
            click.echo("Username already taken.", err=True)
            self.machine.cancel()
            return

        pin = self.read_pin(f"Choose a {config.PIN_LENGTH}-digit PIN: ")
        initial = self.read_amount(f"Initial deposit ({self.currency}): ")

        try:
            account = self.machine.register(username, pin, initial)
            click.echo(f"Account created for '{account.username}'.")
        except ATMError as e:
            click.echo(str(e), err=True)

    def login(self) -> None:
        self.machine.start_login()

        username = self.read_line("Username: ")
        pin = self.read_pin("PIN: ")

        try:
            session = self.machine.login(username, pin)
        except ATMError as e:
            click.echo(str(e), err=True)
            return

        click.echo(f"Welcome, {session.username}!")
        self.atm_session(session)

    def atm_session(self, session: Session) -> None:
        while self.machine.state is AtmState.AUTHENTICATED:
            click.echo(f"\n----------- ATM for {session.username} -----------")
            click.echo("1) Show balance")
            click.echo("2) Deposit")
            click.echo("3) Withdraw")
            click.echo("4) Logout")
            click.echo(RULE)

            choice = self.read_choice()
            if choice is None:
                continue

            if choice == 1:
                self.show_balance(session)
            elif choice == 2:
                self.deposit(session)
            elif choice == 3:
                self.withdraw(session)
            elif choice == 4:
                click.echo("Logging out...")
                self.machine.logout()
            else:
                click.echo("Invalid choice (1-4).")

    def show_balance(self, session: Session) -> None:
        click.echo(f"Current balance: {self.format_currency(session.get_balance())}")

    def deposit(self, session: Session) -> None:
        amount = self.read_amount(f"Enter amount to deposit ({self.currency}): ")
        try:
            session.deposit(amount)
        except ATMError as e:
            click.echo(str(e), err=True)
            return
        click.echo(f"Deposited {self.format_currency(amount)}.")
        self.show_balance(session)

    def withdraw(self, session: Session) -> None:
        # An empty account is rejected before asking for an amount
        if session.get_balance() <= 0:
            click.echo("Insufficient funds.", err=True)
            return

        amount = self.read_amount(f"Enter amount to withdraw ({self.currency}): ")
        try:
            session.withdraw(amount)
        except InsufficientFunds:
            click.echo(f"Insufficient funds. You only have {self.format_currency(session.get_balance())}.", err=True)
            return
        except ATMError as e:
            click.echo(str(e), err=True)
            return
        click.echo(f"Withdrew {self.format_currency(amount)}.")
        self.show_balance(session)


@click.command()
@click.option('--no-demo', is_flag=True, help='Do not create the demo account')
@click.option('--currency', default=config.CURRENCY, show_default=True,
              help='Currency label used for display')
@click.option('--log-level', default=config.DEFAULT_LOG_LEVEL, show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
def cli(no_demo, currency, log_level):
    """ATM Console Demo"""
    logging.basicConfig(level=log_level.upper(), format=config.LOG_FORMAT)

    atm_cli = AtmCLI(currency=currency)
    if not no_demo:
        atm_cli.store.seed_demo_account()
    atm_cli.run()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
