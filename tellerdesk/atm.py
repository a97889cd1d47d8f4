"""Customer-side ATM menu for a single account."""

from __future__ import annotations

import math
from collections.abc import Callable

from tellerdesk.store import AccountNotFoundError, AccountStore
from tellerdesk.user import InsufficientFundsError

_MENU = "\nATM Menu:\n1. Check Balance\n2. Withdraw\n3. View Account\n4. Exit"


class ATM:
    """Interactive ATM session over an account store."""

    def __init__(
        self,
        store: AccountStore,
        ask: Callable[[str], str] | None = None,
        say: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self._ask = ask if ask is not None else input
        self._say = say if say is not None else print

    def menu(self) -> None:
        """Log in to an account and serve requests until Exit or end of input."""
        try:
            text = self._ask("Enter Account Number: ")
        except EOFError:
            return
        try:
            acc_number = int(text.strip())
            self.store.find(acc_number)
        except (ValueError, AccountNotFoundError):
            self._say("Account not found. Returning to main menu.")
            return

        handlers = {
            1: self.check_balance,
            2: self.withdraw_amount,
            3: self.view_account,
        }
        while True:
            self._say(_MENU)
            try:
                choice_text = self._ask("Enter choice: ")
            except EOFError:
                return
            try:
                choice = int(choice_text.strip())
            except ValueError:
                choice = 0
            if choice == 4:
                self._say("Exiting ATM menu...")
                return
            handler = handlers.get(choice)
            if handler is None:
                self._say("Invalid choice! Try again.")
                continue
            try:
                handler(acc_number)
            except EOFError:
                return

    def check_balance(self, acc_number: int) -> None:
        """Show the account's balance."""
        try:
            user = self.store.find(acc_number)
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        self._say(f"Balance: {user.balance:g}")

    def withdraw_amount(self, acc_number: int) -> None:
        """Ask for an amount and withdraw it from the account."""
        try:
            self.store.find(acc_number)
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        text = self._ask("Enter amount to withdraw: ")
        try:
            amount = float(text.strip())
        except ValueError:
            self._say("Invalid amount!")
            return
        if not math.isfinite(amount):
            self._say("Invalid amount!")
            return
        try:
            self.store.withdraw(acc_number, amount)
        except InsufficientFundsError:
            self._say("Insufficient funds!")
            return
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        self._say("Withdrawal successful.")

    def view_account(self, acc_number: int) -> None:
        """Show the account's full details."""
        try:
            user = self.store.find(acc_number)
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        self._say(user.display())