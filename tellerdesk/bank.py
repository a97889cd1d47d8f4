"""Teller-side menu for managing accounts."""

from __future__ import annotations

import math
from collections.abc import Callable

from tellerdesk.store import AccountNotFoundError, AccountStore
from tellerdesk.user import InsufficientFundsError, read_user

_MENU = (
    "\nBank Menu:\n1. Add User\n2. View All\n3. Deposit\n4. Withdraw\n"
    "5. Search\n6. Edit\n7. Delete\n8. Transfer\n9. Exit"
)


class _InvalidInput(Exception):
    """An answer at a prompt could not be used."""


class Bank:
    """Interactive teller operations over an account store."""

    def __init__(
        self,
        store: AccountStore,
        ask: Callable[[str], str] | None = None,
        say: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self._ask = ask if ask is not None else input
        self._say = say if say is not None else print

    def _read_account(self, prompt: str, error: str = "Invalid account number!") -> int:
        text = self._ask(prompt)
        try:
            return int(text.strip())
        except ValueError:
            raise _InvalidInput(error) from None

    def _read_amount(self) -> float:
        text = self._ask("Amount: ")
        try:
            amount = float(text.strip())
        except ValueError:
            raise _InvalidInput("Invalid amount!") from None
        if not math.isfinite(amount) or amount < 0:
            raise _InvalidInput("Invalid amount!")
        return amount

    def menu(self) -> None:
        """Run the bank menu until the user picks Exit or input ends."""
        handlers: dict[int, Callable[[], None]] = {
            1: self.add_user,
            2: self.view_all,
            3: lambda: self.deposit_money(
                self._read_account("Account No: "), self._read_amount()
            ),
            4: lambda: self.withdraw_money(
                self._read_account("Account No: "), self._read_amount()
            ),
            5: lambda: self.search_user(self._read_account("Account No: ")),
            6: lambda: self.edit_user(self._read_account("Account No: ")),
            7: lambda: self.delete_user(self._read_account("Account No: ")),
            8: lambda: self.transfer_money(
                self._read_account("From Acc: ", "Invalid sender account number!"),
                self._read_account("To Acc: ", "Invalid receiver account number!"),
                self._read_amount(),
            ),
        }
        while True:
            self._say(_MENU)
            try:
                text = self._ask("Choice: ")
            except EOFError:
                return
            try:
                choice = int(text.strip())
            except ValueError:
                self._say("Invalid input! Please enter a number.")
                continue
            if choice == 9:
                self._say("Exiting bank menu...")
                return
            handler = handlers.get(choice)
            if handler is None:
                self._say("Invalid choice! Try again.")
                continue
            try:
                handler()
            except _InvalidInput as problem:
                self._say(str(problem))
            except EOFError:
                return

    def add_user(self) -> None:
        """Ask for a new account's details and store it."""
        try:
            user = read_user(self._ask)
        except ValueError:
            self._say("Invalid account details!")
            return
        self.store.add(user)

    def view_all(self) -> None:
        """List every account on one line each."""
        users = list(self.store)
        if not users:
            self._say("No user records found.")
            return
        for user in users:
            self._say(user.display_short())

    def deposit_money(self, acc_number: int, amount: float) -> None:
        """Deposit into an account."""
        try:
            self.store.deposit(acc_number, amount)
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        self._say("Deposited.")

    def withdraw_money(self, acc_number: int, amount: float) -> None:
        """Withdraw from an account."""
        try:
            self.store.withdraw(acc_number, amount)
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        except InsufficientFundsError:
            self._say("Insufficient balance!")
            return
        self._say("Withdrawn.")

    def search_user(self, acc_number: int) -> None:
        """Show the full details of an account."""
        try:
            user = self.store.find(acc_number)
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        self._say(user.display())

    def edit_user(self, acc_number: int) -> None:
        """Replace an account's details with newly entered ones."""
        try:
            self.store.find(acc_number)
        except AccountNotFoundError:
            self._say("Account not found!")
            return
        self._say("Editing user...")
        try:
            user = read_user(self._ask)
        except ValueError:
            self._say("Invalid account details!")
            return
        self.store.replace(acc_number, user)
        self._say("Updated.")

    def delete_user(self, acc_number: int) -> None:
        """Remove an account."""
        try:
            self.store.delete(acc_number)
        except AccountNotFoundError:
            self._say("Not found!")
            return
        self._say("Deleted.")

    def transfer_money(self, from_acc: int, to_acc: int, amount: float) -> None:
        """Move money from one account to another."""
        try:
            self.store.transfer(from_acc, to_acc, amount)
        except AccountNotFoundError as missing:
            if missing.role == "sender":
                self._say("Sender not found!")
            else:
                self._say("Receiver not found!")
            return
        except InsufficientFundsError:
            self._say("Insufficient funds!")
            return
        self._say("Transfer complete.")