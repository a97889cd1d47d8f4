"""Account holder records and the rules for changing a balance."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass


class InsufficientFundsError(Exception):
    """Raised when a withdrawal is larger than the available balance."""

    def __init__(self, balance: float, amount: float) -> None:
        super().__init__(f"cannot withdraw {amount:g} from a balance of {balance:g}")
        self.balance = balance
        self.amount = amount


@dataclass
class User:
    """A single bank account."""

    acc_number: int = 0
    name: str = ""
    balance: float = 0.0

    def deposit(self, amount: float) -> None:
        """Add ``amount`` to the balance."""
        self.balance += amount

    def withdraw(self, amount: float) -> None:
        """Take ``amount`` off the balance, refusing to go below zero."""
        if amount > self.balance:
            raise InsufficientFundsError(self.balance, amount)
        self.balance -= amount

    def display(self) -> str:
        """Full multi-line description of the account."""
        return (
            f"Account Number: {self.acc_number}\n"
            f"Name: {self.name}\n"
            f"Balance: {self.balance:g}"
        )

    def display_short(self) -> str:
        """One tab-separated line describing the account."""
        return f"{self.acc_number}\t{self.name}\t{self.balance:g}"


def read_user(ask: Callable[[str], str]) -> User:
    """Build a user from answers to the account-number, name and balance prompts.

    Raises ValueError when the account number or balance is not a number.
    """
    acc_text = ask("Enter Account Number: ")
    try:
        acc_number = int(acc_text.strip())
    except ValueError:
        raise ValueError(f"invalid account number: {acc_text!r}") from None

    name = ask("Enter Name: ").strip()

    balance_text = ask("Enter Balance: ")
    try:
        balance = float(balance_text.strip())
    except ValueError:
        raise ValueError(f"invalid balance: {balance_text!r}") from None
    if not math.isfinite(balance):
        raise ValueError(f"invalid balance: {balance_text!r}")

    return User(acc_number, name, balance)