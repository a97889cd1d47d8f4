"""File-backed storage of bank accounts, one JSON record per line."""

from __future__ import annotations

import dataclasses
import json
import os
from collections.abc import Iterator
from pathlib import Path

from tellerdesk.user import User


class AccountNotFoundError(LookupError):
    """Raised when no account has the requested number."""

    def __init__(self, acc_number: int, role: str = "account") -> None:
        super().__init__(f"{role} {acc_number} not found")
        self.acc_number = acc_number
        self.role = role


def _encode(user: User) -> str:
    return json.dumps(
        {"acc_number": user.acc_number, "name": user.name, "balance": user.balance}
    )


def _decode(line: str) -> User:
    record = json.loads(line)
    return User(int(record["acc_number"]), str(record["name"]), float(record["balance"]))


class AccountStore:
    """Accounts kept in a file, in the order they were added."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _load(self) -> list[User]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [_decode(line) for line in text.splitlines() if line.strip()]

    def _save(self, users: list[User]) -> None:
        temp = self.path.with_name(self.path.name + ".tmp")
        temp.write_text("".join(_encode(u) + "\n" for u in users), encoding="utf-8")
        os.replace(temp, self.path)

    @staticmethod
    def _index(users: list[User], acc_number: int, role: str = "account") -> int:
        for index, user in enumerate(users):
            if user.acc_number == acc_number:
                return index
        raise AccountNotFoundError(acc_number, role)

    def __iter__(self) -> Iterator[User]:
        return iter(self._load())

    def find(self, acc_number: int) -> User:
        """Return the first account with this number."""
        users = self._load()
        return users[self._index(users, acc_number)]

    def add(self, user: User) -> None:
        """Append an account to the end of the file."""
        with self.path.open("a", encoding="utf-8") as file:
            file.write(_encode(user) + "\n")

    def replace(self, acc_number: int, user: User) -> None:
        """Overwrite the first account with this number by ``user``."""
        users = self._load()
        users[self._index(users, acc_number)] = dataclasses.replace(user)
        self._save(users)

    def delete(self, acc_number: int) -> None:
        """Remove every account with this number."""
        users = self._load()
        kept = [user for user in users if user.acc_number != acc_number]
        if len(kept) == len(users):
            raise AccountNotFoundError(acc_number)
        self._save(kept)

    def deposit(self, acc_number: int, amount: float) -> User:
        """Add money to an account and return its updated record."""
        users = self._load()
        user = users[self._index(users, acc_number)]
        user.deposit(amount)
        self._save(users)
        return user

    def withdraw(self, acc_number: int, amount: float) -> User:
        """Take money from an account and return its updated record."""
        users = self._load()
        user = users[self._index(users, acc_number)]
        user.withdraw(amount)
        self._save(users)
        return user

    def transfer(self, from_acc: int, to_acc: int, amount: float) -> tuple[User, User]:
        """Move money between two accounts; return the sender and receiver records."""
        users = self._load()
        sender_index = self._index(users, from_acc, "sender")
        receiver_index = self._index(users, to_acc, "receiver")
        sender = dataclasses.replace(users[sender_index])
        receiver = dataclasses.replace(users[receiver_index])
        sender.withdraw(amount)
        receiver.deposit(amount)
        users[sender_index] = sender
        users[receiver_index] = receiver
        self._save(users)
        return sender, receiver