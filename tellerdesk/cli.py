"""Command-line entry point offering the ATM and bank menus."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from tellerdesk.atm import ATM
from tellerdesk.bank import Bank
from tellerdesk.store import AccountStore

_MENU = "\nMain Menu:\n1. ATM\n2. Bank\n3. Exit"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the main menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(
        prog="tellerdesk", description="Manage bank accounts through ATM and teller menus."
    )
    parser.add_argument(
        "--data", default="users.dat", help="account file (default: users.dat)"
    )
    args = parser.parse_args(argv)

    store = AccountStore(args.data)
    atm = ATM(store)
    bank = Bank(store)

    while True:
        print(_MENU)
        try:
            text = input("Enter choice: ")
        except EOFError:
            return 0
        choice = text.strip()
        if choice == "1":
            atm.menu()
        elif choice == "2":
            bank.menu()
        elif choice == "3":
            print("Exiting...")
            return 0
        else:
            print("Invalid choice!")