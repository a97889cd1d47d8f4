# tellerdesk

tellerdesk is a small console program for running a bank counter and an ATM.
It works on customer accounts kept in a local data file. Each account has an
account number, a holder's name and a balance.

## Installation

```
pip install .
```

## Running

```
tellerdesk
```

By default the accounts are kept in `users.dat` in the current directory. Use
`--data` to choose another file:

```
tellerdesk --data accounts.dat
```

You first see the main menu:

```
Main Menu:
1. ATM
2. Bank
3. Exit
```

Every menu also stops when input ends (for example on Ctrl-D).

### Bank menu

The bank menu is for staff. From it you can:

- add a user (account number, name and opening balance)
- view all accounts, one line each
- deposit to an account
- withdraw from an account
- search for an account by number
- edit an account, entering all of its details again
- delete an account
- transfer money between two accounts

Amounts entered in the bank menu must be numbers and must not be negative. A
withdrawal larger than the balance is refused with "Insufficient balance!", and
a transfer larger than the sender's balance with "Insufficient funds!"; in both
cases the accounts are left as they were.

### ATM menu

The ATM first asks for an account number and goes back to the main menu if
there is no such account. Once you are in, you can check the balance, withdraw
cash and view the account details. A withdrawal larger than the balance is
refused with "Insufficient funds!".

## Data file

The data file is plain text with one JSON object per line, holding
`acc_number`, `name` and `balance`. Accounts keep the order in which they were
added. Changes other than adding an account rewrite the whole file through a
temporary file next to it.

## Using it from Python

The same operations are available as a library:

```python
from tellerdesk.store import AccountStore
from tellerdesk.user import User

store = AccountStore("users.dat")
store.add(User(1001, "Jane Doe", 250.0))
store.deposit(1001, 50.0)
store.withdraw(1001, 20.0)
print(store.find(1001).balance)  # 280.0
```

`AccountStore` also offers `replace`, `delete` and `transfer`, and iterating
over it yields every account. If an account number is unknown, the store raises
`tellerdesk.store.AccountNotFoundError` (its `role` is `"sender"` or
`"receiver"` for transfers). If the balance is too small, it raises
`tellerdesk.user.InsufficientFundsError`.

`tellerdesk.user.User` has `display()` and `display_short()` for the full and
one-line descriptions, and `tellerdesk.user.read_user(ask)` builds a user from
answers to the account-number, name and balance prompts.

`tellerdesk.bank.Bank` and `tellerdesk.atm.ATM` are the interactive menus, run
with their `menu()` method. Each one takes a store, an `ask` function that
reads input and a `say` function that writes output (by default `input` and
`print`), so you can drive them from any front end.

## Tests

```
pip install .[test]
pytest
```