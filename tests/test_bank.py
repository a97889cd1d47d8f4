import pytest

from tellerdesk.bank import Bank
from tellerdesk.store import AccountStore
from tellerdesk.user import User


def scripted(answers):
    it = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return ask, prompts


@pytest.fixture
def store(tmp_path):
    return AccountStore(tmp_path / "users.dat")


def make_bank(store, answers=()):
    ask, prompts = scripted(answers)
    said = []
    return Bank(store, ask, said.append), said, prompts


def test_add_user_stores_entered_account(store):
    bank, _, _ = make_bank(store, ["5", "Ann Lee", "100"])
    bank.add_user()
    assert list(store) == [User(5, "Ann Lee", 100.0)]


def test_add_user_with_bad_number_stores_nothing(store):
    bank, said, _ = make_bank(store, ["five", "Ann", "100"])
    bank.add_user()
    assert list(store) == []
    assert said == ["Invalid account details!"]


def test_view_all_empty(store):
    bank, said, _ = make_bank(store)
    bank.view_all()
    assert said == ["No user records found."]


def test_view_all_lists_each_account(store):
    store.add(User(1, "A", 10.0))
    store.add(User(2, "B", 20.5))
    bank, said, _ = make_bank(store)
    bank.view_all()
    assert said == ["1\tA\t10", "2\tB\t20.5"]


def test_deposit_money(store):
    store.add(User(1, "A", 10.0))
    bank, said, _ = make_bank(store)
    bank.deposit_money(1, 5.0)
    assert said == ["Deposited."]
    assert store.find(1).balance == 10.0 + 5.0


def test_deposit_money_missing(store):
    bank, said, _ = make_bank(store)
    bank.deposit_money(1, 5.0)
    assert said == ["Account not found!"]


def test_withdraw_money_insufficient(store):
    store.add(User(1, "A", 10.0))
    bank, said, _ = make_bank(store)
    bank.withdraw_money(1, 50.0)
    assert said == ["Insufficient balance!"]
    assert store.find(1).balance == 10.0


def test_withdraw_money(store):
    store.add(User(1, "A", 10.0))
    bank, said, _ = make_bank(store)
    bank.withdraw_money(1, 4.0)
    assert said == ["Withdrawn."]
    assert store.find(1).balance == 10.0 - 4.0


def test_search_user_shows_details(store):
    store.add(User(1, "A", 10.0))
    bank, said, _ = make_bank(store)
    bank.search_user(1)
    assert said == [User(1, "A", 10.0).display()]


def test_search_user_missing(store):
    bank, said, _ = make_bank(store)
    bank.search_user(3)
    assert said == ["Account not found!"]


def test_edit_user_replaces_record(store):
    store.add(User(1, "A", 10.0))
    bank, said, _ = make_bank(store, ["1", "Alice", "99"])
    bank.edit_user(1)
    assert said == ["Editing user...", "Updated."]
    assert list(store) == [User(1, "Alice", 99.0)]


def test_edit_user_missing_asks_nothing(store):
    bank, said, prompts = make_bank(store, ["1", "Alice", "99"])
    bank.edit_user(1)
    assert said == ["Account not found!"]
    assert prompts == []


def test_delete_user(store):
    store.add(User(1, "A", 10.0))
    bank, said, _ = make_bank(store)
    bank.delete_user(1)
    bank.delete_user(1)
    assert said == ["Deleted.", "Not found!"]
    assert list(store) == []


@pytest.mark.parametrize(
    ("from_acc", "to_acc", "amount", "message"),
    [
        (1, 2, 5.0, "Transfer complete."),
        (9, 2, 5.0, "Sender not found!"),
        (1, 9, 5.0, "Receiver not found!"),
        (1, 2, 500.0, "Insufficient funds!"),
    ],
)
def test_transfer_money_messages(store, from_acc, to_acc, amount, message):
    store.add(User(1, "A", 10.0))
    store.add(User(2, "B", 20.0))
    bank, said, _ = make_bank(store)
    bank.transfer_money(from_acc, to_acc, amount)
    assert said == [message]


def test_menu_add_then_deposit(store):
    bank, said, _ = make_bank(store, ["1", "5", "Ann", "100", "3", "5", "20", "9"])
    bank.menu()
    assert store.find(5).balance == 100.0 + 20.0
    assert said[-1] == "Exiting bank menu..."
    assert "Deposited." in said


def test_menu_rejects_negative_amount(store):
    store.add(User(5, "Ann", 100.0))
    bank, said, _ = make_bank(store, ["3", "5", "-4", "9"])
    bank.menu()
    assert "Invalid amount!" in said
    assert store.find(5).balance == 100.0


def test_menu_rejects_bad_receiver(store):
    bank, said, _ = make_bank(store, ["8", "1", "two", "9"])
    bank.menu()
    assert "Invalid receiver account number!" in said


def test_menu_reports_non_numeric_choice(store):
    bank, said, _ = make_bank(store, ["abc", "42", "9"])
    bank.menu()
    assert "Invalid input! Please enter a number." in said
    assert "Invalid choice! Try again." in said


def test_menu_stops_at_end_of_input(store):
    bank, said, prompts = make_bank(store, ["2"])
    bank.menu()
    assert prompts == ["Choice: ", "Choice: "]
    assert "No user records found." in said