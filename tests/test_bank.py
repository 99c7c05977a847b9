import pytest

from managedesk.bank import AccountNotFoundError, Bank, main
from managedesk.bank_models import (
    Account,
    Customer,
    Employee,
    InsufficientFundsError,
    TransactionType,
)


@pytest.fixture
def bank():
    bank = Bank("Smart Bank")
    bank.add_customer(
        Customer("C1", "Ann", "ann@example.com", "555-0100", "1 Main St", 720)
    )
    bank.add_employee(
        Employee(
            "P1", "Bob", "bob@example.com", "555-0101", "2 Main St",
            "E1", "Teller", 3000.0, 2,
        )
    )
    bank.create_account(Account("A1", "C1", "Savings"))
    return bank


def _feed(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_deposit_through_bank(bank):
    transaction = bank.process_transaction("A1", 200.0, True)
    assert transaction.kind is TransactionType.DEPOSIT
    assert bank.accounts[0].balance == 200.0


def test_withdraw_through_bank(bank):
    bank.process_transaction("A1", 200.0, True)
    bank.process_transaction("A1", 50.0, False)
    assert bank.accounts[0].balance == 150.0


def test_overdraw_through_bank_raises(bank):
    with pytest.raises(InsufficientFundsError):
        bank.process_transaction("A1", 1.0, False)
    assert bank.accounts[0].balance == 0.0


def test_unknown_account_raises(bank):
    with pytest.raises(AccountNotFoundError) as info:
        bank.process_transaction("NOPE", 1.0, True)
    assert info.value.account_id == "NOPE"
    assert str(info.value) == "Account not found."


def test_first_matching_account_used(bank):
    duplicate = Account("A1", "C2", "Checking")
    bank.create_account(duplicate)
    bank.process_transaction("A1", 10.0, True)
    assert bank.accounts[0].balance == 10.0
    assert duplicate.balance == 0.0


def test_display_all_sections(bank):
    bank.process_transaction("A1", 75.0, True)
    lines = bank.display_all().splitlines()
    assert lines[0] == "Bank: Smart Bank"
    assert lines.index("Customers:") < lines.index("Employees:") < lines.index("Accounts:")
    assert "Customer ID: C1, Name: Ann, Email: ann@example.com" in lines
    assert bank.customers[0].display_details().splitlines()[0] in lines
    assert bank.employees[0].display_details() in lines
    assert lines[-1] == bank.accounts[0].transactions[0].display()


def test_display_all_skips_empty_histories(bank):
    lines = bank.display_all().splitlines()
    assert lines[-1] == "Accounts:"


def test_main_account_flow(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["3", "A1", "C1", "Savings", "4", "A1", "250", "5", "A1", "1000",
         "5", "ZZ", "1", "6", "0"],
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "✅ Account created successfully!" in out
    assert "Deposited: 250 to A1" in out
    assert "Insufficient balance." in out
    assert "Account not found." in out
    assert "on account A1" in out
    assert out.rstrip().endswith("👋 Exiting Smart Bank. Goodbye!")


def test_main_adds_people(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["1", "C1", "Ann", "ann@example.com", "555-0100", "1 Main St", "720",
         "2", "P1", "Bob", "bob@example.com", "555-0101", "2 Main St",
         "E1", "Teller", "3000", "2",
         "6", "0"],
    )
    main([])
    out = capsys.readouterr().out
    assert "✅ Customer added successfully!" in out
    assert "✅ Employee added successfully!" in out
    assert "Customer ID: C1, Name: Ann, Email: ann@example.com" in out
    assert "Employee ID: E1, Name: Bob, Position: Teller, Salary: 3000" in out


def test_main_invalid_choice(monkeypatch, capsys):
    _feed(monkeypatch, ["9", "abc", "0"])
    main([])
    out = capsys.readouterr().out
    assert out.count("❌ Invalid choice. Try again.") == 2


def test_main_ends_on_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, [])
    assert main([]) == 0
    assert "Goodbye!" in capsys.readouterr().out