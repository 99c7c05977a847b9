"""The bank and its interactive menu."""

from __future__ import annotations

import argparse

from managedesk.bank_models import (
    Account,
    Customer,
    Employee,
    InsufficientFundsError,
)
from managedesk.formatting import format_number


class AccountNotFoundError(LookupError):
    """Raised when no account carries the requested id."""

    def __init__(self, account_id):
        super().__init__("Account not found.")
        self.account_id = account_id


class Bank:
    """Holds customers, employees and accounts."""

    def __init__(self, name):
        self.name = name
        self.customers = []
        self.employees = []
        self.accounts = []

    def add_customer(self, customer):
        self.customers.append(customer)

    def add_employee(self, employee):
        self.employees.append(employee)

    def create_account(self, account):
        self.accounts.append(account)

    def _find_account(self, account_id):
        account = next((a for a in self.accounts if a.account_id == account_id), None)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def process_transaction(self, account_id, amount, is_deposit):
        """Deposit to or withdraw from the first account with this id."""
        account = self._find_account(account_id)
        if is_deposit:
            return account.deposit(amount)
        return account.withdraw(amount)

    def display_all(self):
        lines = [f"Bank: {self.name}", "", "Customers:"]
        lines.extend(c.display_details() for c in self.customers)
        lines.extend(["", "Employees:"])
        lines.extend(e.display_details() for e in self.employees)
        lines.extend(["", "Accounts:"])
        lines.extend(
            history
            for history in (a.display_transaction_history() for a in self.accounts)
            if history
        )
        return "\n".join(lines)


_MENU = (
    "1. Add Customer",
    "2. Add Employee",
    "3. Create Account",
    "4. Deposit",
    "5. Withdraw",
    "6. Display All",
    "0. Exit",
)


def _add_customer(bank):
    person_id = input("Enter ID: ")
    name = input("Enter Name: ")
    email = input("Enter Email: ")
    phone = input("Enter Phone: ")
    address = input("Enter Address: ")
    credit_score = int(input("Enter Credit Score: ").strip())
    bank.add_customer(Customer(person_id, name, email, phone, address, credit_score))
    print("✅ Customer added successfully!")


def _add_employee(bank):
    person_id = input("Enter ID: ")
    name = input("Enter Name: ")
    email = input("Enter Email: ")
    phone = input("Enter Phone: ")
    address = input("Enter Address: ")
    employee_id = input("Enter Employee ID: ")
    position = input("Enter Position: ")
    salary = float(input("Enter Salary: ").strip())
    access_level = int(input("Enter Access Level: ").strip())
    bank.add_employee(
        Employee(
            person_id, name, email, phone, address,
            employee_id, position, salary, access_level,
        )
    )
    print("✅ Employee added successfully!")


def _create_account(bank):
    account_id = input("Enter Account ID: ")
    customer_id = input("Enter Customer ID: ")
    account_type = input("Enter Account Type: ")
    bank.create_account(Account(account_id, customer_id, account_type))
    print("✅ Account created successfully!")


def _transact(bank, is_deposit):
    account_id = input("Enter Account ID: ")
    amount = float(input("Enter Amount: ").strip())
    try:
        bank.process_transaction(account_id, amount, is_deposit)
    except (AccountNotFoundError, InsufficientFundsError) as exc:
        print(exc)
        return
    if is_deposit:
        print(f"Deposited: {format_number(amount)} to {account_id}")
    else:
        print(f"Withdrawn: {format_number(amount)} from {account_id}")


_ACTIONS = {
    1: _add_customer,
    2: _add_employee,
    3: _create_account,
    4: lambda bank: _transact(bank, True),
    5: lambda bank: _transact(bank, False),
    6: lambda bank: print(bank.display_all()),
}


def main(argv=None):
    """Run the interactive bank menu until the user exits."""
    argparse.ArgumentParser(
        prog="managedesk-bank", description="Interactive bank management menu."
    ).parse_args(argv)
    bank = Bank("Smart Bank")
    try:
        while True:
            print()
            print("========= Smart Bank System =========")
            print("\n".join(_MENU))
            raw = input("Choose an option: ").strip()
            choice = int(raw) if raw.lstrip("-").isdigit() else None
            if choice == 0:
                break
            action = _ACTIONS.get(choice)
            if action is None:
                print("❌ Invalid choice. Try again.")
                continue
            try:
                action(bank)
            except ValueError:
                print("❌ Invalid number. Try again.")
    except EOFError:
        pass
    print("👋 Exiting Smart Bank. Goodbye!")
    return 0