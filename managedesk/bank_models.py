"""People, accounts and transactions of the bank."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from managedesk.formatting import format_number

_transaction_numbers = itertools.count(1)


def _next_transaction_id():
    return f"TXN{next(_transaction_numbers)}"


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the account balance."""

    def __init__(self, account_id, balance, amount):
        super().__init__("Insufficient balance.")
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


@dataclass
class Person(ABC):
    """Someone known to the bank."""

    person_id: str
    name: str
    email: str
    phone: str
    address: str

    @abstractmethod
    def display_details(self):
        """Return a text description of this person."""


@dataclass
class Customer(Person):
    """A bank customer with a credit score and a list of account ids."""

    credit_score: int
    accounts: list = field(default_factory=list)

    def open_account(self, account_id):
        self.accounts.append(account_id)

    def view_account_details(self):
        lines = [f"Accounts for {self.name}:"]
        lines.extend(f" - {account}" for account in self.accounts)
        return "\n".join(lines)

    def request_loan(self):
        return f"Loan requested by {self.name} with credit score: {self.credit_score}"

    def display_details(self):
        header = (
            f"Customer ID: {self.person_id}, Name: {self.name}, Email: {self.email}"
        )
        return f"{header}\n{self.view_account_details()}"


@dataclass
class Employee(Person):
    """A member of the bank's staff."""

    employee_id: str
    position: str
    salary: float
    access_level: int

    def approve_loan(self):
        return f"Employee {self.name} approved a loan."

    def manage_customer(self):
        return "Managing customer records..."

    def view_transactions(self):
        return "Viewing transaction history..."

    def display_details(self):
        return (
            f"Employee ID: {self.employee_id}, Name: {self.name}, "
            f"Position: {self.position}, Salary: {format_number(self.salary)}"
        )


class TransactionType(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


@dataclass(frozen=True)
class Transaction:
    """A single movement of money on an account."""

    account_id: str
    kind: TransactionType
    amount: float
    transaction_id: str = field(default_factory=_next_transaction_id)

    def display(self):
        return (
            f"Transaction [{self.transaction_id}] {self.kind.value} of "
            f"{format_number(self.amount)} on account {self.account_id}"
        )


@dataclass
class Account:
    """An account holding a balance and its transaction history."""

    account_id: str
    customer_id: str
    account_type: str
    balance: float = field(default=0.0, init=False)
    transactions: list = field(default_factory=list, init=False)

    def deposit(self, amount):
        """Add money and return the recorded transaction."""
        self.balance += amount
        transaction = Transaction(self.account_id, TransactionType.DEPOSIT, amount)
        self.transactions.append(transaction)
        return transaction

    def withdraw(self, amount):
        """Take money out and return the recorded transaction.

        Raises InsufficientFundsError when the balance is too small.
        """
        if self.balance < amount:
            raise InsufficientFundsError(self.account_id, self.balance, amount)
        self.balance -= amount
        transaction = Transaction(self.account_id, TransactionType.WITHDRAWAL, amount)
        self.transactions.append(transaction)
        return transaction

    def display_transaction_history(self):
        return "\n".join(t.display() for t in self.transactions)