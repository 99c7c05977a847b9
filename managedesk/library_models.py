"""People, books and transactions of the library."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from managedesk.formatting import format_number

_transaction_numbers = itertools.count(1)


def _next_transaction_id():
    return f"TX{next(_transaction_numbers)}"


@dataclass
class Person(ABC):
    """Someone known to the library."""

    person_id: str
    name: str
    email: str
    phone: str
    address: str

    @abstractmethod
    def display_details(self):
        """Return a text description of this person."""


@dataclass
class Member(Person):
    """A library member with borrowed books and an outstanding fine."""

    membership_id: str
    borrowed_books: list = field(default_factory=list, init=False)
    fine_amount: float = field(default=0.0, init=False)

    def borrow_book(self, book_id):
        self.borrowed_books.append(book_id)

    def return_book(self, book_id):
        """Drop every occurrence of the book id from the borrowed list."""
        self.borrowed_books = [b for b in self.borrowed_books if b != book_id]

    def view_borrowed_books(self):
        lines = [f"Borrowed books by {self.name}:"]
        lines.extend(f" - {book}" for book in self.borrowed_books)
        return "\n".join(lines)

    def pay_fine(self, amount):
        """Reduce the fine, never below zero, and return a receipt line."""
        self.fine_amount = max(self.fine_amount - amount, 0.0)
        return (
            f"Fine paid: {format_number(amount)}. "
            f"Remaining fine: {format_number(self.fine_amount)}"
        )

    def display_details(self):
        header = (
            f"Member ID: {self.person_id}, Name: {self.name}, "
            f"Membership ID: {self.membership_id}, "
            f"Fine: {format_number(self.fine_amount)}"
        )
        return f"{header}\n{self.view_borrowed_books()}"

    def has_book(self, book_id):
        return book_id in self.borrowed_books


@dataclass
class Librarian(Person):
    """A member of the library's staff."""

    employee_id: str
    role: str
    salary: float
    access_level: int

    def display_details(self):
        return (
            f"Librarian ID: {self.person_id}, Name: {self.name}, "
            f"Role: {self.role}, Salary: {format_number(self.salary)}"
        )


@dataclass
class Book:
    """A book in the inventory and who, if anyone, has borrowed it."""

    book_id: str
    title: str
    author: str
    isbn: str
    is_available: bool = field(default=True, init=False)
    borrowed_by: str = field(default="", init=False)

    def update_availability(self, available, member_id=""):
        self.is_available = available
        self.borrowed_by = "" if available else member_id

    def display_book_info(self):
        available = "Yes" if self.is_available else "No"
        return (
            f"Book [{self.book_id}] Title: {self.title}, Author: {self.author}, "
            f"ISBN: {self.isbn}, Available: {available}"
        )


class TransactionType(str, Enum):
    BORROW = "Borrow"
    RETURN = "Return"


@dataclass(frozen=True)
class Transaction:
    """A borrow or return of one book by one member."""

    book_id: str
    member_id: str
    kind: TransactionType
    date: str
    due_date: str = ""
    transaction_id: str = field(default_factory=_next_transaction_id)

    def display_transaction_details(self):
        text = (
            f"Transaction [{self.transaction_id}] {self.kind.value} "
            f"Book: {self.book_id}, Member: {self.member_id}, Date: {self.date}"
        )
        if self.kind is TransactionType.BORROW:
            text += f", Due: {self.due_date}"
        return text