"""The library and its interactive menu."""

from __future__ import annotations

import argparse
import time

from managedesk.library_models import (
    Book,
    Librarian,
    Member,
    Transaction,
    TransactionType,
)

DUE_DATE = "1 week later"


class BorrowError(LookupError):
    """Raised when a book cannot be lent to a member."""

    def __init__(self, book_id, member_id):
        super().__init__("Borrow failed (book not available or member not found).")
        self.book_id = book_id
        self.member_id = member_id


class ReturnError(LookupError):
    """Raised when a book cannot be taken back from a member."""

    def __init__(self, book_id, member_id):
        super().__init__("Return failed (book not found or wasn't borrowed).")
        self.book_id = book_id
        self.member_id = member_id


def _last_match(items, predicate):
    found = None
    for item in items:
        if predicate(item):
            found = item
    return found


class Library:
    """Holds members, librarians, books and the transaction log."""

    def __init__(self, name, clock=time.ctime):
        self.name = name
        self.members = []
        self.librarians = []
        self.books = []
        self.transactions = []
        self._clock = clock

    def add_member(self, member):
        self.members.append(member)

    def add_librarian(self, librarian):
        self.librarians.append(librarian)

    def add_book(self, book):
        self.books.append(book)

    def _lookup(self, book_id, member_id):
        # The last entry with a matching id wins; a member must be a Member.
        book = _last_match(self.books, lambda b: b.book_id == book_id)
        person = _last_match(self.members, lambda p: p.person_id == member_id)
        member = person if isinstance(person, Member) else None
        return book, member

    def process_borrow(self, book_id, member_id):
        """Lend the book to the member and return the recorded transaction."""
        book, member = self._lookup(book_id, member_id)
        if book is None or member is None or not book.is_available:
            raise BorrowError(book_id, member_id)
        book.update_availability(False, member_id)
        member.borrow_book(book_id)
        transaction = Transaction(
            book_id, member_id, TransactionType.BORROW, self._clock(), DUE_DATE
        )
        self.transactions.append(transaction)
        return transaction

    def process_return(self, book_id, member_id):
        """Take the book back from the member and return the recorded transaction."""
        book, member = self._lookup(book_id, member_id)
        if book is None or member is None or not member.has_book(book_id):
            raise ReturnError(book_id, member_id)
        book.update_availability(True)
        member.return_book(book_id)
        transaction = Transaction(
            book_id, member_id, TransactionType.RETURN, self._clock()
        )
        self.transactions.append(transaction)
        return transaction

    def display_inventory(self):
        lines = ["Library Inventory:"]
        lines.extend(book.display_book_info() for book in self.books)
        return "\n".join(lines)

    def display_all_transactions(self):
        lines = ["All Transactions:"]
        lines.extend(t.display_transaction_details() for t in self.transactions)
        return "\n".join(lines)


_MENU = (
    "1. Add Member",
    "2. Add Librarian",
    "3. Add Book",
    "4. Borrow Book",
    "5. Return Book",
    "6. Display Inventory",
    "7. Display Transactions",
    "0. Exit",
)


def _add_member(library):
    person_id = input("Enter ID: ")
    name = input("Enter Name: ")
    email = input("Enter Email: ")
    phone = input("Enter Phone: ")
    address = input("Enter Address: ")
    membership_id = input("Enter Membership ID: ")
    library.add_member(Member(person_id, name, email, phone, address, membership_id))
    print("✅ Member added successfully!")


def _add_librarian(library):
    person_id = input("Enter ID: ")
    name = input("Enter Name: ")
    email = input("Enter Email: ")
    phone = input("Enter Phone: ")
    address = input("Enter Address: ")
    employee_id = input("Enter Employee ID: ")
    role = input("Enter Role: ")
    salary = float(input("Enter Salary: ").strip())
    access_level = int(input("Enter Access Level: ").strip())
    library.add_librarian(
        Librarian(
            person_id, name, email, phone, address,
            employee_id, role, salary, access_level,
        )
    )
    print("✅ Librarian added successfully!")


def _add_book(library):
    book_id = input("Enter Book ID: ")
    title = input("Enter Title: ")
    author = input("Enter Author: ")
    isbn = input("Enter ISBN: ")
    library.add_book(Book(book_id, title, author, isbn))
    print("✅ Book added successfully!")


def _borrow(library):
    book_id = input("Enter Book ID: ")
    member_id = input("Enter Member ID: ")
    try:
        library.process_borrow(book_id, member_id)
    except BorrowError as exc:
        print(exc)
        return
    print("Book borrowed successfully!")


def _return(library):
    book_id = input("Enter Book ID: ")
    member_id = input("Enter Member ID: ")
    try:
        library.process_return(book_id, member_id)
    except ReturnError as exc:
        print(exc)
        return
    print("Book returned successfully!")


_ACTIONS = {
    1: _add_member,
    2: _add_librarian,
    3: _add_book,
    4: _borrow,
    5: _return,
    6: lambda library: print(library.display_inventory()),
    7: lambda library: print(library.display_all_transactions()),
}


def main(argv=None):
    """Run the interactive library menu until the user exits."""
    argparse.ArgumentParser(
        prog="managedesk-library", description="Interactive library management menu."
    ).parse_args(argv)
    library = Library("Minia University Library")
    try:
        while True:
            print()
            print("========= Library System =========")
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
                action(library)
            except ValueError:
                print("❌ Invalid number. Try again.")
    except EOFError:
        pass
    print("👋 Exiting Library System. Goodbye!")
    return 0