"""University people and the interactive registry menu."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass


@dataclass
class Person(ABC):
    """Someone registered at the university."""

    person_id: str
    name: str
    email: str
    gender: str
    phone: str

    @abstractmethod
    def display_details(self):
        """Return a text description of this person."""


@dataclass
class Student(Person):
    """A student enrolled in a department at some level."""

    department: str
    level: int

    def display_details(self):
        return "\n".join(
            [
                "Student -- > ",
                f"Name: {self.name}",
                f"ID : {self.person_id}",
                f"Department: {self.department}",
                f"Level: {self.level}",
            ]
        )


@dataclass
class Professor(Person):
    """A professor with a specialization and years of experience."""

    specialization: str
    years_of_experience: int

    def display_details(self):
        return "\n".join(
            [
                "Professor",
                f"Name: {self.name}",
                f"ID: {self.person_id}",
                f"Specialization: {self.specialization}",
                f"Experience: {self.years_of_experience} years",
            ]
        )


@dataclass
class AdminStaff(Person):
    """A member of the administrative staff."""

    position: str

    def display_details(self):
        return "\n".join(
            [
                "Admin Staff",
                f"Name: {self.name}",
                f"ID: {self.person_id}",
                f"Position: {self.position}",
            ]
        )


class _Tokens:
    """Reads whitespace-separated words from standard input, one per prompt."""

    def __init__(self):
        self._pending = deque()

    def next(self, prompt):
        print(prompt, end="", flush=True)
        while not self._pending:
            self._pending.extend(input().split())
        return self._pending.popleft()

    def discard(self):
        self._pending.clear()


_MENU = (
    "1. Add Student",
    "2. Add Professor",
    "3. Add Admin Staff",
    "4. Display All People",
    "5. Exit",
)


def _read_common(tokens):
    return [
        tokens.next("Enter your ID : "),
        tokens.next("Enter your Name : "),
        tokens.next("Enter your Email : "),
        tokens.next("Enter your Gender : "),
        tokens.next("Enter your Phone : "),
    ]


def _add_student(tokens, people):
    common = _read_common(tokens)
    department = tokens.next("Enter your Department : ")
    level = int(tokens.next("Enter your Level : "))
    people["students"].append(Student(*common, department, level))
    print("✅ Student added...")
    print()


def _add_professor(tokens, people):
    common = _read_common(tokens)
    specialization = tokens.next("Enter your Specialization : ")
    years = int(tokens.next("Enter your Years : "))
    people["professors"].append(Professor(*common, specialization, years))
    print("✅ Professor added...")
    print()


def _add_admin(tokens, people):
    common = _read_common(tokens)
    position = tokens.next("Enter your Position : ")
    people["admins"].append(AdminStaff(*common, position))
    print("✅ Admin staff added...")
    print()


def _display_all(tokens, people):
    for title, key in (
        ("Students", "students"),
        ("Professors", "professors"),
        ("Admins", "admins"),
    ):
        print()
        print(f"===== {title} =====")
        for person in people[key]:
            print(person.display_details())
            print()


_ACTIONS = {
    1: _add_student,
    2: _add_professor,
    3: _add_admin,
    4: _display_all,
}


def main(argv=None):
    """Run the interactive university menu until the user exits."""
    argparse.ArgumentParser(
        prog="managedesk-university",
        description="Interactive university management menu.",
    ).parse_args(argv)
    people = {"students": [], "professors": [], "admins": []}
    tokens = _Tokens()
    try:
        while True:
            print("===== University Management System =====")
            print("\n".join(_MENU))
            raw = tokens.next("Choose an option: ")
            choice = int(raw) if raw.lstrip("-").isdigit() else None
            if choice == 5:
                print("👋 Exiting program. Goodbye!")
                break
            action = _ACTIONS.get(choice)
            if action is None:
                print("❌ Invalid option. Try again!")
                continue
            try:
                action(tokens, people)
            except ValueError:
                tokens.discard()
                print("❌ Invalid number. Try again.")
    except EOFError:
        pass
    return 0