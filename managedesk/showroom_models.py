"""People, cars and sales of the car showroom."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from managedesk.formatting import format_number


@dataclass
class Person(ABC):
    """Someone known to the showroom."""

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
    """A buyer with a credit limit and the ids of the cars bought."""

    credit_limit: float
    purchased_cars: list = field(default_factory=list)

    def buy_car(self, car_id):
        self.purchased_cars.append(car_id)

    def view_purchase_history(self):
        lines = [f"Purchase history for {self.name}:"]
        lines.extend(f" - {car_id}" for car_id in self.purchased_cars)
        return "\n".join(lines)

    def request_financing(self):
        return f"Requested financing up to: {format_number(self.credit_limit)}"

    def display_details(self):
        header = (
            f"Customer: {self.name} | Email: {self.email} | "
            f"Credit Limit: {format_number(self.credit_limit)}"
        )
        return f"{header}\n{self.view_purchase_history()}"


@dataclass
class Employee(Person):
    """A member of the showroom's staff."""

    employee_id: str
    role: str
    salary: float
    access_level: int

    def sell_car(self):
        return f"{self.name} sold a car."

    def add_car_to_inventory(self):
        """Return a note of the addition; raise PermissionError below level 1."""
        if self.access_level < 1:
            raise PermissionError("Access denied.")
        return f"{self.name} added a car to inventory."

    def view_sales_report(self):
        return f"Sales report viewed by {self.name}"

    def display_details(self):
        return (
            f"Employee: {self.name} | Role: {self.role} | "
            f"Salary: {format_number(self.salary)}"
        )


@dataclass
class Car:
    """A car in the inventory."""

    car_id: str
    brand: str
    model: str
    year: int
    price: float
    is_sold: bool = field(default=False, init=False)

    def update_price(self, new_price):
        self.price = new_price

    def mark_as_sold(self):
        self.is_sold = True

    def display_car_info(self):
        status = "Sold" if self.is_sold else "Available"
        return (
            f"Car: {self.brand} {self.model} | Year: {self.year} | "
            f"Price: {format_number(self.price)} | Status: {status}"
        )


@dataclass(frozen=True)
class Sale:
    """A recorded sale of one car."""

    sale_id: str
    car_id: str
    customer_id: str
    employee_id: str
    sale_price: float
    sale_date: str

    def display_sale_details(self):
        return (
            f"Sale ID: {self.sale_id} | Car ID: {self.car_id} | "
            f"Customer ID: {self.customer_id} | Employee ID: {self.employee_id} | "
            f"Price: {format_number(self.sale_price)} | Date: {self.sale_date}"
        )