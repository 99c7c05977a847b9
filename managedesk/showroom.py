"""The car showroom and its interactive menu."""

from __future__ import annotations

import argparse
import time

from managedesk.showroom_models import Car, Customer, Employee, Sale


class CarUnavailableError(LookupError):
    """Raised when the car is unknown or has already been sold."""

    def __init__(self, car_id):
        super().__init__("Car not found or already sold.")
        self.car_id = car_id


class InvalidPartyError(LookupError):
    """Raised when the customer or employee of a sale cannot be found."""

    def __init__(self, customer_id, employee_id):
        super().__init__("Invalid customer or employee ID.")
        self.customer_id = customer_id
        self.employee_id = employee_id


def _find_party(people, kind, person_id):
    # The last person with this id decides, and must be of the expected kind.
    found = None
    for person in people:
        if person.person_id == person_id:
            found = person if isinstance(person, kind) else None
    return found


class Showroom:
    """Holds customers, employees, the car inventory and the sales."""

    def __init__(self, name, clock=time.ctime):
        self.name = name
        self.customers = []
        self.employees = []
        self.cars = []
        self.sales = []
        self._clock = clock

    def add_customer(self, customer):
        self.customers.append(customer)

    def add_employee(self, employee):
        self.employees.append(employee)

    def add_car(self, car):
        self.cars.append(car)

    def process_sale(self, car_id, customer_id, employee_id):
        """Sell the first unsold car with this id and return the recorded sale."""
        car = next(
            (c for c in self.cars if c.car_id == car_id and not c.is_sold), None
        )
        if car is None:
            raise CarUnavailableError(car_id)
        customer = _find_party(self.customers, Customer, customer_id)
        employee = _find_party(self.employees, Employee, employee_id)
        if customer is None or employee is None:
            raise InvalidPartyError(customer_id, employee_id)

        sale_id = f"S{len(self.sales) + 1}"
        sale_date = self._clock()
        car.mark_as_sold()
        customer.buy_car(car_id)
        # The car is already marked sold here, so the price recorded is zero.
        sale_price = 0.0 if car.is_sold else car.price
        sale = Sale(sale_id, car_id, customer_id, employee_id, sale_price, sale_date)
        self.sales.append(sale)
        return sale

    def display_inventory(self):
        lines = ["Available Cars:"]
        lines.extend(car.display_car_info() for car in self.cars if not car.is_sold)
        return "\n".join(lines)

    def display_all_sales(self):
        lines = ["All Sales:"]
        lines.extend(sale.display_sale_details() for sale in self.sales)
        return "\n".join(lines)


_MENU = (
    "1. Add Customer",
    "2. Add Employee",
    "3. Add Car to Inventory",
    "4. Process Car Sale",
    "5. View Available Cars",
    "6. View All Sales",
    "0. Exit",
)


def _add_customer(showroom):
    person_id = input("Enter ID: ")
    name = input("Enter Name: ")
    email = input("Enter Email: ")
    phone = input("Enter Phone: ")
    address = input("Enter Address: ")
    credit_limit = float(input("Enter Credit Limit: ").strip())
    showroom.add_customer(Customer(person_id, name, email, phone, address, credit_limit))
    print("✅ Customer added.")


def _add_employee(showroom):
    person_id = input("Enter ID: ")
    name = input("Enter Name: ")
    email = input("Enter Email: ")
    phone = input("Enter Phone: ")
    address = input("Enter Address: ")
    employee_id = input("Enter Employee ID: ")
    role = input("Enter Role: ")
    salary = float(input("Enter Salary: ").strip())
    access_level = int(input("Enter Access Level (0 or 1): ").strip())
    showroom.add_employee(
        Employee(
            person_id, name, email, phone, address,
            employee_id, role, salary, access_level,
        )
    )
    print("✅ Employee added.")


def _add_car(showroom):
    car_id = input("Enter Car ID: ")
    brand = input("Enter Brand: ")
    model = input("Enter Model: ")
    year = int(input("Enter Year: ").strip())
    price = float(input("Enter Price: ").strip())
    showroom.add_car(Car(car_id, brand, model, year, price))
    print("✅ Car added to inventory.")


def _process_sale(showroom):
    car_id = input("Enter Car ID to sell: ")
    customer_id = input("Enter Customer ID: ")
    employee_id = input("Enter Employee ID: ")
    try:
        sale = showroom.process_sale(car_id, customer_id, employee_id)
    except (CarUnavailableError, InvalidPartyError) as exc:
        print(f"❌ {exc}")
        return
    seller = _find_party(showroom.employees, Employee, sale.employee_id)
    print(seller.sell_car())
    print("✅ Sale recorded successfully.")


def _show_inventory(showroom):
    print()
    print(showroom.display_inventory())


def _show_sales(showroom):
    print()
    print(showroom.display_all_sales())


_ACTIONS = {
    1: _add_customer,
    2: _add_employee,
    3: _add_car,
    4: _process_sale,
    5: _show_inventory,
    6: _show_sales,
}


def main(argv=None):
    """Run the interactive showroom menu until the user exits."""
    argparse.ArgumentParser(
        prog="managedesk-showroom",
        description="Interactive car showroom management menu.",
    ).parse_args(argv)
    showroom = Showroom("AutoMax")
    try:
        while True:
            print()
            print("========== Car Showroom Management ==========")
            print("\n".join(_MENU))
            raw = input("Choose an option: ").strip()
            choice = int(raw) if raw.lstrip("-").isdigit() else None
            if choice == 0:
                print("👋 Exiting system.")
                break
            action = _ACTIONS.get(choice)
            if action is None:
                print("❌ Invalid choice. Try again.")
                continue
            try:
                action(showroom)
            except ValueError:
                print("❌ Invalid number. Try again.")
    except EOFError:
        pass
    return 0