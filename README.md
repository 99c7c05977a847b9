# managedesk

managedesk gives you four small record-keeping desks that run in a terminal:

- **Bank**: register customers and employees, open accounts, deposit and withdraw,
  and list everything together with each account's transaction history.
- **Car showroom**: register customers and employees, add cars to the inventory,
  record sales, and list the cars still available and all sales made.
- **Library**: register members and librarians, add books, lend and take back
  books, and list the inventory and every transaction.
- **University**: register students, professors and administrative staff, and list
  them all.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running a desk

```
managedesk-bank
managedesk-showroom
managedesk-library
managedesk-university
```

Each desk is a numbered menu. Type the number of an option and answer the prompts.
Choose `0` to leave (`5` at the university desk); the desks also stop when input
ends. An option that is not on the menu is reported as an invalid choice, and a
number prompt answered with something that is not a number abandons that entry
and returns to the menu.

The bank, showroom and library desks read one answer per line, so names and
addresses may contain spaces. The university desk reads one word per prompt, so
each answer there must be a single word.

## Using the desks from Python

The same records can be kept from your own code. The report methods
(`display_all`, `display_inventory`, `display_all_sales`,
`display_all_transactions`, `display_details` and the like) return text rather
than printing it, and failures raise exceptions:

- `managedesk.bank.Bank.process_transaction` raises `AccountNotFoundError` for an
  unknown account, and `managedesk.bank_models.Account.withdraw` raises
  `InsufficientFundsError` when the balance is too low. Both deposits and
  withdrawals return the recorded `Transaction`.
- `managedesk.showroom.Showroom.process_sale` raises `CarUnavailableError` when the
  car is unknown or already sold, and `InvalidPartyError` when the customer or
  employee is unknown. It returns the recorded `Sale`; the price stored on a sale
  is always 0.
- `managedesk.showroom_models.Employee.add_car_to_inventory` raises
  `PermissionError` for an employee whose access level is below 1.
- `managedesk.library.Library.process_borrow` raises `BorrowError`, and
  `process_return` raises `ReturnError`, when the operation cannot be carried out.
  Both return the recorded `Transaction`; a borrow is always due "1 week later".

`Showroom` and `Library` take an optional `clock` argument, a function returning
the date text stored on sales and transactions; it defaults to `time.ctime`.

```python
from managedesk.bank import AccountNotFoundError, Bank
from managedesk.bank_models import Account, Customer, InsufficientFundsError

bank = Bank("Smart Bank")
bank.add_customer(Customer("C-1", "Ada", "ada@example.com", "000", "1 Main St", 700))
bank.create_account(Account("ACC-1", "C-1", "Savings"))
bank.process_transaction("ACC-1", 250, True)

try:
    bank.process_transaction("ACC-1", 1000, False)
except InsufficientFundsError:
    print("Not enough money on ACC-1")

try:
    bank.process_transaction("ACC-9", 10, True)
except AccountNotFoundError:
    print("No such account")

print(bank.display_all())
```

The university desk has no registry class: `managedesk.university` provides the
`Student`, `Professor` and `AdminStaff` records, and its menu keeps them in lists
for the session.

Every desk's `main` function can also be called directly, for instance
`managedesk.library.main()`, to start its interactive menu.

## What the desks do not do

Records live only in memory for the length of a session; nothing is saved to or
loaded from disk. There is no editing or removing of records once entered, and no
search beyond the look-ups by id that the operations above perform.