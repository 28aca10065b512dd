from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Union

CATEGORIES = (
    "Food",
    "Transportation",
    "Utilities",
    "Entertainment",
    "Health",
    "Education",
    "Shopping",
    "Other",
)

# only "month" narrows the view, the others just pick the highlighted card
TIME_MODES = ("all", "month", "average", "category")


@dataclass(frozen=True)
class BankAccount:
    id: str
    name: str
    last4: str        # masked digits, display only
    balance: Decimal  # never debited by expenses
    color: str


@dataclass(frozen=True)
class Expense:
    id: str
    description: str
    amount: Decimal
    category: str
    date: date
    bank_account_id: str  # not checked against the registry


# Raw input for a new expense, before validation and id assignment
@dataclass(frozen=True)
class NewExpense:
    description: str
    amount: Union[str, int, float, Decimal, None]
    category: str = "Food"
    bank_account_id: str = "chase"
    date: Union[date, str, None] = None
