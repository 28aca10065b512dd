import json
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Tuple

from spendboard.config import ALL_ACCOUNTS_COLOR, ALL_ACCOUNTS_ID
from spendboard.domain import BankAccount, Expense, TIME_MODES


def _account_from_json(a: dict) -> BankAccount:
    return BankAccount(
        id=a["id"],
        name=a["name"],
        last4=a.get("last4", ""),
        balance=Decimal(str(a["balance"])),
        color=a.get("color", ""),
    )


def _expense_from_json(e: dict) -> Expense:
    return Expense(
        id=str(e["id"]),
        description=e["description"],
        amount=Decimal(str(e["amount"])),
        category=e["category"],
        date=date.fromisoformat(e["date"]),
        bank_account_id=e["bank_account_id"],
    )


def load_seed(path: str) -> Tuple[Tuple[BankAccount, ...], Tuple[Expense, ...]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    accounts = tuple(_account_from_json(a) for a in data["accounts"])
    expenses = tuple(_expense_from_json(e) for e in data["expenses"])

    return accounts, expenses


def prepend_expense(
    expenses: Tuple[Expense, ...], e: Expense
) -> Tuple[Expense, ...]:
    return (e,) + expenses


def remove_expense(
    expenses: Tuple[Expense, ...], expense_id: str
) -> Tuple[Expense, ...]:
    return tuple(filter(lambda e: e.id != expense_id, expenses))


def recent_expenses(expenses: Tuple[Expense, ...], limit: int) -> Tuple[Expense, ...]:
    return expenses[: max(0, limit)]


def total_balance(accounts: Tuple[BankAccount, ...]) -> Decimal:
    return sum((a.balance for a in accounts), Decimal("0"))


def all_accounts_entry(accounts: Tuple[BankAccount, ...]) -> BankAccount:
    return BankAccount(
        id=ALL_ACCOUNTS_ID,
        name="All Accounts",
        last4="",
        balance=total_balance(accounts),
        color=ALL_ACCOUNTS_COLOR,
    )


def same_month(d: date, today: date) -> bool:
    return d.year == today.year and d.month == today.month


def by_account(account_id: str) -> Callable[[Expense], bool]:
    def _filter(e: Expense) -> bool:
        return e.bank_account_id == account_id

    return _filter


def by_month_of(today: date) -> Callable[[Expense], bool]:
    def _filter(e: Expense) -> bool:
        return same_month(e.date, today)

    return _filter


def filter_expenses(
    expenses: Tuple[Expense, ...],
    selected_account_id: Optional[str] = None,
    time_mode: str = "all",
    today: Optional[date] = None,
) -> Tuple[Expense, ...]:
    """Narrow the held expenses to the current selection.

    Only the "month" mode filters by time; "all", "average" and "category"
    pass everything through. ``today`` defaults to the wall clock.
    """
    if time_mode not in TIME_MODES:
        raise ValueError(f"Unknown time mode {time_mode!r}, expected one of {TIME_MODES}")

    result = expenses
    if selected_account_id:
        result = tuple(filter(by_account(selected_account_id), result))
    if time_mode == "month":
        result = tuple(filter(by_month_of(today or date.today()), result))
    return result
