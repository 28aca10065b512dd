from datetime import date
from typing import Optional, Tuple

from spendboard import analytics
from spendboard.config import TOP_N
from spendboard.domain import BankAccount, Expense
from spendboard.functional import safe_account
from spendboard.store import ExpenseStore
from spendboard.transforms import all_accounts_entry, filter_expenses


class DashboardService:
    """Facade the dashboard talks to: filtering plus derived analytics.

    Nothing is cached; each call recomputes from the store's current state.
    """

    def __init__(self, store: ExpenseStore, accounts: Tuple[BankAccount, ...]):
        self.store = store
        self.accounts = accounts

    def account_cards(self) -> Tuple[BankAccount, ...]:
        return (all_accounts_entry(self.accounts),) + self.accounts

    def account_name(self, account_id: str) -> str:
        return safe_account(self.accounts, account_id).map(lambda a: a.name).get_or_else(account_id)

    def filtered_expenses(
        self,
        selected_account_id: Optional[str] = None,
        time_mode: str = "all",
        today: Optional[date] = None,
    ) -> Tuple[Expense, ...]:
        return filter_expenses(self.store.expenses, selected_account_id, time_mode, today)

    def summary(self, expenses: Tuple[Expense, ...], today: Optional[date] = None) -> analytics.Summary:
        return analytics.compute_summary(expenses, today)

    def series(self, expenses: Tuple[Expense, ...]) -> analytics.Series:
        return analytics.compute_series(expenses, TOP_N)
