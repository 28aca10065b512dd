import logging
import time
from datetime import date
from typing import Callable, Iterable, Optional, Tuple

from spendboard.domain import Expense, NewExpense
from spendboard.events import EventBus, EXPENSE_ADDED, EXPENSE_DELETED, EXPENSE_REJECTED
from spendboard.functional import Either, Right, to_expense, validate_new_expense
from spendboard.transforms import prepend_expense, remove_expense

logger = logging.getLogger(__name__)


def millisecond_ids(clock: Callable[[], float] = time.time) -> Callable[[set], str]:
    """Id factory based on epoch milliseconds.

    Two adds within the same millisecond would collide, so the factory
    steps forward to the next integer not already held.
    """
    def _next_id(taken: set) -> str:
        candidate = int(clock() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    return _next_id


class ExpenseStore:
    """Owns the expense collection; add and delete are the only mutations.

    Every mutation publishes on ``bus`` so the dashboard can re-render.
    """

    def __init__(
        self,
        expenses: Iterable[Expense] = (),
        bus: Optional[EventBus] = None,
        id_factory: Optional[Callable[[set], str]] = None,
    ):
        self._expenses: Tuple[Expense, ...] = tuple(expenses)
        self.bus = bus if bus is not None else EventBus()
        self._next_id = id_factory or millisecond_ids()

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return self._expenses

    def __len__(self) -> int:
        return len(self._expenses)

    def get(self, expense_id: str) -> Optional[Expense]:
        return next((e for e in self._expenses if e.id == expense_id), None)

    def add(self, draft: NewExpense, today: Optional[date] = None) -> Either[dict, Expense]:
        checked = validate_new_expense(draft, today)
        if checked.is_left():
            error = checked.get_error()
            logger.warning("Rejected expense: %s", error["message"])
            self.bus.publish(EXPENSE_REJECTED, error)
            return checked

        valid = checked.get_or_else(None)
        expense = to_expense(self._next_id({e.id for e in self._expenses}), valid)
        self._expenses = prepend_expense(self._expenses, expense)
        logger.info(
            "Added expense %s (%s %s) to account %s",
            expense.id, expense.category, expense.amount, expense.bank_account_id,
        )
        self.bus.publish(EXPENSE_ADDED, {"expense": expense, "count": len(self._expenses)})
        return Right(expense)

    def add_expense(
        self,
        description: str,
        amount,
        category: str,
        bank_account_id: str,
        when=None,
        today: Optional[date] = None,
    ) -> Either[dict, Expense]:
        return self.add(
            NewExpense(
                description=description,
                amount=amount,
                category=category,
                bank_account_id=bank_account_id,
                date=when,
            ),
            today,
        )

    def delete(self, expense_id: str) -> None:
        removed = self.get(expense_id)
        if removed is None:
            logger.debug("Delete of unknown expense %s ignored", expense_id)
            return
        self._expenses = remove_expense(self._expenses, expense_id)
        logger.info("Deleted expense %s", expense_id)
        self.bus.publish(EXPENSE_DELETED, {"expense": removed, "count": len(self._expenses)})
