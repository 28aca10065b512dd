from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TypeVar, Generic, Callable, Optional

from spendboard.config import MAX_AMOUNT
from spendboard.domain import BankAccount, CATEGORIES, Expense, NewExpense

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')

CENT = Decimal("0.01")


class Maybe(Generic[T]):
    """Optional value: Some(value) or Nothing()."""

    def is_none(self) -> bool:
        return not self.is_some()


class Some(Maybe[T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return Some(f(self._value))

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self._value)

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Some) and self._value == other._value


class Nothing(Maybe[T]):

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return self

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def is_some(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing()"

    def __eq__(self, other) -> bool:
        return isinstance(other, Nothing)


class Either(Generic[E, T]):
    """Result of a check: Right(value) on success, Left(error dict) otherwise."""

    def is_left(self) -> bool:
        return not self.is_right()


class Right(Either[E, T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> Either[E, U]:
        return Right(f(self._value))

    def bind(self, f: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return f(self._value)

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_right(self) -> bool:
        return True

    def get_error(self) -> E:
        raise ValueError("Right holds no error")

    def __repr__(self) -> str:
        return f"Right({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self._value == other._value


class Left(Either[E, T]):

    def __init__(self, error: E):
        self._error = error

    def map(self, f: Callable[[T], U]) -> Either[E, U]:
        return self

    def bind(self, f: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def is_right(self) -> bool:
        return False

    def get_error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Left({self._error!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self._error == other._error


def _invalid(field: str, message: str, **extra) -> Left:
    return Left({"error": "validation_failure", "field": field, "message": message, **extra})


def safe_account(accs: tuple[BankAccount, ...], acc_id: Optional[str]) -> Maybe[BankAccount]:
    for acc in accs:
        if acc.id == acc_id:
            return Some(acc)
    return Nothing()


def parse_amount(raw) -> Either[dict, Decimal]:
    """Parse user input into a non-negative, finite Decimal in whole cents."""
    if raw is None or isinstance(raw, bool):
        return _invalid("amount", "Amount is required", value=raw)
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return _invalid("amount", "Amount is required", value=raw)
    try:
        # floats go through str() so 12.5 stays Decimal("12.5")
        amount = Decimal(str(raw)) if isinstance(raw, float) else Decimal(raw)
    except (InvalidOperation, TypeError, ValueError):
        return _invalid("amount", f"Amount {raw!r} is not a number", value=raw)
    if not amount.is_finite():
        return _invalid("amount", f"Amount {raw!r} is not a finite number", value=raw)
    if amount < 0:
        return _invalid("amount", "Amount cannot be negative", value=raw)
    if amount > MAX_AMOUNT:
        return _invalid("amount", f"Amount cannot exceed {MAX_AMOUNT}", value=raw)
    if amount != amount.quantize(CENT):
        return _invalid("amount", "Amount cannot have fractions of a cent", value=raw)
    return Right(amount)


def parse_date(raw, today: Optional[date] = None) -> Either[dict, date]:
    if raw is None or raw == "":
        return Right(today or date.today())
    if isinstance(raw, datetime):
        return Right(raw.date())
    if isinstance(raw, date):
        return Right(raw)
    try:
        return Right(date.fromisoformat(str(raw).strip()))
    except ValueError:
        return _invalid("date", f"Date {raw!r} is not an ISO date (YYYY-MM-DD)", value=raw)


def validate_new_expense(
    draft: NewExpense, today: Optional[date] = None
) -> Either[dict, NewExpense]:
    """Check a draft and return it normalised (Decimal amount, date object).

    Account ids are deliberately not checked: a dangling account simply
    never matches a filter.
    """
    description = (draft.description or "").strip()
    if not description:
        return _invalid("description", "Description is required")

    if draft.category not in CATEGORIES:
        return _invalid(
            "category",
            f"Unknown category {draft.category!r}",
            value=draft.category,
        )

    return parse_amount(draft.amount).bind(
        lambda amount: parse_date(draft.date, today).map(
            lambda when: NewExpense(
                description=description,
                amount=amount,
                category=draft.category,
                bank_account_id=draft.bank_account_id,
                date=when,
            )
        )
    )


def to_expense(expense_id: str, draft: NewExpense) -> Expense:
    return Expense(
        id=expense_id,
        description=draft.description,
        amount=draft.amount,
        category=draft.category,
        date=draft.date,
        bank_account_id=draft.bank_account_id,
    )
