from collections import defaultdict
from datetime import date
from decimal import Decimal
from itertools import islice
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from spendboard.config import NOT_AVAILABLE, TOP_N
from spendboard.domain import Expense
from spendboard.transforms import same_month

ZERO = Decimal("0")


class Summary(NamedTuple):
    total: Decimal
    monthly_total: Decimal
    average: Decimal
    top_category: str


class Series(NamedTuple):
    category_totals: Dict[str, Decimal]
    daily_trend: List[Tuple[str, Decimal]]
    top_expenses: List[Expense]
    category_ranking: List[Tuple[str, Decimal]]


def total(expenses: Iterable[Expense]) -> Decimal:
    return sum((e.amount for e in expenses), ZERO)


def monthly_total(expenses: Iterable[Expense], today: Optional[date] = None) -> Decimal:
    today = today or date.today()
    return total(e for e in expenses if same_month(e.date, today))


def average(expenses: Tuple[Expense, ...]) -> Decimal:
    if not expenses:
        return ZERO
    return total(expenses) / len(expenses)


def category_totals(expenses: Iterable[Expense]) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for e in expenses:
        totals[e.category] += e.amount
    return dict(totals)


def category_ranking(expenses: Iterable[Expense]) -> List[Tuple[str, Decimal]]:
    # sorted() is stable, so equal totals keep first-seen order
    return sorted(category_totals(expenses).items(), key=lambda item: item[1], reverse=True)


def top_category(expenses: Iterable[Expense]) -> str:
    ranking = category_ranking(expenses)
    return ranking[0][0] if ranking else NOT_AVAILABLE


def daily_trend(expenses: Iterable[Expense]) -> List[Tuple[str, Decimal]]:
    """Sum amounts per month/day, sorted by (month, day).

    The year is not part of the key: 2024-03-15 and 2025-03-15 share "3/15".
    """
    by_day: Dict[Tuple[int, int], Decimal] = defaultdict(lambda: ZERO)
    for e in expenses:
        by_day[(e.date.month, e.date.day)] += e.amount
    return [(f"{m}/{d}", amount) for (m, d), amount in sorted(by_day.items())]


def iter_top_expenses(expenses: Iterable[Expense], k: int) -> Iterator[Expense]:
    ordered = sorted(expenses, key=lambda e: e.amount, reverse=True)
    yield from islice(ordered, max(0, k))


def top_expenses(expenses: Iterable[Expense], k: int = TOP_N) -> List[Expense]:
    return list(iter_top_expenses(expenses, k))


def compute_summary(expenses: Iterable[Expense], today: Optional[date] = None) -> Summary:
    items = tuple(expenses)
    return Summary(
        total=total(items),
        monthly_total=monthly_total(items, today),
        average=average(items),
        top_category=top_category(items),
    )


def compute_series(expenses: Iterable[Expense], k: int = TOP_N) -> Series:
    items = tuple(expenses)
    return Series(
        category_totals=category_totals(items),
        daily_trend=daily_trend(items),
        top_expenses=top_expenses(items, k),
        category_ranking=category_ranking(items),
    )
