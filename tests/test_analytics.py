from datetime import date
from decimal import Decimal

from spendboard.analytics import (
    average,
    category_ranking,
    category_totals,
    compute_series,
    compute_summary,
    daily_trend,
    monthly_total,
    top_category,
    top_expenses,
    total,
)
from spendboard.domain import Expense

TODAY = date(2025, 11, 28)


def make_exp(id, category, amount, when="2025-11-20", acc="chase", description=None):
    return Expense(
        id=id,
        description=description or f"expense {id}",
        amount=Decimal(amount),
        category=category,
        date=date.fromisoformat(when),
        bank_account_id=acc,
    )


def test_example_food_and_transport():
    exps = (
        make_exp("1", "Food", "100"),
        make_exp("2", "Food", "50"),
        make_exp("3", "Transportation", "30"),
    )
    assert category_totals(exps) == {"Food": Decimal("150"), "Transportation": Decimal("30")}
    assert total(exps) == Decimal("180")
    assert average(exps) == Decimal("60")
    assert top_category(exps) == "Food"


def test_empty_sequence():
    summary = compute_summary((), TODAY)
    series = compute_series(())

    assert summary.total == 0
    assert summary.monthly_total == 0
    assert summary.average == 0
    assert summary.top_category == "N/A"
    assert series.top_expenses == []
    assert series.category_totals == {}
    assert series.daily_trend == []
    assert series.category_ranking == []


def test_category_totals_sum_to_total():
    exps = (
        make_exp("1", "Food", "127.50"),
        make_exp("2", "Utilities", "89.00"),
        make_exp("3", "Entertainment", "15.99"),
        make_exp("4", "Food", "12.50"),
        make_exp("5", "Health", "49.99"),
    )
    assert sum(category_totals(exps).values()) == total(exps)


def test_sums_are_not_rounded_while_accumulating():
    exps = tuple(make_exp(str(i), "Food", "0.005") for i in range(3))
    assert total(exps) == Decimal("0.015")


def test_average_is_exact_division():
    exps = (make_exp("1", "Food", "10"), make_exp("2", "Food", "20"), make_exp("3", "Food", "20"))
    assert average(exps) == total(exps) / 3


def test_monthly_total_uses_current_month_and_year():
    exps = (
        make_exp("1", "Food", "10", "2025-11-01"),
        make_exp("2", "Food", "20", "2025-10-31"),
        make_exp("3", "Food", "40", "2024-11-15"),
        make_exp("4", "Food", "5", "2025-11-28"),
    )
    assert monthly_total(exps, TODAY) == Decimal("15")


def test_top_category_is_max_of_totals():
    exps = (
        make_exp("1", "Food", "10"),
        make_exp("2", "Shopping", "25"),
        make_exp("3", "Food", "10"),
    )
    totals = category_totals(exps)
    assert top_category(exps) == max(totals, key=totals.get) == "Shopping"


def test_top_category_tie_keeps_first_seen():
    exps = (make_exp("1", "Health", "10"), make_exp("2", "Food", "10"))
    assert top_category(exps) == "Health"


def test_category_ranking_descending():
    exps = (
        make_exp("1", "Food", "5"),
        make_exp("2", "Utilities", "89"),
        make_exp("3", "Education", "99"),
        make_exp("4", "Food", "90"),
    )
    assert category_ranking(exps) == [
        ("Education", Decimal("99")),
        ("Food", Decimal("95")),
        ("Utilities", Decimal("89")),
    ]


def test_daily_trend_merges_same_day_across_years():
    exps = (
        make_exp("1", "Food", "10", "2024-03-15"),
        make_exp("2", "Food", "20", "2025-03-15"),
    )
    assert dict(daily_trend(exps)) == {"3/15": Decimal("30")}


def test_daily_trend_sorted_by_month_then_day():
    exps = (
        make_exp("1", "Food", "1", "2025-11-02"),
        make_exp("2", "Food", "2", "2025-02-10"),
        make_exp("3", "Food", "3", "2025-11-10"),
        make_exp("4", "Food", "4", "2025-02-09"),
        make_exp("5", "Food", "5", "2025-11-02"),
    )
    trend = daily_trend(exps)
    assert [k for k, _ in trend] == ["2/9", "2/10", "11/2", "11/10"]
    assert dict(trend)["11/2"] == Decimal("6")


def test_top_expenses_limit_and_order():
    exps = tuple(make_exp(str(i), "Food", str(i)) for i in range(1, 9))
    top = top_expenses(exps)
    assert [e.id for e in top] == ["8", "7", "6", "5", "4"]


def test_top_expenses_ties_keep_original_order():
    exps = (
        make_exp("a", "Food", "10"),
        make_exp("b", "Food", "50"),
        make_exp("c", "Food", "10"),
        make_exp("d", "Food", "10"),
    )
    assert [e.id for e in top_expenses(exps, 3)] == ["b", "a", "c"]


def test_top_expenses_fewer_than_k():
    exps = (make_exp("1", "Food", "3"), make_exp("2", "Food", "7"))
    assert [e.id for e in top_expenses(exps, 5)] == ["2", "1"]


def test_compute_summary_and_series_match_parts():
    exps = (
        make_exp("1", "Food", "127.50", "2025-11-28"),
        make_exp("2", "Utilities", "89.00", "2025-11-27"),
        make_exp("3", "Food", "68.50", "2025-10-24"),
    )
    summary = compute_summary(exps, TODAY)
    series = compute_series(exps)

    assert summary.total == Decimal("285.00")
    assert summary.monthly_total == Decimal("216.50")
    assert summary.average == Decimal("95")
    assert summary.top_category == "Food"
    assert series.category_totals["Food"] == Decimal("196.00")
    assert series.category_ranking[0] == ("Food", Decimal("196.00"))
    assert [k for k, _ in series.daily_trend] == ["10/24", "11/27", "11/28"]
    assert series.top_expenses[0].id == "1"


def test_accepts_generators():
    exps = [make_exp("1", "Food", "4"), make_exp("2", "Food", "6")]
    summary = compute_summary((e for e in exps), TODAY)
    assert summary.total == Decimal("10")
    assert summary.average == Decimal("5")
