import logging
from datetime import date
from decimal import Decimal

from spendboard.intake import accept_receipt, accept_spreadsheet
from spendboard.utils import format_currency, format_date, round_money, truncate_label


def test_accept_spreadsheet_extensions():
    for name in ("march.xlsx", "old.XLS", "export.csv"):
        result = accept_spreadsheet(name)
        assert result.is_right(), name
        assert name in result.get_or_else("")


def test_accept_spreadsheet_rejects_other_files():
    result = accept_spreadsheet("notes.txt")
    assert result.is_left()
    assert result.get_error()["error"] == "unsupported_file"
    assert accept_spreadsheet("").is_left()


def test_accept_spreadsheet_logs_name(caplog):
    with caplog.at_level(logging.INFO, logger="spendboard.intake"):
        accept_spreadsheet("budget.csv")
    assert "budget.csv" in caplog.text


def test_accept_receipt():
    assert accept_receipt("receipt.jpg").is_right()
    assert accept_receipt("scan.PNG").is_right()
    assert accept_receipt("receipt.pdf").is_left()


def test_round_money_half_up():
    assert round_money(Decimal("2.675")) == Decimal("2.68")
    assert round_money(Decimal("0.015")) == Decimal("0.02")
    assert round_money(60) == Decimal("60.00")


def test_round_money_beyond_default_precision():
    huge = Decimal("1000000000000000000000000000000.005")
    assert round_money(huge) == Decimal("1000000000000000000000000000000.01")
    assert format_currency(Decimal("1e30")).startswith("€1,000,000,000")


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "€1,234.50"
    assert format_currency(Decimal("0"), "$") == "$0.00"


def test_format_date():
    assert format_date(date(2025, 11, 28)) == "Nov 28, 2025"
    assert format_date(date(2025, 3, 5)) == "Mar 5, 2025"


def test_truncate_label():
    assert truncate_label("Netflix Subscription") == "Netflix Subscription"
    assert truncate_label("Annual Netflix Subscription") == "Annual Netflix Subsc..."
