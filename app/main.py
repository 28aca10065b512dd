import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
from datetime import date

import pandas as pd
import streamlit as st

from spendboard import config, viz
from spendboard.config import CATEGORY_COLORS, RECENT_LIMIT
from spendboard.domain import CATEGORIES, NewExpense, TIME_MODES
from spendboard.events import EXPENSE_ADDED, EXPENSE_DELETED
from spendboard.intake import accept_receipt, accept_spreadsheet
from spendboard.services import DashboardService
from spendboard.store import ExpenseStore
from spendboard.transforms import load_seed, recent_expenses
from spendboard.utils import format_currency, format_date

config.configure_logging()
logger = logging.getLogger("spendboard.app")

st.set_page_config(page_title="Spendboard", layout="wide")


def flash_handler(event, payload: dict) -> dict:
    verb = "Added" if event.name == EXPENSE_ADDED else "Deleted"
    msg = ("success" if event.name == EXPENSE_ADDED else "info", f"{verb} {payload['expense'].description}")
    st.session_state.flash = msg
    return {"flash": msg}


if "store" not in st.session_state:
    accounts, expenses = load_seed(config.SEED_PATH)
    store = ExpenseStore(expenses)
    for name in (EXPENSE_ADDED, EXPENSE_DELETED):
        store.bus.subscribe(name, flash_handler)
    st.session_state.accounts = accounts
    st.session_state.store = store
    st.session_state.form_version = 0
    st.session_state.flash = None

accounts = st.session_state.accounts
store: ExpenseStore = st.session_state.store
service = DashboardService(store, accounts)

# ---------- header ----------
head_l, head_r = st.columns([3, 1])
with head_l:
    st.title("Hello 👋")
    st.caption("Manage your spending and stay on budget")

flash = st.session_state.flash
if flash:
    kind, text = flash
    getattr(st, kind)(text)
    st.session_state.flash = None

# ---------- accounts ----------
cards = service.account_cards()
labels = {
    c.id: f"{c.name}{' •••• ' + c.last4 if c.last4 else ''} · {format_currency(c.balance)}"
    for c in cards
}
picked = st.radio(
    "Account",
    [c.id for c in cards],
    format_func=lambda cid: labels[cid],
    horizontal=True,
    key="account",
)
selected_account = None if picked == config.ALL_ACCOUNTS_ID else picked

# ---------- summary cards ----------
card_titles = {
    "all": "Total Expenses",
    "month": "This Month",
    "average": "Average Expense",
    "category": "Top Category",
}
time_mode = st.radio(
    "View",
    TIME_MODES,
    format_func=lambda m: card_titles[m],
    horizontal=True,
    key="time_mode",
)

today = date.today()
filtered = service.filtered_expenses(selected_account, time_mode, today)
summary = service.summary(filtered, today)
series = service.series(filtered)

values = {
    "all": format_currency(summary.total),
    "month": format_currency(summary.monthly_total),
    "average": format_currency(summary.average),
    "category": summary.top_category,
}
for col, mode in zip(st.columns(4), TIME_MODES):
    with col:
        title = card_titles[mode]
        st.metric(f"▶ {title}" if mode == time_mode else title, values[mode])

# ---------- insights + list ----------
left, right = st.columns(2)

with left:
    st.subheader("Insights")
    tabs = st.tabs(["Expenses by Category", "Spending Trend", "Top 5 Expenses", "Category Breakdown"])
    charts = (
        (viz.plot_category_pie, series.category_totals),
        (viz.plot_daily_trend, series.daily_trend),
        (viz.plot_top_expenses, series.top_expenses),
        (viz.plot_category_ranking, series.category_ranking),
    )
    for tab, (build, data) in zip(tabs, charts):
        with tab:
            try:
                st.plotly_chart(build(data), use_container_width=True)
            except Exception:
                logger.exception("%s failed", build.__name__)
                st.warning("Chart unavailable")

with right:
    st.subheader("Recent Transactions")
    recent = recent_expenses(filtered, RECENT_LIMIT)
    if not recent:
        st.caption("No transactions yet")
    for e in recent:
        c1, c2, c3 = st.columns([4, 2, 1])
        with c1:
            color = CATEGORY_COLORS.get(e.category, CATEGORY_COLORS["Other"])
            st.markdown(
                f"**{e.description}**  \n"
                f":gray[{format_date(e.date)} · {service.account_name(e.bank_account_id)}] "
                f"<span style='color:{color}'>{e.category}</span>",
                unsafe_allow_html=True,
            )
        with c2:
            st.markdown(f"**{format_currency(e.amount)}**")
        with c3:
            if st.button("🗑", key=f"del_{e.id}", help="Delete"):
                store.delete(e.id)
                st.rerun()

    if recent:
        table = pd.DataFrame(
            [
                {
                    "date": x.date.isoformat(),
                    "description": x.description,
                    "category": x.category,
                    "account": x.bank_account_id,
                    "amount": str(x.amount),
                }
                for x in filtered
            ]
        )
        st.download_button(
            "⬇ Download CSV",
            table.to_csv(index=False),
            file_name="expenses.csv",
        )

# ---------- add expense ----------
with head_r:
    with st.popover("➕ Add Expense"):
        manual, upload, receipt = st.tabs(["Manual Input", "Upload Excel File", "Scan Receipt"])

        with manual:
            with st.form(f"add_form_{st.session_state.form_version}", clear_on_submit=False):
                description = st.text_input("Description", placeholder="e.g., Grocery shopping")
                amount = st.text_input("Amount", placeholder="0.00")
                category = st.selectbox("Category", CATEGORIES)
                account_id = st.selectbox(
                    "Bank Account",
                    [a.id for a in accounts],
                    format_func=service.account_name,
                )
                when = st.date_input("Date", value=today)
                submitted = st.form_submit_button("Add Expense")

            if submitted:
                result = store.add(
                    NewExpense(
                        description=description,
                        amount=amount,
                        category=category,
                        bank_account_id=account_id,
                        date=when,
                    ),
                    today,
                )
                if result.is_right():
                    # new form key resets the inputs
                    st.session_state.form_version += 1
                    st.rerun()
                else:
                    st.error(result.get_error()["message"])

        with upload:
            sheet = st.file_uploader("Import from spreadsheet", type=["xlsx", "xls", "csv"])
            if sheet is not None:
                outcome = accept_spreadsheet(sheet.name)
                if outcome.is_right():
                    st.success(outcome.get_or_else(""))
                else:
                    st.error(outcome.get_error()["message"])

        with receipt:
            shot = st.camera_input("Capture with camera")
            if shot is not None:
                outcome = accept_receipt(shot.name or "receipt.jpg")
                if outcome.is_right():
                    st.success(outcome.get_or_else(""))
                else:
                    st.error(outcome.get_error()["message"])
