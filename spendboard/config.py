# config.py
import logging
import os
from decimal import Decimal

# --- 1. SYSTEM CONFIGURATION ---
SEED_PATH = os.getenv("SPENDBOARD_SEED_PATH", "data/seed.json")
LOG_LEVEL = os.getenv("SPENDBOARD_LOG_LEVEL", "INFO").upper()

# --- 2. DISPLAY RULES ---
# One symbol for every card, chart and list
CURRENCY_SYMBOL = os.getenv("SPENDBOARD_CURRENCY", "€")
TOP_N = int(os.getenv("SPENDBOARD_TOP_N", "5"))
RECENT_LIMIT = int(os.getenv("SPENDBOARD_RECENT_LIMIT", "10"))
LABEL_MAX_CHARS = 20
# largest single amount accepted on add
MAX_AMOUNT = Decimal(os.getenv("SPENDBOARD_MAX_AMOUNT", "1000000000"))
NOT_AVAILABLE = "N/A"

# --- 3. UI STYLING & COLORS ---
CHART_COLORS = [
    "#6366f1",
    "#8b5cf6",
    "#ec4899",
    "#f59e0b",
    "#10b981",
    "#3b82f6",
    "#ef4444",
    "#06b6d4",
]

CATEGORY_COLORS = {
    "Food": "#ea580c",
    "Transportation": "#1d4ed8",
    "Utilities": "#a16207",
    "Entertainment": "#7e22ce",
    "Health": "#15803d",
    "Education": "#4338ca",
    "Shopping": "#be185d",
    "Other": "#374151",
}

ALL_ACCOUNTS_ID = "all"
ALL_ACCOUNTS_COLOR = "#334155"

# --- 4. INTAKE ---
SPREADSHEET_EXTENSIONS = (".xlsx", ".xls", ".csv")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
