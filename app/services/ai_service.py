"""
Keyword-driven helpers behind the "AI" endpoints.

Nothing here calls a model: categories come from a keyword table and the
receipt scan returns mocked values.
"""
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple
import logging
import random
import re

from app.models.category import ExpenseCategory

logger = logging.getLogger(__name__)

# Checked in order; the first category with a matching keyword wins
CATEGORY_KEYWORDS: Tuple[Tuple[ExpenseCategory, Tuple[str, ...]], ...] = (
    (ExpenseCategory.FOOD, ("food", "restaurant", "lunch", "dinner", "coffee")),
    (ExpenseCategory.TRANSPORTATION, ("gas", "uber", "taxi", "bus")),
    (ExpenseCategory.ENTERTAINMENT, ("movie", "game", "entertainment")),
    (ExpenseCategory.HEALTHCARE, ("medicine", "doctor", "hospital")),
    (ExpenseCategory.SHOPPING, ("shopping", "clothes", "store")),
    (ExpenseCategory.BILLS, ("bill", "electricity", "water", "internet")),
)

AMOUNT_PATTERN = re.compile(r"\$?(\d+(?:\.\d{2})?)")
SPENT_PATTERN = re.compile(r"spent|paid", re.IGNORECASE)

RECEIPT_MERCHANTS = ("Starbucks", "McDonald's", "Target", "Walmart", "Gas Station")
RECEIPT_CATEGORIES = (ExpenseCategory.FOOD, ExpenseCategory.SHOPPING, ExpenseCategory.TRANSPORTATION)


def classify(text: str) -> ExpenseCategory:
    lowered = text.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return ExpenseCategory.OTHERS


def extract_amount(text: str) -> Decimal:
    match = AMOUNT_PATTERN.search(text)
    return Decimal(match.group(1)) if match else Decimal("0")


def parse_expense_text(text: str, today: date) -> Dict[str, Any]:
    """Turn a sentence such as "I spent $25 on lunch" into expense fields."""
    category = classify(text)

    title = text
    if SPENT_PATTERN.search(text):
        title = SPENT_PATTERN.split(text)[-1].strip()
    title = AMOUNT_PATTERN.sub("", title, count=1).strip()
    if not title:
        title = f"{category.value} expense"

    return {
        "title": title[0].upper() + title[1:],
        "amount": float(extract_amount(text)),
        "category": category,
        "description": f'Added via voice: "{text}"',
        "date": today,
    }


def scan_receipt(filename: Optional[str], size: int, today: date, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """Mocked receipt reading; no OCR is performed."""
    rng = rng or random.Random()
    logger.info(f"Scanning receipt {filename!r} ({size} bytes) with mock reader")
    return {
        "amount": float(rng.randint(10, 109)),
        "merchant": rng.choice(RECEIPT_MERCHANTS),
        "date": today.isoformat(),
        "category": rng.choice(RECEIPT_CATEGORIES),
        "confidence": rng.randint(80, 99),
    }
