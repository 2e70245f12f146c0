from datetime import date

import pytest

from app.models.category import ExpenseCategory
from app.services.ai_service import classify, extract_amount, parse_expense_text

TODAY = date(2026, 10, 17)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Coffee with Sam", ExpenseCategory.FOOD),
        ("uber home", ExpenseCategory.TRANSPORTATION),
        ("MOVIE night", ExpenseCategory.ENTERTAINMENT),
        ("doctor visit", ExpenseCategory.HEALTHCARE),
        ("new clothes", ExpenseCategory.SHOPPING),
        ("internet bill", ExpenseCategory.BILLS),
        ("birthday gift", ExpenseCategory.OTHERS),
        # first matching category wins
        ("lunch at the store", ExpenseCategory.FOOD),
    ],
)
def test_classify(text, expected):
    assert classify(text) == expected


def test_extract_amount():
    assert str(extract_amount("paid $12.50 for parking")) == "12.50"
    assert str(extract_amount("spent 40 on gas")) == "40"
    assert str(extract_amount("no number here")) == "0"


def test_parse_spoken_sentence():
    parsed = parse_expense_text("I spent $25 on lunch", TODAY)
    assert parsed["amount"] == 25
    assert parsed["category"] == ExpenseCategory.FOOD
    assert parsed["title"] == "On lunch"
    assert parsed["date"] == TODAY
    assert parsed["description"] == 'Added via voice: "I spent $25 on lunch"'


def test_parse_without_title_falls_back_to_category():
    parsed = parse_expense_text("paid 30", TODAY)
    assert parsed["title"] == "Others expense"
    assert parsed["amount"] == 30


@pytest.mark.asyncio
async def test_parse_expense_endpoint(client):
    r = await client.post("/api/ai/parse-expense", json={"text": "Paid $60.00 electricity"})
    assert r.status_code == 200
    body = r.json()
    assert body["amount"] == 60
    assert body["category"] == "Bills"
    assert body["date"] == date.today().isoformat()


@pytest.mark.asyncio
async def test_parse_expense_requires_text(client):
    r = await client.post("/api/ai/parse-expense", json={"text": "   "})
    assert r.status_code == 400
    assert r.json() == {"message": "Text is required"}
