from decimal import Decimal

import pytest

from app.models.category import ExpenseCategory
from app.services.budget_service import AlertBand, alert_band, evaluate_budget, spend_percentage


def test_threshold_boundary_counts_as_exceeded():
    status = evaluate_budget(ExpenseCategory.FOOD, Decimal("100"), 80, Decimal("80"))
    assert status.percentage == 80
    assert status.is_exceeded is True
    assert status.band == AlertBand.WARNING


def test_just_below_threshold_is_ok():
    status = evaluate_budget(ExpenseCategory.FOOD, Decimal("100"), 80, Decimal("79.99"))
    assert status.is_exceeded is False
    assert status.band == AlertBand.OK


def test_zero_spend_is_ok():
    status = evaluate_budget(ExpenseCategory.TRAVEL, Decimal("250"), 1, Decimal("0"))
    assert status.percentage == 0
    assert status.is_exceeded is False
    assert status.band == AlertBand.OK


@pytest.mark.parametrize(
    "percentage, threshold, expected",
    [
        (Decimal("100"), 80, AlertBand.CRITICAL),
        (Decimal("140"), 80, AlertBand.CRITICAL),
        (Decimal("99.99"), 80, AlertBand.WARNING),
        (Decimal("50"), 50, AlertBand.WARNING),
        (Decimal("49.99"), 50, AlertBand.OK),
        (Decimal("95"), 100, AlertBand.OK),
        (Decimal("100"), 100, AlertBand.CRITICAL),
    ],
)
def test_bands_use_budget_threshold(percentage, threshold, expected):
    assert alert_band(percentage, threshold) == expected


def test_percentage_is_monotonic_in_spend():
    limit = Decimal("120")
    spends = [Decimal(s) for s in ("0", "1", "59.99", "60", "119.99", "120", "500")]
    percentages = [spend_percentage(s, limit) for s in spends]
    assert percentages == sorted(percentages)


def test_non_positive_limit_is_rejected():
    with pytest.raises(ValueError):
        spend_percentage(Decimal("10"), Decimal("0"))
