import enum


class ExpenseCategory(str, enum.Enum):
    """Closed set of spending categories shared by expenses and budgets."""
    FOOD = "Food"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    SHOPPING = "Shopping"
    BILLS = "Bills"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    OTHERS = "Others"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def order(cls, category: "ExpenseCategory") -> int:
        return list(cls).index(category)


# Query-string value meaning "no category filter"
ALL_CATEGORIES = "All"
