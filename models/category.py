from enum import Enum

from models.transaction_type import TransactionType


class Category(Enum):
    # Income
    SALARY = "Salary"
    BUSINESS = "Business"
    INVESTMENTS = "Investments"
    GIFTS = "Gifts"

    # Expense
    FOOD = "Food"
    HOUSING = "Housing"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    HEALTH = "Health"
    EDUCATION = "Education"

    # Both
    OTHER = "Other"

    @property
    def color_hex(self) -> str:
        return CATEGORY_COLORS[self]

    @property
    def ordinal(self) -> int:
        """Declaration order, used as a stable tie-break."""
        return _ORDINALS[self]

    def __str__(self) -> str:
        return self.value


DEFAULT_CATEGORY = Category.OTHER

CATEGORY_COLORS = {
    Category.SALARY:        "#64C864",
    Category.BUSINESS:      "#64FF64",
    Category.INVESTMENTS:   "#329632",
    Category.GIFTS:         "#96FF96",
    Category.FOOD:          "#FF6464",
    Category.HOUSING:       "#C83232",
    Category.TRANSPORT:     "#6464FF",
    Category.UTILITIES:     "#64C8FF",
    Category.ENTERTAINMENT: "#FFA500",
    Category.SHOPPING:      "#FF69B4",
    Category.HEALTH:        "#FF3232",
    Category.EDUCATION:     "#9664FF",
    Category.OTHER:         "#A0A0A0",
}

_ORDINALS = {cat: i for i, cat in enumerate(Category)}

INCOME_CATEGORIES = (
    Category.SALARY, Category.BUSINESS, Category.INVESTMENTS,
    Category.GIFTS, Category.OTHER,
)
EXPENSE_CATEGORIES = (
    Category.FOOD, Category.HOUSING, Category.TRANSPORT,
    Category.UTILITIES, Category.ENTERTAINMENT, Category.SHOPPING,
    Category.HEALTH, Category.EDUCATION, Category.OTHER,
)


def categories_for_type(trans_type: TransactionType) -> tuple[Category, ...]:
    if trans_type is TransactionType.INCOME:
        return INCOME_CATEGORIES
    return EXPENSE_CATEGORIES


def default_category_for_type(trans_type: TransactionType) -> Category:
    """Category preselected when the user picks a transaction type."""
    return categories_for_type(trans_type)[0]
