from models.transaction_type import TransactionType


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a float as a currency string, e.g. '$1234.56' or '$-12.00'."""
    return f"{symbol}{amount:.2f}"


def format_signed(amount: float, trans_type: TransactionType, symbol: str = "$") -> str:
    """Positive magnitude prefixed with the type's sign, e.g. '-$400.00'."""
    return f"{trans_type.symbol}{symbol}{amount:.2f}"


def format_amount_input(amount: float) -> str:
    """Text placed in the amount entry when editing: '1000', '12.5'."""
    if amount.is_integer():
        return str(int(amount))
    return repr(amount)
