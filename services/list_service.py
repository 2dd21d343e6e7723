from models.transaction import Transaction

PAGE_SIZE = 200


def list_rows(
    transactions: list[Transaction],
    search: str = "",
    limit: int | None = None,
) -> tuple[list[tuple[int, Transaction]], int]:
    """Rows for the transaction list, newest insertion first.

    Each row carries its store index. search matches description or category
    name, case-insensitive. Returns (visible rows, total matching rows); a
    limit of None shows every match.
    """
    needle = search.strip().lower()
    matches = [
        (index, tx) for index, tx in reversed(list(enumerate(transactions)))
        if not needle
        or needle in tx.description.lower()
        or needle in tx.category.value.lower()
    ]
    if limit is None:
        return matches, len(matches)
    return matches[:limit], len(matches)
