from typing import Iterable, Sequence

from .dto import ViewRow


def row_matches(row: ViewRow, query: str, fields: Sequence[str]) -> bool:
    if not query:
        return True
    needle = query.lower()
    for field in fields:
        value = row.value(field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_rows(rows: Iterable[ViewRow], query: str, fields: Sequence[str]) -> list[ViewRow]:
    return [r for r in rows if row_matches(r, query, fields)]
