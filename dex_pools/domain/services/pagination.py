from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar


T = TypeVar("T")


def page_offset(*, page: int, limit: int) -> int:
    return max(0, (page - 1) * limit)


def paginate(items: Sequence[T], *, page: int, limit: int) -> list[T]:
    if limit < 1:
        return []
    offset = page_offset(page=page, limit=limit)
    if offset >= len(items):
        return []
    return list(items[offset : offset + limit])


def has_more(*, page: int, limit: int, total: int) -> bool:
    return page * limit < total
