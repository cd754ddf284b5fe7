from __future__ import annotations

import pytest

from dex_pools.domain.services.pagination import has_more, paginate


ITEMS = list(range(23))


@pytest.mark.parametrize(
    ("page", "limit", "expected"),
    [
        (1, 10, list(range(10))),
        (2, 10, list(range(10, 20))),
        (3, 10, [20, 21, 22]),
        (4, 10, []),
        (1, 1000, ITEMS),
        (100, 50, []),
    ],
)
def test_paginate_slices_one_indexed_pages(page, limit, expected):
    assert paginate(ITEMS, page=page, limit=limit) == expected


def test_paginate_length_matches_remaining_items():
    total = len(ITEMS)
    for page in range(1, 8):
        for limit in (1, 4, 7, 30):
            expected = min(limit, max(0, total - (page - 1) * limit))
            assert len(paginate(ITEMS, page=page, limit=limit)) == expected


def test_paginate_never_uses_negative_offsets():
    assert paginate(ITEMS, page=0, limit=5) == [0, 1, 2, 3, 4]
    assert paginate([], page=3, limit=5) == []


def test_has_more():
    assert has_more(page=1, limit=2, total=4) is True
    assert has_more(page=2, limit=2, total=4) is False
    assert has_more(page=1, limit=10, total=0) is False
