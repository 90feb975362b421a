from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from game import (
    Board,
    Category,
    CategoryData,
    CategoryRef,
    Clue,
    DataUnavailable,
    RawClue,
)


class FakeSource:
    """In-memory trivia source; records every call."""

    def __init__(self, pools: Dict[int, Tuple[str, Sequence[Tuple[str, str]]]], fail_ids: Iterable[int] = ()):
        self.pools = pools
        self.fail_ids = set(fail_ids)
        self.listed: List[int] = []
        self.fetched: List[int] = []
        self._lock = threading.Lock()

    def list_categories(self, limit: int) -> List[CategoryRef]:
        self.listed.append(limit)
        return [CategoryRef(id=i, title=t) for i, (t, _) in list(self.pools.items())[:limit]]

    def get_category(self, category_id: int) -> CategoryData:
        with self._lock:
            self.fetched.append(category_id)
        if category_id in self.fail_ids:
            raise DataUnavailable(f"category {category_id} unavailable")
        title, clues = self.pools[category_id]
        return CategoryData(
            id=category_id,
            title=title,
            clues=tuple(RawClue(question=q, answer=a) for q, a in clues),
        )


def make_pools(n_categories: int, n_clues: int, short: Optional[Dict[int, int]] = None):
    """Category ids 1..n_categories, each with n_clues clues (or short[id] clues)."""
    short = short or {}
    pools = {}
    for cid in range(1, n_categories + 1):
        count = short.get(cid, n_clues)
        pools[cid] = (f"Category {cid}", [(f"Q{cid}.{k}", f"A{cid}.{k}") for k in range(count)])
    return pools


def make_board(n_categories: int = 6, n_clues: int = 5) -> Board:
    return Board(categories=tuple(
        Category(
            id=c,
            title=f"Category {c}",
            clues=tuple(Clue(question=f"Q{c}.{r}", answer=f"A{c}.{r}") for r in range(n_clues)),
        )
        for c in range(n_categories)
    ))
