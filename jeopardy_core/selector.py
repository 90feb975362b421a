from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Set, Tuple

from .board import Board, Category, Clue
from .errors import DataUnavailable
from .source import CategoryData, RawClue, TriviaSource

logger = logging.getLogger(__name__)

NUM_CATEGORIES = 6
CLUES_PER_CATEGORY = 5
CATEGORY_POOL = 100


def usable_clues(clues: Sequence[RawClue]) -> List[RawClue]:
    """Drops clues with blank question/answer text and repeated (question, answer) pairs."""
    seen: Set[Tuple[str, str]] = set()
    out: List[RawClue] = []
    for c in clues:
        q, a = c.question.strip(), c.answer.strip()
        if not q or not a or (q, a) in seen:
            continue
        seen.add((q, a))
        out.append(RawClue(question=q, answer=a))
    return out


def build_category(data: CategoryData, clues_per_category: int, rng: random.Random) -> Optional[Category]:
    """Samples clues_per_category distinct clues, or returns None if the pool is too small."""
    pool = usable_clues(data.clues)
    if len(pool) < clues_per_category:
        return None
    picked = rng.sample(pool, clues_per_category)
    return Category(
        id=data.id,
        title=data.title,
        clues=tuple(Clue(question=c.question, answer=c.answer) for c in picked),
    )


def sample_category_ids(source: TriviaSource, pool_size: int, count: int, rng: random.Random) -> Tuple[List[int], List[int]]:
    """Returns (chosen ids, untried ids) from one listing of the source."""
    refs = source.list_categories(pool_size)
    ids = list(dict.fromkeys(ref.id for ref in refs))
    logger.debug("category pool: %d ids (%d listed)", len(ids), len(refs))
    if len(ids) < count:
        raise DataUnavailable(f"trivia source listed {len(ids)} categories, need {count}")
    chosen = rng.sample(ids, count)
    taken = set(chosen)
    return chosen, [i for i in ids if i not in taken]


def select_categories(
    source: TriviaSource,
    num_categories: int = NUM_CATEGORIES,
    clues_per_category: int = CLUES_PER_CATEGORY,
    pool_size: int = CATEGORY_POOL,
    rng: Optional[random.Random] = None,
    max_workers: int = NUM_CATEGORIES,
) -> Board:
    """
    Builds a fresh board of num_categories x clues_per_category hidden clues.

    Category pools are fetched concurrently. A category with too few usable
    clues is swapped for another untried id from the listing; running out of
    ids raises DataUnavailable. Fetch errors propagate as DataUnavailable.
    """
    rng = rng or random.Random()
    chosen, untried = sample_category_ids(source, pool_size, num_categories, rng)
    logger.debug("chosen category ids: %s", chosen)

    slots: List[Optional[Category]] = [None] * num_categories
    pending = list(range(num_categories))
    batch = chosen
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, num_categories))) as pool:
        while True:
            fetched = list(pool.map(source.get_category, batch))
            still: List[int] = []
            for slot, cid, data in zip(pending, batch, fetched):
                cat = build_category(data, clues_per_category, rng)
                if cat is None:
                    logger.warning(
                        "category %s (%r) has %d usable clues, need %d; picking another",
                        cid, data.title, len(usable_clues(data.clues)), clues_per_category,
                    )
                    still.append(slot)
                else:
                    slots[slot] = cat
            if not still:
                break
            if len(untried) < len(still):
                raise DataUnavailable(
                    f"category pool exhausted: {num_categories - len(still)} of {num_categories} categories filled"
                )
            pending = still
            batch = rng.sample(untried, len(still))
            taken = set(batch)
            untried = [i for i in untried if i not in taken]

    board = Board(categories=tuple(c for c in slots if c is not None))
    logger.info(
        "selected %d categories x %d clues: %s",
        board.width, board.height, [c.title for c in board.categories],
    )
    return board
