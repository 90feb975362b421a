from __future__ import annotations

# Facade module that re-exports the jeopardy core for the Flask app and tests.
# Single-responsibility modules live under jeopardy_core/*.

import random
from functools import partial
from typing import Callable, Optional

from jeopardy_core.board import (  # noqa: F401
    PLACEHOLDER,
    Board,
    Category,
    Clue,
    Coord,
    RevealState,
    cell_id,
    parse_cell_id,
)
from jeopardy_core.config import Settings, configure_logging, load_settings  # noqa: F401
from jeopardy_core.errors import (  # noqa: F401
    DataUnavailable,
    IndexOutOfRange,
    JeopardyError,
    NoActiveGame,
)
from jeopardy_core.reveal import (  # noqa: F401
    TRANSITIONS,
    RevealController,
    RevealResult,
    advance,
    display_text,
    reveal,
)
from jeopardy_core.selector import select_categories, usable_clues  # noqa: F401
from jeopardy_core.session import CellReveal, GameSession  # noqa: F401
from jeopardy_core.source import (  # noqa: F401
    CategoryData,
    CategoryRef,
    HttpTriviaSource,
    RawClue,
    TriviaSource,
)


def make_source(settings: Settings) -> HttpTriviaSource:
    return HttpTriviaSource(base_url=settings.api_url, timeout=settings.http_timeout)


def make_selector(
    settings: Settings,
    source: Optional[TriviaSource] = None,
    rng: Optional[random.Random] = None,
) -> Callable[[], Board]:
    """Binds select_categories to the configured board size and source."""
    return partial(
        select_categories,
        source if source is not None else make_source(settings),
        num_categories=settings.num_categories,
        clues_per_category=settings.clues_per_category,
        pool_size=settings.category_pool,
        rng=rng,
        max_workers=settings.fetch_workers,
    )


def new_session(settings: Settings, source: Optional[TriviaSource] = None, rng: Optional[random.Random] = None) -> GameSession:
    return GameSession(make_selector(settings, source, rng), placeholder=settings.placeholder)
