from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple

import requests

from .config import DEFAULT_API_URL, MAX_CATEGORY_POOL
from .errors import DataUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRef:
    id: int
    title: str


@dataclass(frozen=True)
class RawClue:
    question: str
    answer: str


@dataclass(frozen=True)
class CategoryData:
    id: int
    title: str
    clues: Tuple[RawClue, ...]


class TriviaSource(Protocol):
    def list_categories(self, limit: int) -> List[CategoryRef]:
        ...

    def get_category(self, category_id: int) -> CategoryData:
        ...


def _text(value: Any) -> str:
    # Answers are sometimes numbers in the feed
    return "" if value is None else str(value)


def parse_category_list(payload: Any) -> List[CategoryRef]:
    if not isinstance(payload, list):
        raise DataUnavailable(f"categories: expected a list, got {type(payload).__name__}")
    out: List[CategoryRef] = []
    for item in payload:
        try:
            out.append(CategoryRef(id=int(item["id"]), title=_text(item.get("title"))))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DataUnavailable(f"categories: bad entry {item!r}") from e
    return out


def parse_category(payload: Any) -> CategoryData:
    if not isinstance(payload, dict):
        raise DataUnavailable(f"category: expected an object, got {type(payload).__name__}")
    try:
        clues = tuple(
            RawClue(question=_text(c.get("question")), answer=_text(c.get("answer")))
            for c in payload.get("clues") or []
        )
        return CategoryData(id=int(payload["id"]), title=_text(payload.get("title")), clues=clues)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DataUnavailable(f"category: malformed payload ({e})") from e


class HttpTriviaSource:
    """jService-style JSON API: GET categories?count=N and GET category?id=N."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self._shared = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        # One requests.Session per thread unless one was injected
        if self._shared is not None:
            return self._shared
        s = getattr(self._local, "session", None)
        if s is None:
            s = self._local.session = requests.Session()
        return s

    def _get_json(self, path: str, params: dict) -> Any:
        url = self.base_url + path
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.exceptions.RequestException as e:
            logger.warning("GET %s %s failed: %s", url, params, e)
            raise DataUnavailable(f"trivia source request failed: {e}") from e
        except ValueError as e:
            logger.warning("GET %s %s returned invalid JSON: %s", url, params, e)
            raise DataUnavailable(f"trivia source returned invalid JSON: {e}") from e

    def list_categories(self, limit: int) -> List[CategoryRef]:
        count = max(1, min(int(limit), MAX_CATEGORY_POOL))
        return parse_category_list(self._get_json("categories", {"count": count}))

    def get_category(self, category_id: int) -> CategoryData:
        return parse_category(self._get_json("category", {"id": int(category_id)}))
