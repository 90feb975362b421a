from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import IndexOutOfRange

Coord = Tuple[int, int]  # (category_index, clue_index)

PLACEHOLDER = "?"


class RevealState(str, enum.Enum):
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass(eq=False)
class Clue:
    """A question/answer pair. Only reveal_state may change after creation."""
    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN

    def __setattr__(self, name: str, value: object) -> None:
        if name in ("question", "answer") and name in self.__dict__:
            raise AttributeError(f"Clue.{name} is read-only")
        object.__setattr__(self, name, value)


@dataclass(frozen=True)
class Category:
    id: int
    title: str
    clues: Tuple[Clue, ...]


@dataclass(frozen=True)
class Board:
    """The categories selected for one game, in column order."""
    categories: Tuple[Category, ...]

    def __post_init__(self) -> None:
        if not self.categories:
            raise ValueError("Board needs at least one category")
        n = len(self.categories[0].clues)
        if n == 0:
            raise ValueError("Categories need at least one clue")
        for cat in self.categories:
            if len(cat.clues) != n:
                raise ValueError(
                    f"Category {cat.title!r} has {len(cat.clues)} clues, expected {n}"
                )

    @property
    def width(self) -> int:
        """Number of categories (grid columns)."""
        return len(self.categories)

    @property
    def height(self) -> int:
        """Number of clues per category (grid rows)."""
        return len(self.categories[0].clues)

    def in_range(self, category_index: int, clue_index: int) -> bool:
        return 0 <= category_index < self.width and 0 <= clue_index < self.height

    def clue_at(self, category_index: int, clue_index: int) -> Clue:
        """Returns the clue at a position; negative indices do not wrap."""
        if not self.in_range(category_index, clue_index):
            raise IndexOutOfRange(
                f"({category_index}, {clue_index}) is outside a {self.width}x{self.height} board"
            )
        return self.categories[category_index].clues[clue_index]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all positions, category-major."""
        for c in range(self.width):
            for r in range(self.height):
                yield (c, r)

    def clues(self) -> Iterator[Clue]:
        for cat in self.categories:
            yield from cat.clues

    def pretty(self, placeholder: str = PLACEHOLDER) -> str:
        """Generates a human-readable grid: one row per clue index, Q/A marks for revealed cells."""
        marks = {RevealState.HIDDEN: placeholder, RevealState.QUESTION: "Q", RevealState.ANSWER: "A"}
        lines: List[str] = [" | ".join(cat.title for cat in self.categories)]
        for r in range(self.height):
            row = [marks[self.categories[c].clues[r].reveal_state] for c in range(self.width)]
            lines.append(" ".join(row))
        return "\n".join(lines)


def cell_id(category_index: int, clue_index: int) -> str:
    """The identifier given to a rendered grid cell."""
    return f"{category_index}-{clue_index}"


def parse_cell_id(text: str, board: Optional[Board] = None) -> Coord:
    """Maps a cell id back to (category_index, clue_index), checking bounds when a board is given."""
    parts = str(text).strip().split("-")
    if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
        raise IndexOutOfRange(f"Malformed cell id: {text!r}")
    coord = (int(parts[0]), int(parts[1]))
    if board is not None and not board.in_range(*coord):
        raise IndexOutOfRange(f"Cell {text!r} is outside a {board.width}x{board.height} board")
    return coord
