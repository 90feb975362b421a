from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .board import PLACEHOLDER, Board, Clue, RevealState


@dataclass(frozen=True)
class Transition:
    next_state: RevealState
    cell_text: str          # "question" or "answer": which clue field the caller gets back
    cell_changed: bool      # False: the cell keeps its current text
    show_recent: bool       # True: the question goes to the secondary display


# ANSWER is terminal: the cell keeps the answer, the question is shown again off-board.
TRANSITIONS: Dict[RevealState, Transition] = {
    RevealState.HIDDEN: Transition(RevealState.QUESTION, "question", True, True),
    RevealState.QUESTION: Transition(RevealState.ANSWER, "answer", True, False),
    RevealState.ANSWER: Transition(RevealState.ANSWER, "question", False, True),
}


@dataclass(frozen=True)
class RevealResult:
    text: str
    state: RevealState
    recent_clue: Optional[str]  # None: secondary display unchanged
    cell_changed: bool


def advance(clue: Clue) -> RevealResult:
    """Applies one reveal to a clue and returns what to render."""
    t = TRANSITIONS[clue.reveal_state]
    clue.reveal_state = t.next_state
    text = clue.question if t.cell_text == "question" else clue.answer
    return RevealResult(
        text=text,
        state=t.next_state,
        recent_clue=clue.question if t.show_recent else None,
        cell_changed=t.cell_changed,
    )


def reveal(board: Board, category_index: int, clue_index: int) -> RevealResult:
    """Reveals one cell. Raises IndexOutOfRange (without touching any clue) for bad indices."""
    return advance(board.clue_at(category_index, clue_index))


def display_text(clue: Clue, placeholder: str = PLACEHOLDER) -> str:
    """The text currently painted in a clue's cell."""
    if clue.reveal_state is RevealState.QUESTION:
        return clue.question
    if clue.reveal_state is RevealState.ANSWER:
        return clue.answer
    return placeholder


class RevealController:
    """Owns one board for the length of a game and dispatches clicks to its clues."""

    def __init__(self, board: Board, placeholder: str = PLACEHOLDER) -> None:
        self.board = board
        self.placeholder = placeholder
        self.recent_clue: Optional[str] = None

    def reveal(self, category_index: int, clue_index: int) -> RevealResult:
        res = reveal(self.board, category_index, clue_index)
        if res.recent_clue is not None:
            self.recent_clue = res.recent_clue
        return res

    def display_text(self, category_index: int, clue_index: int) -> str:
        return display_text(self.board.clue_at(category_index, clue_index), self.placeholder)

    def state_at(self, category_index: int, clue_index: int) -> RevealState:
        return self.board.clue_at(category_index, clue_index).reveal_state
