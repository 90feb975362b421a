import unittest

from game import (
    TRANSITIONS,
    Clue,
    IndexOutOfRange,
    RevealController,
    RevealState,
    advance,
    display_text,
    reveal,
)
from support import make_board


class TestRevealStateMachine(unittest.TestCase):
    def test_given_hidden_clue_when_revealed_three_times_then_question_answer_question(self):
        board = make_board(6, 5)
        texts = [reveal(board, 2, 1).text for _ in range(3)]
        self.assertEqual(texts, ["Q2.1", "A2.1", "Q2.1"])
        self.assertIs(board.clue_at(2, 1).reveal_state, RevealState.ANSWER)

    def test_given_answer_state_when_revealed_again_then_idempotent_and_returns_question(self):
        clue = Clue(question="Hamlet author", answer="Shakespeare", reveal_state=RevealState.ANSWER)
        for _ in range(5):
            res = advance(clue)
            self.assertEqual(res.text, "Hamlet author")
            self.assertIs(res.state, RevealState.ANSWER)
            self.assertFalse(res.cell_changed)
            self.assertEqual(res.recent_clue, "Hamlet author")
        self.assertIs(clue.reveal_state, RevealState.ANSWER)

    def test_given_transition_table_then_only_advances_one_step(self):
        order = [RevealState.HIDDEN, RevealState.QUESTION, RevealState.ANSWER]
        for state, t in TRANSITIONS.items():
            i = order.index(state)
            self.assertEqual(order.index(t.next_state), min(i + 1, 2))

    def test_given_question_state_when_revealed_then_recent_clue_unchanged(self):
        clue = Clue(question="q", answer="a", reveal_state=RevealState.QUESTION)
        res = advance(clue)
        self.assertEqual(res.text, "a")
        self.assertTrue(res.cell_changed)
        self.assertIsNone(res.recent_clue)

    def test_given_out_of_range_reveal_then_error_and_no_clue_mutated(self):
        board = make_board(6, 5)
        for c, r in [(6, 0), (0, 5), (-1, 0), (0, -1), (100, 100)]:
            with self.assertRaises(IndexOutOfRange):
                reveal(board, c, r)
        self.assertTrue(all(cl.reveal_state is RevealState.HIDDEN for cl in board.clues()))

    def test_given_six_by_five_board_when_cells_revealed_then_independent(self):
        board = make_board(6, 5)
        ctl = RevealController(board)

        r1 = ctl.reveal(0, 0)
        self.assertEqual(r1.text, "Q0.0")
        self.assertIs(ctl.state_at(0, 0), RevealState.QUESTION)

        r2 = ctl.reveal(0, 0)
        self.assertEqual(r2.text, "A0.0")
        self.assertIs(ctl.state_at(0, 0), RevealState.ANSWER)

        r3 = ctl.reveal(3, 4)
        self.assertEqual(r3.text, "Q3.4")
        self.assertIs(ctl.state_at(3, 4), RevealState.QUESTION)
        self.assertIs(ctl.state_at(0, 0), RevealState.ANSWER)

    def test_given_controller_when_revealing_then_recent_clue_tracks_last_question(self):
        ctl = RevealController(make_board(6, 5))
        self.assertIsNone(ctl.recent_clue)
        ctl.reveal(1, 1)
        self.assertEqual(ctl.recent_clue, "Q1.1")
        ctl.reveal(2, 2)
        ctl.reveal(2, 2)  # answer: secondary display untouched
        self.assertEqual(ctl.recent_clue, "Q2.2")
        ctl.reveal(1, 1)
        ctl.reveal(1, 1)  # already at answer: question shown again
        self.assertEqual(ctl.recent_clue, "Q1.1")

    def test_given_each_state_when_display_text_then_placeholder_question_answer(self):
        clue = Clue(question="q", answer="a")
        self.assertEqual(display_text(clue), "?")
        self.assertEqual(display_text(clue, placeholder="*"), "*")
        advance(clue)
        self.assertEqual(display_text(clue), "q")
        advance(clue)
        self.assertEqual(display_text(clue), "a")
        advance(clue)
        self.assertEqual(display_text(clue), "a")

        ctl = RevealController(make_board(2, 2), placeholder="#")
        self.assertEqual(ctl.display_text(0, 1), "#")


if __name__ == "__main__":
    unittest.main(verbosity=2)
