"""
Jeopardy core Python package.

Pure-logic pieces of the trivia board, kept apart from the Flask app so they
can be tested without a server or network access.
Modules:
- board.py: Board, Category, Clue, RevealState, cell ids
- reveal.py: the per-clue reveal state machine and RevealController
- selector.py: random category/clue selection from a trivia source
- source.py: TriviaSource protocol and the HTTP client
- session.py: GameSession (current board, restart)
- config.py: Settings from the environment, logging setup
- errors.py: exception types
"""
