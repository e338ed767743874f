"""Search result value."""

from dataclasses import dataclass
from typing import Optional

from jumpy_engine.board.board import Board


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one (sub)tree search.

    Attributes:
        estimate: Backed-up score of the searched position
        best_board: Successor board to play, None at leaves or with no legal move
        positions_evaluated: Number of static evaluations in the subtree
    """

    estimate: int
    best_board: Optional[Board]
    positions_evaluated: int
