"""
Basic Static Estimation

Scores a position by how far both kings have advanced:

    white_king + black_king - 15

White's king wants a high index (it exits on the right), Black's king wants
a low index (it exits on the left). The two cancel out when both kings are
the same distance from their exits.
"""

from jumpy_engine.board.board import LAST_INDEX, Board
from jumpy_engine.evaluation.base import Evaluator


class BasicEvaluator(Evaluator):
    """King-advancement evaluator."""

    def evaluate(self, board: Board) -> int:
        terminal_score = self.evaluate_terminal(board)
        if terminal_score is not None:
            return terminal_score

        return board.white_king_position + board.black_king_position - LAST_INDEX
