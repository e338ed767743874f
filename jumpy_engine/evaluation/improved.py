"""
Improved Static Estimation

Multi-factor heuristic, scored from White's perspective.

Components:
    1. King advancement: 3 * (white_king + black_king - 15)
    2. Pawn position: sum(White pawn indices) - sum(15 - Black pawn index)
    3. Path analysis: 2 * (Black pawns - White pawns) right of the White king
    4. Pawn count: 2 * (White pawns - Black pawns)
    5. Clear path: -3 per White pawn, +2 per Black pawn right of the White king
    6. Exit proximity: +50 if White king >= 13, -50 if Black king <= 2

Example:
    White king at 12, Black king at 3:
        King term: 3 * (12 + 3 - 15) = 0
    White pawns at 10, 11 and a Black pawn at 4:
        Pawn term: (10 + 11) - (15 - 4) = +10
"""

import numpy as np

from jumpy_engine.board.board import LAST_INDEX, Board
from jumpy_engine.board.representation import (
    BLACK_PAWN_CHANNEL,
    WHITE_PAWN_CHANNEL,
    board_to_tensor,
    piece_indices,
)
from jumpy_engine.evaluation.base import Evaluator

KING_WEIGHT = 3
PATH_WEIGHT = 2
PAWN_COUNT_WEIGHT = 2
BLOCKING_PAWN_PENALTY = -3
CAPTURABLE_PAWN_BONUS = 2
EXIT_BONUS = 50
WHITE_EXIT_ZONE = 13
BLACK_EXIT_ZONE = 2


class ImprovedEvaluator(Evaluator):
    """
    Enhanced evaluator combining king, pawn and path terms.

    Pieces are located through the board tensor so every term is a numpy
    reduction over one channel.
    """

    def evaluate(self, board: Board) -> int:
        terminal_score = self.evaluate_terminal(board)
        if terminal_score is not None:
            return terminal_score

        white_king = board.white_king_position
        black_king = board.black_king_position

        tensor = board_to_tensor(board)
        white_pawns = piece_indices(tensor, WHITE_PAWN_CHANNEL)
        black_pawns = piece_indices(tensor, BLACK_PAWN_CHANNEL)

        score = KING_WEIGHT * (white_king + black_king - LAST_INDEX)
        score += int(np.sum(white_pawns)) - int(np.sum(LAST_INDEX - black_pawns))

        # Pawns between the White king and the exit
        blocking_white = int(np.count_nonzero(white_pawns > white_king))
        capturable_black = int(np.count_nonzero(black_pawns > white_king))
        score += PATH_WEIGHT * (capturable_black - blocking_white)

        score += PAWN_COUNT_WEIGHT * (len(white_pawns) - len(black_pawns))

        score += BLOCKING_PAWN_PENALTY * blocking_white
        score += CAPTURABLE_PAWN_BONUS * capturable_black

        if white_king >= WHITE_EXIT_ZONE:
            score += EXIT_BONUS
        if black_king <= BLACK_EXIT_ZONE:
            score -= EXIT_BONUS

        return score
