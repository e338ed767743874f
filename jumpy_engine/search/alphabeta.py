"""
Alpha-Beta Search

MiniMax with alpha-beta pruning. Returns the same best move and estimate as
MiniMaxSearch for every input; only the number of evaluated positions
shrinks.

Key Concepts:
    - alpha: best score the maximizer is already guaranteed
    - beta: best score the minimizer is already guaranteed
    - Once beta <= alpha, the remaining siblings cannot change the result

The window is tightened after the current child has been fully searched,
so the child that triggers a cutoff is always counted. Moves are searched
in generation order; there is no move ordering.

References:
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging

from jumpy_engine.board.board import Board
from jumpy_engine.board.pieces import Player
from jumpy_engine.evaluation.base import INFINITY, Evaluator
from jumpy_engine.search.result import SearchResult

logger = logging.getLogger(__name__)


class AlphaBetaSearch:
    """
    Depth-limited MiniMax engine with alpha-beta pruning.

    Attributes:
        evaluator: Static estimator applied at the leaves
    """

    name = "AlphaBeta"

    def __init__(self, evaluator: Evaluator):
        self.evaluator = evaluator

    def compute_best_move(self, board: Board, depth: int, player: Player) -> SearchResult:
        """
        Find the best move for player.

        Args:
            board: Position to search from
            depth: Search depth in plies
            player: WHITE (maximizing) or BLACK (minimizing)

        Returns:
            SearchResult with the best successor board, its estimate and
            the number of positions evaluated

        Raises:
            ValueError: If depth is negative
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")

        result = self.search(board, depth, -INFINITY, INFINITY, player is Player.WHITE, player)

        logger.debug(
            f"{self.name} search complete: board={board}, depth={depth}, player={player.name}, "
            f"best={result.best_board}, estimate={result.estimate}, "
            f"positions={result.positions_evaluated}"
        )
        return result

    def search(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing_player: bool,
        player: Player,
    ) -> SearchResult:
        """
        Recursive Alpha-Beta step.

        Args:
            board: Current position
            depth: Remaining depth (decrements each recursive call)
            alpha: Best score already guaranteed to the maximizer
            beta: Best score already guaranteed to the minimizer
            maximizing_player: True if the side to move maximizes the score
            player: Side to move

        Returns:
            SearchResult for this node
        """
        if depth == 0 or board.is_terminal():
            return SearchResult(self.evaluator.evaluate(board), None, 1)

        moves = board.generate_moves_for(player)
        if not moves:
            return SearchResult(self.evaluator.evaluate(board), None, 1)

        best_score = -INFINITY if maximizing_player else INFINITY
        best_board = None
        positions = 0

        for move in moves:
            result = self.search(
                move,
                depth - 1,
                alpha,
                beta,
                not maximizing_player,
                player.opposite(),
            )
            positions += result.positions_evaluated

            if maximizing_player:
                if result.estimate > best_score:
                    best_score = result.estimate
                    best_board = move
                alpha = max(alpha, best_score)
            else:
                if result.estimate < best_score:
                    best_score = result.estimate
                    best_board = move
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        return SearchResult(best_score, best_board, positions)
