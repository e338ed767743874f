"""
MiniMax Search

This module implements plain depth-limited MiniMax for Jumpy3. Every node
of the tree down to the requested depth is visited exactly once, which
makes it the reference the Alpha-Beta engine is checked against.

Key Concepts:
    - White maximizes the static estimate, Black minimizes it
    - Leaves: depth 0, a won position, or a side with no legal move
    - Ties keep the first move seen in generation order

Algorithm Complexity:
    - O(b^d) where b=branching factor (at most 4 pieces per side), d=depth

References:
    - Minimax: https://www.chessprogramming.org/Minimax
"""

import logging

from jumpy_engine.board.board import Board
from jumpy_engine.board.pieces import Player
from jumpy_engine.evaluation.base import INFINITY, Evaluator
from jumpy_engine.search.result import SearchResult

logger = logging.getLogger(__name__)


class MiniMaxSearch:
    """
    Depth-limited MiniMax engine.

    Attributes:
        evaluator: Static estimator applied at the leaves
    """

    name = "MiniMax"

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

        result = self.search(board, depth, player is Player.WHITE, player)

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
        maximizing_player: bool,
        player: Player,
    ) -> SearchResult:
        """
        Recursive MiniMax step.

        Args:
            board: Current position
            depth: Remaining depth (decrements each recursive call)
            maximizing_player: True if the side to move maximizes the score
            player: Side to move

        Returns:
            SearchResult for this node
        """
        # Base case: leaf node or won position
        if depth == 0 or board.is_terminal():
            return SearchResult(self.evaluator.evaluate(board), None, 1)

        moves = board.generate_moves_for(player)
        if not moves:
            return SearchResult(self.evaluator.evaluate(board), None, 1)

        best_score = -INFINITY if maximizing_player else INFINITY
        best_board = None
        positions = 0

        for move in moves:
            result = self.search(move, depth - 1, not maximizing_player, player.opposite())
            positions += result.positions_evaluated

            if maximizing_player:
                if result.estimate > best_score:
                    best_score = result.estimate
                    best_board = move
            else:
                if result.estimate < best_score:
                    best_score = result.estimate
                    best_board = move

        return SearchResult(best_score, best_board, positions)
