"""
Abstract Evaluator Interface

This module defines the abstract base class for all static estimators.
The search engines only see this interface, so evaluators can be swapped
without touching the search code.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always scores from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Won positions return +/-WIN_SCORE

The side to move is not an input: a board scores the same whoever is
about to play.
"""

from abc import ABC, abstractmethod
from typing import Optional

from jumpy_engine.board.board import Board

# Evaluation constants
WIN_SCORE = 100  # White king exited / Black king exited
INFINITY = 100000  # Search window sentinel, beyond any reachable score


class Evaluator(ABC):
    """
    Abstract base class for static estimation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method.

    Methods:
        evaluate(board): Returns an integer score for the position
    """

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """
        Evaluate a board from White's perspective.

        Args:
            board: Jumpy3 Board to evaluate

        Returns:
            int: Score, higher is better for White
        """
        pass

    def evaluate_terminal(self, board: Board) -> Optional[int]:
        """
        Score won positions.

        Returns:
            WIN_SCORE if White has won, -WIN_SCORE if Black has won,
            None if the game is still running
        """
        if board.is_white_win():
            return WIN_SCORE
        if board.is_black_win():
            return -WIN_SCORE
        return None

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
