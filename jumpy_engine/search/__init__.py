"""
Search Module

This module implements the Jumpy3 search engines. Both engines take an
evaluator at construction and expose the same compute_best_move() entry
point, so callers can swap them freely.

Key Components:
    - MiniMaxSearch: Full depth-limited MiniMax
    - AlphaBetaSearch: MiniMax with alpha-beta pruning (same answers, fewer evaluations)
    - SearchResult: (estimate, best_board, positions_evaluated)

"""

from jumpy_engine.search.result import SearchResult
from jumpy_engine.search.minimax import MiniMaxSearch
from jumpy_engine.search.alphabeta import AlphaBetaSearch

__all__ = ['SearchResult', 'MiniMaxSearch', 'AlphaBetaSearch']
