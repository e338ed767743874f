"""
Board Module

This module holds the Jumpy3 board model: pieces, players, immutable board
states with move generation, input validation and a tensor view used by
the evaluators.

Key Components:
    - Piece / Player: Cell contents and side to move
    - Board: 16-cell immutable board with move generation
    - validate_board_string: Setup-rule checks for raw input
    - board_to_tensor: Converts a Board to a (4, 16) numpy array

Data Flow:
    "WwwwxxxxxxxxbbbB" → validate_board_string() → Board → generate_moves_for()
"""

from jumpy_engine.board.pieces import InvalidBoardError, Piece, Player
from jumpy_engine.board.board import BOARD_SIZE, Board
from jumpy_engine.board.validation import validate_board_string
from jumpy_engine.board.representation import board_to_tensor, tensor_to_board

__all__ = [
    'BOARD_SIZE',
    'Board',
    'InvalidBoardError',
    'Piece',
    'Player',
    'board_to_tensor',
    'tensor_to_board',
    'validate_board_string',
]
