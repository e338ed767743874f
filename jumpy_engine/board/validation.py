"""
Board input validation.

Raw board strings coming from files or the command line are checked here
before the engine ever sees them. Boards produced by move generation are
trusted and never re-validated.
"""

import logging

from jumpy_engine.board.board import BOARD_SIZE, Board
from jumpy_engine.board.pieces import InvalidBoardError, Piece

logger = logging.getLogger(__name__)

MAX_PAWNS = 3


def validate_board_string(text: str) -> Board:
    """
    Validate a board string against the Jumpy3 setup rules.

    Args:
        text: Board string to validate

    Returns:
        The parsed Board

    Raises:
        InvalidBoardError: If any rule fails:
            - length is not 16
            - a character outside W, w, B, b, x
            - White or Black does not have exactly one king
            - more than 3 pawns of either colour
    """
    if len(text) != BOARD_SIZE:
        raise InvalidBoardError(
            f"Invalid board - Must contain {BOARD_SIZE} positions, got {len(text)}"
        )

    board = Board.from_string(text)

    if board.count(Piece.WHITE_KING) != 1:
        raise InvalidBoardError("Invalid White pieces - Exactly 1 king required")
    if board.count(Piece.BLACK_KING) != 1:
        raise InvalidBoardError("Invalid Black pieces - Exactly 1 king required")
    if board.count(Piece.WHITE_PAWN) > MAX_PAWNS:
        raise InvalidBoardError(f"Invalid White pawns - Maximum {MAX_PAWNS} allowed")
    if board.count(Piece.BLACK_PAWN) > MAX_PAWNS:
        raise InvalidBoardError(f"Invalid Black pawns - Maximum {MAX_PAWNS} allowed")

    logger.debug(f"Validated board {text}")
    return board
