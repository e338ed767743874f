"""
Tensor Representation of a Jumpy3 Board

Converts a Board into a stack of binary planes, one per piece kind, so that
evaluators can locate pieces with vectorized numpy operations.

4-Channel Representation:
    0: White King       2: Black King
    1: White Pawns      3: Black Pawns

Each channel is a length-16 binary mask where 1 indicates piece presence.
Empty cells are the positions where every channel is 0.
"""

import numpy as np

from jumpy_engine.board.board import BOARD_SIZE, Board
from jumpy_engine.board.pieces import Piece

WHITE_KING_CHANNEL = 0
WHITE_PAWN_CHANNEL = 1
BLACK_KING_CHANNEL = 2
BLACK_PAWN_CHANNEL = 3

PIECE_TO_CHANNEL = {
    Piece.WHITE_KING: WHITE_KING_CHANNEL,
    Piece.WHITE_PAWN: WHITE_PAWN_CHANNEL,
    Piece.BLACK_KING: BLACK_KING_CHANNEL,
    Piece.BLACK_PAWN: BLACK_PAWN_CHANNEL,
}

NUM_CHANNELS = len(PIECE_TO_CHANNEL)


def board_to_tensor(board: Board) -> np.ndarray:
    """
    Convert a board to a 4-channel tensor.

    Args:
        board: Jumpy3 Board

    Returns:
        numpy array of shape (4, 16) with dtype float32
    """
    tensor = np.zeros((NUM_CHANNELS, BOARD_SIZE), dtype=np.float32)

    for index, piece in enumerate(board.cells):
        channel = PIECE_TO_CHANNEL.get(piece)
        if channel is not None:
            tensor[channel, index] = 1.0

    return tensor


def tensor_to_board(tensor: np.ndarray) -> Board:
    """
    Convert a 4-channel tensor back to a Board.

    This is the inverse of board_to_tensor().

    Args:
        tensor: numpy array of shape (4, 16)

    Returns:
        Board

    Raises:
        ValueError: If tensor has invalid shape or a cell is claimed twice
    """
    if tensor.shape != (NUM_CHANNELS, BOARD_SIZE):
        raise ValueError(
            f"Invalid tensor shape: {tensor.shape}. Expected ({NUM_CHANNELS}, {BOARD_SIZE})"
        )

    occupied = tensor > 0.5
    if np.any(occupied.sum(axis=0) > 1):
        cell = int(np.argmax(occupied.sum(axis=0) > 1))
        raise ValueError(f"Multiple pieces on cell {cell}")

    channel_to_piece = {v: k for k, v in PIECE_TO_CHANNEL.items()}
    cells = [Piece.EMPTY] * BOARD_SIZE

    for channel in range(NUM_CHANNELS):
        for index in np.flatnonzero(occupied[channel]):
            cells[int(index)] = channel_to_piece[channel]

    return Board(tuple(cells))


def piece_indices(tensor: np.ndarray, channel: int) -> np.ndarray:
    """Cell indices occupied in one channel, ascending."""
    return np.flatnonzero(tensor[channel] > 0.5)
