"""
Tests for the 4-channel board tensor.
"""

import numpy as np
import pytest

from jumpy_engine.board import Board, board_to_tensor, tensor_to_board
from jumpy_engine.board.representation import (
    BLACK_KING_CHANNEL,
    BLACK_PAWN_CHANNEL,
    WHITE_KING_CHANNEL,
    WHITE_PAWN_CHANNEL,
    piece_indices,
)


class TestBoardTensor:
    """Test suite for board_to_tensor / tensor_to_board."""

    def test_output_shape(self):
        tensor = board_to_tensor(Board.from_string("WwwwxxxxxxxxbbbB"))

        assert tensor.shape == (4, 16)
        assert tensor.dtype == np.float32

    def test_channels(self):
        tensor = board_to_tensor(Board.from_string("WwwwxxxxxxxxbbbB"))

        np.testing.assert_array_equal(piece_indices(tensor, WHITE_KING_CHANNEL), [0])
        np.testing.assert_array_equal(piece_indices(tensor, WHITE_PAWN_CHANNEL), [1, 2, 3])
        np.testing.assert_array_equal(piece_indices(tensor, BLACK_PAWN_CHANNEL), [12, 13, 14])
        np.testing.assert_array_equal(piece_indices(tensor, BLACK_KING_CHANNEL), [15])

    def test_empty_cells_have_no_channel(self):
        tensor = board_to_tensor(Board.from_string("WwwwxxxxxxxxbbbB"))
        assert tensor.sum() == 8.0
        assert tensor[:, 4:12].sum() == 0.0

    def test_inverse(self):
        board = Board.from_string("xwbWxxwxxBxxbxxx")
        assert tensor_to_board(board_to_tensor(board)) == board

    def test_invalid_shape(self):
        with pytest.raises(ValueError, match="Invalid tensor shape"):
            tensor_to_board(np.zeros((5, 16), dtype=np.float32))

    def test_cell_claimed_twice(self):
        tensor = board_to_tensor(Board.from_string("WwwwxxxxxxxxbbbB"))
        tensor[BLACK_PAWN_CHANNEL, 0] = 1.0

        with pytest.raises(ValueError, match="Multiple pieces on cell 0"):
            tensor_to_board(tensor)
