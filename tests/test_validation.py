"""Tests for board input validation."""

import pytest

from jumpy_engine.board import Board, InvalidBoardError, validate_board_string


class TestValidateBoardString:
    """Test validate_board_string."""

    def test_valid_board(self):
        board = validate_board_string("WwwwxxxxxxxxbbbB")
        assert isinstance(board, Board)
        assert str(board) == "WwwwxxxxxxxxbbbB"

    def test_board_without_pawns_is_valid(self):
        validate_board_string("WxxxxxxxxxxxxxxB")

    def test_wrong_length(self):
        with pytest.raises(InvalidBoardError, match="16 positions"):
            validate_board_string("WwwwxxxxxxxbbbB")

    def test_invalid_character(self):
        with pytest.raises(InvalidBoardError, match="Invalid piece character"):
            validate_board_string("Wwwwxxxxxxxxbbbz")

    def test_two_white_kings(self):
        with pytest.raises(InvalidBoardError, match="White pieces"):
            validate_board_string("WWwwxxxxxxxxbbbB")

    def test_missing_black_king(self):
        with pytest.raises(InvalidBoardError, match="Black pieces"):
            validate_board_string("Wwwwxxxxxxxxbbbx")

    def test_too_many_white_pawns(self):
        with pytest.raises(InvalidBoardError, match="White pawns"):
            validate_board_string("WwwwwxxxxxxxbbbB")

    def test_too_many_black_pawns(self):
        with pytest.raises(InvalidBoardError, match="Black pawns"):
            validate_board_string("WwwwxxxxxxxbbbbB")
