"""
Jumpy3 Board State and Move Generation

The board is a 16-cell track indexed from 0 (left) to 15 (right). White
pieces advance to the right and Black pieces advance to the left. A king
that steps off the far end of the track wins the game for its side.

Move Rules (White, piece at index i):
    1. i == 15: the piece exits the board
    2. Cell i+1 empty: single step right
    3. Otherwise jump to the first empty cell to the right. Jumping over
       exactly one Black piece captures it: the captured piece is sent to
       the rightmost empty cell of the resulting board.

Black moves are generated by flipping the board (reverse the cells and swap
colours), generating White moves, and flipping each result back.

Boards are immutable values. Every generated move is a new Board.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from jumpy_engine.board.pieces import InvalidBoardError, Piece, Player

BOARD_SIZE = 16
LAST_INDEX = BOARD_SIZE - 1


@dataclass(frozen=True)
class Board:
    """
    Immutable Jumpy3 board.

    Attributes:
        cells: Tuple of 16 Pieces, leftmost cell first
    """

    cells: Tuple[Piece, ...]

    def __post_init__(self):
        if len(self.cells) != BOARD_SIZE:
            raise InvalidBoardError(
                f"Invalid board - Must contain {BOARD_SIZE} positions, got {len(self.cells)}"
            )

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from its 16-character string form.

        Args:
            text: Board string using W/w/B/b/x, e.g. "WwwwxxxxxxxxbbbB"

        Returns:
            Board

        Raises:
            InvalidBoardError: On bad characters or wrong length
        """
        return cls(tuple(Piece.from_char(char) for char in text))

    def to_string(self) -> str:
        return "".join(piece.value for piece in self.cells)

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Piece:
        return self.cells[index]

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------

    def generate_moves_for(self, side: Player) -> List["Board"]:
        """
        Generate every successor reachable by moving one of side's pieces.

        Moves are ordered by the origin index of the moved piece (ascending,
        as seen from the moving side).
        """
        if side is Player.WHITE:
            return self.generate_white_moves()
        return self.generate_black_moves()

    def generate_white_moves(self) -> List["Board"]:
        moves = []
        for i, piece in enumerate(self.cells):
            if not piece.is_white:
                continue
            move = self._white_move_from(i, piece)
            if move is not None:
                moves.append(move)
        return moves

    def _white_move_from(self, i: int, piece: Piece) -> Optional["Board"]:
        cells = list(self.cells)

        # Exit from the last cell
        if i == LAST_INDEX:
            cells[i] = Piece.EMPTY
            return Board(tuple(cells))

        # Single step
        if cells[i + 1] is Piece.EMPTY:
            cells[i] = Piece.EMPTY
            cells[i + 1] = piece
            return Board(tuple(cells))

        # Jump to the first empty cell
        j = i + 1
        while j < BOARD_SIZE and cells[j] is not Piece.EMPTY:
            j += 1
        if j == BOARD_SIZE:
            return None

        cells[i] = Piece.EMPTY
        cells[j] = piece

        jumped = self.cells[i + 1]
        if j == i + 2 and jumped.is_black:
            # Jumped cell is cleared even when there is nowhere to send the piece
            cells[i + 1] = Piece.EMPTY
            k = _rightmost_empty(cells, exclude=i + 1)
            if k is not None:
                cells[k] = jumped

        return Board(tuple(cells))

    def flip(self) -> "Board":
        """Mirror the board: reverse cell order and swap White/Black pieces."""
        return Board(tuple(piece.swap_color() for piece in reversed(self.cells)))

    def generate_black_moves(self) -> List["Board"]:
        return [move.flip() for move in self.flip().generate_white_moves()]

    # ------------------------------------------------------------------
    # Game state
    # ------------------------------------------------------------------

    def is_white_win(self) -> bool:
        """True if the Black king has left the board."""
        return Piece.BLACK_KING not in self.cells

    def is_black_win(self) -> bool:
        """True if the White king has left the board."""
        return Piece.WHITE_KING not in self.cells

    def is_terminal(self) -> bool:
        return self.is_white_win() or self.is_black_win()

    def king_position(self, player: Player) -> Optional[int]:
        """
        Index of player's king.

        Returns:
            Cell index, or None if the king is no longer on the board
        """
        try:
            return self.cells.index(player.king)
        except ValueError:
            return None

    @property
    def white_king_position(self) -> Optional[int]:
        return self.king_position(Player.WHITE)

    @property
    def black_king_position(self) -> Optional[int]:
        return self.king_position(Player.BLACK)

    def count(self, piece: Piece) -> int:
        return self.cells.count(piece)


def _rightmost_empty(cells: List[Piece], exclude: int) -> Optional[int]:
    """Index of the rightmost empty cell other than exclude, or None."""
    for k in range(LAST_INDEX, -1, -1):
        if k != exclude and cells[k] is Piece.EMPTY:
            return k
    return None
