"""
Piece and Player Model

Primitive value types for the Jumpy3 board.

Piece Symbols:
    W: White king      B: Black king
    w: White pawn      b: Black pawn
    x: Empty cell

The symbols are only used when reading or writing board strings. Inside the
engine, pieces are compared by enum identity.
"""

from enum import Enum


class InvalidBoardError(ValueError):
    """Raised when a board string or cell sequence is malformed."""


class Piece(Enum):
    """Contents of a single board cell."""

    WHITE_KING = "W"
    WHITE_PAWN = "w"
    BLACK_KING = "B"
    BLACK_PAWN = "b"
    EMPTY = "x"

    @classmethod
    def from_char(cls, char: str) -> "Piece":
        """
        Convert a board character to its Piece.

        Args:
            char: One of W, w, B, b, x (case-sensitive)

        Returns:
            Matching Piece

        Raises:
            InvalidBoardError: For any other character
        """
        try:
            return cls(char)
        except ValueError:
            raise InvalidBoardError(
                f"Invalid piece character: {char!r}. Valid values: W, w, B, b, x"
            ) from None

    @property
    def is_white(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.WHITE_PAWN)

    @property
    def is_black(self) -> bool:
        return self in (Piece.BLACK_KING, Piece.BLACK_PAWN)

    @property
    def is_king(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.BLACK_KING)

    @property
    def is_pawn(self) -> bool:
        return self in (Piece.WHITE_PAWN, Piece.BLACK_PAWN)

    def swap_color(self) -> "Piece":
        """Return the same kind of piece for the other side (Empty stays Empty)."""
        return _COLOR_SWAP[self]


_COLOR_SWAP = {
    Piece.WHITE_KING: Piece.BLACK_KING,
    Piece.BLACK_KING: Piece.WHITE_KING,
    Piece.WHITE_PAWN: Piece.BLACK_PAWN,
    Piece.BLACK_PAWN: Piece.WHITE_PAWN,
    Piece.EMPTY: Piece.EMPTY,
}


class Player(Enum):
    """Side to move. White maximizes, Black minimizes."""

    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> "Player":
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    @property
    def king(self) -> Piece:
        return Piece.WHITE_KING if self is Player.WHITE else Piece.BLACK_KING

    @property
    def pawn(self) -> Piece:
        return Piece.WHITE_PAWN if self is Player.WHITE else Piece.BLACK_PAWN

    def owns(self, piece: Piece) -> bool:
        """True if the piece belongs to this side."""
        return piece.is_white if self is Player.WHITE else piece.is_black
