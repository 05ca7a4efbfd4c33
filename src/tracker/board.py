"""The board grid: which piece stands on which of the 64 squares"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.core.exceptions import InvalidBoardError
from src.tracker.pieces import FEN_TO_PIECE, Color, Piece, PieceType
from src.tracker.square import BOARD_DIMENSIONS, RANK_DIGITS, Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT = "/".join(["8"] * BOARD_DIMENSIONS[1])

Grid = list[list[Optional[Piece]]]


def empty_grid() -> Grid:
    return [[None] * BOARD_DIMENSIONS[0] for _ in range(BOARD_DIMENSIONS[1])]


def squares_in_scan_order() -> Iterator[Square]:
    """Row-major: row 0 (1st rank) first, and from the a-file to the h-file within a row"""
    for row in range(BOARD_DIMENSIONS[1]):
        for col in range(BOARD_DIMENSIONS[0]):
            yield Square.from_grid(row, col)


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls(empty_grid())

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_PLACEMENT)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.
        """
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise InvalidBoardError(
                f"Placement {fen_str!r} must have {BOARD_DIMENSIONS[1]} ranks separated by '/'."
            )

        board = cls.empty()
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 1
            for character in fen_one_rank:
                if character in RANK_DIGITS:
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
                    continue
                if character.lower() not in FEN_TO_PIECE:
                    raise InvalidBoardError(
                        f"Unknown piece {character!r} in placement {fen_str!r}."
                    )
                if file > BOARD_DIMENSIONS[0]:
                    raise InvalidBoardError(
                        f"Rank {rank} of placement {fen_str!r} has more than {BOARD_DIMENSIONS[0]} files."
                    )
                board.place(Square(file, rank), Piece.from_fen(character))
                file += 1

            if file != BOARD_DIMENSIONS[0] + 1:
                raise InvalidBoardError(
                    f"Rank {rank} of placement {fen_str!r} does not cover exactly {BOARD_DIMENSIONS[0]} files."
                )
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1], 0, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(1, BOARD_DIMENSIONS[0] + 1):
            piece = self.piece(Square(file, rank))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def copy(self) -> Self:
        return deepcopy(self)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def place(self, square: Square, piece: Piece) -> Optional[Piece]:
        """Put a piece on a square (keeping its label in sync). Returns whatever stood there before."""
        replaced = self.piece(square)
        piece.position = square.to_algebraic()
        self.grid[square.row][square.col] = piece
        return replaced

    def remove_piece(self, square: Square) -> Optional[Piece]:
        removed = self.piece(square)
        self.grid[square.row][square.col] = None
        return removed

    def move_piece(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Update the position on the board. Returns the piece that got replaced on the target square (if any)."""
        piece_that_moved = self.remove_piece(from_square)
        if piece_that_moved is None:
            raise InvalidBoardError(
                f"No piece to move on {from_square.to_algebraic()}."
            )
        return self.place(to_square, piece_that_moved)

    def occupied_squares(self) -> list[Square]:
        """In scan order"""
        return [
            square
            for square in squares_in_scan_order()
            if self.piece(square) is not None
        ]

    def locate_pieces(
        self, piece_type: PieceType, color: Optional[Color] = None
    ) -> list[Square]:
        return [
            square
            for square in self.occupied_squares()
            if self._matches(self.piece(square), piece_type, color)
        ]

    def has_piece(self, square: Square, piece_type: PieceType, color: Color) -> bool:
        return self._matches(self.piece(square), piece_type, color)

    def sync_positions(self) -> None:
        """Rewrite every piece's label from the cell it occupies"""
        for square in self.occupied_squares():
            piece = self.piece(square)
            assert piece is not None
            piece.position = square.to_algebraic()

    def validate(self) -> None:
        """8x8 grid, and no piece object sitting in two cells at once."""
        if len(self.grid) != BOARD_DIMENSIONS[1] or any(
            len(row) != BOARD_DIMENSIONS[0] for row in self.grid
        ):
            raise InvalidBoardError(
                f"Board must be {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]}."
            )

        seen: set[int] = set()
        for square in self.occupied_squares():
            piece = self.piece(square)
            if not isinstance(piece, Piece):
                raise InvalidBoardError(
                    f"Square {square.to_algebraic()} holds {piece!r}, which is not a piece."
                )
            if id(piece) in seen:
                raise InvalidBoardError(
                    f"The same piece occupies more than one square (seen again on {square.to_algebraic()})."
                )
            seen.add(id(piece))

    @staticmethod
    def _matches(
        piece: Optional[Piece], piece_type: PieceType, color: Optional[Color]
    ) -> bool:
        if piece is None or piece.type != piece_type:
            return False
        return color is None or piece.color == color
