"""
A square on the board

(placed in its own module as multiple other modules need to import it)

Grid convention: row 0 is the 1st rank (White's back rank), column 0 is the a-file.
So grid[row][col] holds Square(file=col + 1, rank=row + 1).
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidNotationError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

FILE_LETTERS = ascii_lowercase[: BOARD_DIMENSIONS[0]]
RANK_DIGITS = "".join(str(rank) for rank in range(1, BOARD_DIMENSIONS[1] + 1))


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        if len(sq) != 2 or sq[0] not in FILE_LETTERS or sq[1] not in RANK_DIGITS:
            raise InvalidNotationError(f"Cannot decode {sq!r} as a square.")
        file = ord(sq[0]) - ord("a") + 1
        rank = int(sq[1])
        return cls(file, rank)

    @classmethod
    def from_grid(cls, row: int, col: int) -> Square:
        return cls(file=col + 1, rank=row + 1)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    @property
    def row(self) -> int:
        return self.rank - 1

    @property
    def col(self) -> int:
        return self.file - 1
