"""The Game board implements all rules that only depend on the `position` (which cells hold which mark)"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.shared_types import Player
from src.morris.position import BOARD_SIZE, Position

Cell = Optional[Player]

# Positions reachable by sliding a piece one step. The center connects to everything.
ADJACENCY: dict[Position, tuple[Position, ...]] = {
    0: (1, 3, 4),
    1: (0, 2, 4),
    2: (1, 4, 5),
    3: (0, 4, 6),
    4: (0, 1, 2, 3, 5, 6, 7, 8),
    5: (2, 4, 8),
    6: (3, 4, 7),
    7: (4, 6, 8),
    8: (4, 5, 7),
}

# Order matters: the first completed line decides the winner
WIN_LINES: tuple[tuple[Position, Position, Position], ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass
class Board:
    cells: list[Cell] = field(default_factory=lambda: [None] * BOARD_SIZE)

    @classmethod
    def from_marks(cls, marks: list[Optional[str]]) -> Self:
        """Build a board from the plain strings used in the GameModel ("X", "O" or None)."""
        if len(marks) != BOARD_SIZE:
            raise ValueError(f"A board needs {BOARD_SIZE} cells, got {len(marks)}.")
        return cls([Player(mark) if mark else None for mark in marks])

    def to_marks(self) -> list[Optional[str]]:
        return [cell.value if cell else None for cell in self.cells]

    def mark(self, position: Position) -> Cell:
        return self.cells[position]

    def is_empty(self, position: Position) -> bool:
        return self.cells[position] is None

    def place(self, player: Player, position: Position) -> None:
        self.cells[position] = player

    def slide(self, from_position: Position, to_position: Position) -> None:
        """Relocate whatever sits on from_position. Legality is checked by the Game."""
        self.cells[to_position] = self.cells[from_position]
        self.cells[from_position] = None

    def empty_neighbours(self, position: Position) -> list[Position]:
        """Empty positions one slide away, in adjacency order."""
        return [pos for pos in ADJACENCY[position] if self.is_empty(pos)]

    def winner(self) -> Optional[Player]:
        for a, b, c in WIN_LINES:
            mark = self.cells[a]
            if mark is not None and mark == self.cells[b] == self.cells[c]:
                return mark
        return None
