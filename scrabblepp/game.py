"""Players of a match, word placement and scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .board import PLAIN, Board
from .dictionary import SpecialSquares
from .scores import ScoreList
from .tiles import Tile, TileRack


@dataclass
class Player:
    """One of the two players of a match."""

    name: str = ""
    score: int = 0
    board: Board = field(default_factory=Board)
    rack: TileRack = field(default_factory=TileRack)
    scores: ScoreList = field(default_factory=ScoreList)

    def reset(self) -> None:
        """Prepare the player for a new match: fresh board, rack, history and score."""
        self.board = Board()
        self.rack = TileRack()
        self.scores = ScoreList()
        self.score = 0
        self.name = ""


def place_word(
    board: Board,
    specials: SpecialSquares,
    tiles: Iterable[Tile],
    x: int,
    y: int,
    vertical: bool = False,
) -> int:
    """Lay ``tiles`` on the board starting at column ``x``, row ``y``.

    Tiles go rightwards, or downwards when ``vertical`` is true. Each tile
    earns its points, doubled or tripled on special squares. Returns the
    points of the word.
    """
    total = 0
    for tile in list(tiles):
        board.insert(y, x, tile.points, tile.letter, PLAIN)
        total += specials.score(x, y, tile.points)
        if vertical:
            y += 1
        else:
            x += 1
    return total


def winner(first: Player, second: Player) -> Player | None:
    """The player with more points, or None when the match is a draw."""
    if first.score > second.score:
        return first
    if second.score > first.score:
        return second
    return None