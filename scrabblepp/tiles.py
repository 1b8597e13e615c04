"""A player's rack of letter tiles."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .dot import render_dot


@dataclass
class Tile:
    """A letter tile and the points it is worth."""

    letter: str
    points: int


class TileRack:
    """Ordered tiles held by a player, or taken from the rack during a turn."""

    def __init__(self) -> None:
        self._tiles: list[Tile] = []

    def append(self, letter: str, points: int) -> Tile:
        """Add a tile at the end of the rack."""
        tile = Tile(letter, points)
        self._tiles.append(tile)
        return tile

    def prepend(self, letter: str, points: int) -> Tile:
        """Add a tile at the start of the rack."""
        tile = Tile(letter, points)
        self._tiles.insert(0, tile)
        return tile

    def remove_at(self, index: int) -> Tile:
        """Take out and return the tile at ``index``.

        Raises IndexError when the rack is empty or the index does not exist.
        """
        if not self._tiles:
            raise IndexError("tile rack is empty")
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"no tile at position {index}")
        return self._tiles.pop(index)

    def word(self) -> str:
        """The letters of the rack joined in order."""
        return "".join(tile.letter for tile in self._tiles)

    def reset(self) -> None:
        """Drop every tile."""
        self._tiles.clear()

    def is_empty(self) -> bool:
        """Whether the rack holds no tiles."""
        return not self._tiles

    def __iter__(self) -> Iterator[Tile]:
        return iter(list(self._tiles))

    def __len__(self) -> int:
        return len(self._tiles)

    def to_dot(self) -> str:
        """Graphviz description of the rack."""
        lines = ["digraph G{ \n", "rankdir=LR \n", "node[ shape = box] \n"]
        lines.extend(
            f'{i}[label = "{tile.letter}" width=2.0 ]; \n'
            for i, tile in enumerate(self._tiles)
        )
        for i in range(len(self._tiles) - 1):
            lines.append(f"{i} -> {i + 1}[dir = back]; \n")
            lines.append(f"{i} -> {i + 1} \n")
        lines.append("}")
        return "".join(lines)

    def render(self, directory: str | Path | None = None) -> Path:
        """Write the rack report; an empty rack cannot be drawn."""
        if self.is_empty():
            raise ValueError("tile rack is empty, nothing to draw")
        return render_dot(self.to_dot(), "ReporteFichasJugador", directory)