"""Per-player score history, kept from highest to lowest."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .dot import render_dot


@dataclass
class ScoreEntry:
    """One finished game for a player."""

    player: str
    score: int


class ScoreList:
    """Scores in descending order; a new score goes before equal ones."""

    def __init__(self) -> None:
        self._entries: list[ScoreEntry] = []

    def insert(self, player: str, score: int) -> ScoreEntry:
        """Insert a score at its ordered position and return the entry."""
        entry = ScoreEntry(player, score)
        index = sum(1 for existing in self._entries if existing.score > score)
        self._entries.insert(index, entry)
        return entry

    def is_empty(self) -> bool:
        """Whether no scores are recorded."""
        return not self._entries

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_dot(self) -> str:
        """Graphviz description of the list."""
        lines = ["digraph G{ \n", "rankdir=LR \n", "node[ shape = box] \n"]
        lines.extend(
            f'{i}[label = "{entry.player} Puntaje: {entry.score}" width=2.0 ]; \n'
            for i, entry in enumerate(self._entries)
        )
        lines.extend(f"{i} -> {i + 1} \n" for i in range(len(self._entries) - 1))
        lines.append("}")
        return "".join(lines)

    def render(self, directory: str | Path | None = None) -> Path:
        """Write the score report; an empty list cannot be drawn."""
        if self.is_empty():
            raise ValueError("score list is empty, nothing to draw")
        return render_dot(self.to_dot(), "puntajeIndividual", directory)