"""The word dictionary and the board's special squares."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .dot import render_dot

DOUBLE = "doble"
TRIPLE = "triple"

_MULTIPLIERS = {DOUBLE: 2, TRIPLE: 3}


class Dictionary:
    """The words accepted in a game, in the order they were loaded."""

    def __init__(self) -> None:
        self._words: list[str] = []

    def add(self, word: str) -> int:
        """Add a word and return the id it was given."""
        self._words.append(word)
        return len(self._words) - 1

    def validate(self, word: str) -> bool:
        """Whether ``word`` is exactly one of the dictionary words."""
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.validate(word)

    def reset(self) -> None:
        """Forget every word; ids start again from zero."""
        self._words.clear()

    def is_empty(self) -> bool:
        """Whether no words are loaded."""
        return not self._words

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def to_dot(self) -> str:
        """Graphviz description of the circular word list."""
        count = len(self._words)
        lines = ["digraph G{ \n", "rankdir=LR \n", "node[ shape = box] \n"]
        lines.extend(
            f'{i}[label = "{word}" width=2.0 ]; \n' for i, word in enumerate(self._words)
        )
        for i in range(count - 1):
            lines.append(f"{i} -> {i + 1}[dir = back]; \n")
            lines.append(f"{i} -> {i + 1} \n")
        lines.append(f"0 -> {count - 1}[dir = back]; \n")
        lines.append(f"0 -> {count - 1} \n")
        lines.append("}")
        return "".join(lines)

    def render(self, directory: str | Path | None = None) -> Path:
        """Write the dictionary report; an empty dictionary cannot be drawn."""
        if self.is_empty():
            raise ValueError("dictionary is empty, nothing to draw")
        return render_dot(self.to_dot(), "ReporteDiccionario", directory)


@dataclass
class SpecialSquare:
    """A square whose letter counts double or triple."""

    kind: str
    x: int
    y: int


class SpecialSquares:
    """The double and triple squares of the board."""

    def __init__(self) -> None:
        self._squares: list[SpecialSquare] = []

    def add(self, kind: str, x: int, y: int) -> SpecialSquare:
        """Record a special square of the given kind."""
        square = SpecialSquare(kind, x, y)
        self._squares.append(square)
        return square

    def score(self, x: int, y: int, points: int) -> int:
        """Points earned by a tile worth ``points`` placed at (x, y).

        Every matching double or triple square adds the multiplied value;
        a square with no match adds the plain value.
        """
        total = 0
        matched = False
        for square in self._squares:
            factor = _MULTIPLIERS.get(square.kind)
            if factor is not None and square.x == x and square.y == y:
                total += points * factor
                matched = True
        return total if matched else points

    def reset(self) -> None:
        """Forget every special square."""
        self._squares.clear()

    def __iter__(self) -> Iterator[SpecialSquare]:
        return iter(list(self._squares))

    def __len__(self) -> int:
        return len(self._squares)