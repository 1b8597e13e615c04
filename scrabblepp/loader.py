"""Loading a game configuration: board size, special squares and dictionary."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from .board import Board
from .dictionary import DOUBLE, TRIPLE, Dictionary, SpecialSquares

DEFAULT_DIRECTORY = "carga"


class ConfigError(ValueError):
    """Raised when a configuration file is missing or malformed."""


def _squares(data: Mapping[str, Any], kind: str) -> list[tuple[int, int]]:
    casillas = data.get("casillas", {}) or {}
    if not isinstance(casillas, Mapping):
        raise ConfigError("'casillas' must be an object")
    entries = casillas.get(kind, []) or []
    try:
        return [(int(entry["x"]), int(entry["y"])) for entry in entries]
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"invalid '{kind}' square: {exc}") from exc


def _words(data: Mapping[str, Any]) -> list[str]:
    entries = data.get("diccionario", []) or []
    try:
        return [str(entry["palabra"]) for entry in entries]
    except (KeyError, TypeError) as exc:
        raise ConfigError(f"invalid dictionary entry: {exc}") from exc


def apply_config(
    data: Mapping[str, Any],
    dictionary: Dictionary,
    board: Board,
    specials: SpecialSquares,
) -> int:
    """Fill the structures from parsed configuration data.

    Double squares are placed before triple ones, then the dictionary words
    are added in order. Returns the board dimension.
    """
    if not isinstance(data, Mapping):
        raise ConfigError("configuration must be a JSON object")
    try:
        dimension = int(data["dimension"])
    except KeyError as exc:
        raise ConfigError("configuration has no 'dimension'") from exc
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid dimension: {data['dimension']!r}") from exc

    doubles = _squares(data, "dobles")
    triples = _squares(data, "triples")
    words = _words(data)

    try:
        for kind, squares in ((DOUBLE, doubles), (TRIPLE, triples)):
            for x, y in squares:
                board.insert(y, x, 0, " ", kind)
                specials.add(kind, x, y)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    for word in words:
        dictionary.add(word)
    return dimension


def load(
    name: str,
    dictionary: Dictionary,
    board: Board,
    specials: SpecialSquares,
    directory: str | Path | None = None,
) -> int:
    """Read ``<directory>/<name>`` as JSON and apply it; return the dimension."""
    folder = Path(directory) if directory is not None else Path(DEFAULT_DIRECTORY)
    path = folder / name
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"configuration file not found: {path}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc
    return apply_config(data, dictionary, board, specials)