# scrabblepp

The building blocks of a two-player Scrabble game: a sparse board, tile
racks, a word dictionary with double and triple squares, a binary search
tree of player names, ordered score histories, and word placement with
scoring. A JSON game file supplies the special squares and the dictionary.
Every structure can describe itself as a Graphviz diagram.

## Installing

```
pip install .
```

Turning the reports into PNG images needs the Graphviz `dot` program on your
`PATH`. Without it, only the `.dot` files are written.

## Modules

- `scrabblepp.board`: `Board`, a sparse grid of `Cell` objects keyed by row
  and column. `insert(row, col, points, letter, kind)` places a letter; an
  occupied cell keeps its kind and takes the new letter and points. Position
  0 on either axis creates only a header; negative positions raise
  `ValueError`. `cell`, `rows`, `columns`, `row_cells`, `column_cells`,
  `is_empty` and `reset` inspect and clear it.
- `scrabblepp.tiles`: `Tile` and `TileRack`, the ordered tiles of a player.
  `remove_at(index)` raises `IndexError` for an empty rack or a missing
  position; `word()` joins the letters.
- `scrabblepp.dictionary`: `Dictionary` of accepted words (`add`,
  `validate`, `reset`) and `SpecialSquares`, whose `score(x, y, points)`
  doubles or triples a tile's value on a special square.
- `scrabblepp.tree`: `PlayerTree`, player names in byte-wise order.
  `add` raises `DuplicatePlayerError` for a name already present;
  `inorder`, `preorder` and `postorder` return lists of names.
- `scrabblepp.scores`: `ScoreList` of `ScoreEntry`, kept from highest to
  lowest; a new score goes before equal ones.
- `scrabblepp.game`: `Player` (name, score, board, rack, score history),
  `place_word(board, specials, tiles, x, y, vertical)` which lays tiles and
  returns their points, and `winner(first, second)` which returns the player
  with more points or `None` on a draw.
- `scrabblepp.loader`: `apply_config(data, ...)` fills the structures from
  parsed JSON and returns the board dimension; `load(name, ..., directory)`
  reads `<directory>/<name>` (by default under `carga/`). Missing files and
  malformed data raise `ConfigError`.
- `scrabblepp.dot`: `render_dot(source, name, directory)` writes
  `<name>.dot` and runs `dot` to produce `<name>.png`.

## Game file format

```json
{
  "dimension": 15,
  "casillas": {
    "dobles": [{"x": 2, "y": 2}],
    "triples": [{"x": 1, "y": 1}]
  },
  "diccionario": [
    {"palabra": "casa"},
    {"palabra": "sol"}
  ]
}
```

## Example

```python
from scrabblepp.board import Board
from scrabblepp.dictionary import Dictionary, SpecialSquares
from scrabblepp.game import place_word
from scrabblepp.loader import apply_config
from scrabblepp.tiles import Tile

dictionary = Dictionary()
board = Board()
specials = SpecialSquares()
apply_config(
    {
        "dimension": 15,
        "casillas": {"dobles": [{"x": 2, "y": 2}], "triples": []},
        "diccionario": [{"palabra": "sol"}],
    },
    dictionary,
    board,
    specials,
)
print(dictionary.validate("sol"))      # True
print(specials.score(2, 2, 3))         # 6

tiles = [Tile("s", 1), Tile("o", 1), Tile("l", 1)]
print(place_word(board, specials, tiles, x=1, y=2))   # 4: "o" sits on the double square
print(board.cell(2, 2).letter)                          # o
```

Each structure offers `to_dot()`, which returns the Graphviz source, and
`render(directory)`, which writes the `.dot` file and runs `dot` on it.
Rendering an empty rack, score list, dictionary or board raises
`ValueError`; an empty `PlayerTree` renders nothing and returns `None`.

## What this package does not do

There is no command to start and no interactive menu: the package cannot be
played from the terminal as it stands. It has no bag of tiles to draw from,
no handling of turns (drawing, exchanging or returning tiles, checking a
formed word before placing it), and no table of standings across matches.
These have to be built on top of the structures above.