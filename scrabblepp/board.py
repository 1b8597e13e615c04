"""The game board: a sparse grid of letter cells with row and column headers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .dot import render_dot

PLAIN = "f"
_ROOT_ID = "Raiz"


@dataclass
class Cell:
    """A square of the board that holds a letter or is a special square."""

    row: int
    col: int
    points: int
    letter: str
    kind: str = PLAIN


class Board:
    """Sparse board keyed by row and column numbers.

    Row and column headers exist only for positions that were used. Position
    0 on either axis is the header line itself: inserting there creates the
    header of the other axis but stores no cell.
    """

    def __init__(self) -> None:
        self._rows: dict[int, dict[int, Cell]] = {}
        self._columns: set[int] = set()

    def insert(
        self, row: int, col: int, points: int, letter: str, kind: str = PLAIN
    ) -> Cell | None:
        """Place a letter at (row, col) and return the cell holding it.

        An occupied cell keeps its kind and takes the new letter and points.
        Returns None when either coordinate is 0. Negative coordinates raise
        ValueError.
        """
        row, col = int(row), int(col)
        if row < 0 or col < 0:
            raise ValueError(f"invalid board position ({row}, {col})")
        if col:
            self._columns.add(col)
        if row:
            self._rows.setdefault(row, {})
        if not row or not col:
            return None
        cells = self._rows[row]
        existing = cells.get(col)
        if existing is not None:
            existing.letter = letter
            existing.points = points
            return existing
        cell = Cell(row, col, points, letter, kind)
        cells[col] = cell
        return cell

    def cell(self, row: int, col: int) -> Cell | None:
        """The cell at (row, col), or None if nothing is there."""
        return self._rows.get(int(row), {}).get(int(col))

    def rows(self) -> list[int]:
        """Row numbers that have a header, in ascending order."""
        return sorted(self._rows)

    def columns(self) -> list[int]:
        """Column numbers that have a header, in ascending order."""
        return sorted(self._columns)

    def column_cells(self, col: int) -> list[Cell]:
        """Cells of one column from top to bottom."""
        col = int(col)
        return [
            self._rows[row][col] for row in self.rows() if col in self._rows[row]
        ]

    def row_cells(self, row: int) -> list[Cell]:
        """Cells of one row from left to right."""
        cells = self._rows.get(int(row), {})
        return [cells[col] for col in sorted(cells)]

    def is_empty(self) -> bool:
        """Whether no column has been created."""
        return not self._columns

    def reset(self) -> None:
        """Remove every header and cell."""
        self._rows.clear()
        self._columns.clear()

    def to_dot(self) -> str:
        """Graphviz description of the board."""
        rows = self.rows()
        columns = self.columns()
        row_ids = {row: f"f{i}" for i, row in enumerate(rows)}
        col_ids = {col: f"c{i}" for i, col in enumerate(columns)}

        out = [
            "digraph M{ \n",
            "node[ shape = box] \n",
            f'{_ROOT_ID}[label = "{_ROOT_ID}", width=1.5, group = 1]; \n \n',
        ]
        for row in rows:
            out.append(f'{row_ids[row]}[label = "{row}" width=2.0 , group = 1 ]; \n')
        for i in range(len(rows) - 1):
            out.append(f"f{i} -> f{i + 1}[dir = back]; \n")
            out.append(f"f{i} -> f{i + 1} \n")
        for i, col in enumerate(columns):
            out.append(f'c{i}[label = "{col}" width=2.0 , group = {i + 2} ]; \n')
        for i in range(len(columns) - 1):
            out.append(f"c{i} -> c{i + 1}[dir = back]; \n")
            out.append(f"c{i} -> c{i + 1} \n")

        out.append(" Raiz -> f0 [dir = back];  \n")
        out.append(" Raiz -> f0 ; \n")
        out.append(" Raiz -> c0 [dir = back]; \n")
        out.append(" Raiz -> c0 ; \n")
        out.append("{rank = same;Raiz;" + "".join(f"{cid};" for cid in col_ids.values()) + "} \n")

        cell_ids: dict[tuple[int, int], str] = {}
        counter = 0
        for group, col in enumerate(columns, start=2):
            for cell in self.column_cells(col):
                ident = f"n{counter}"
                label = f'{ident}[label = "{cell.letter}" width = 1.5'
                if cell.kind == "doble":
                    out.append(f"{label},fillcolor = lightskyblue,style = filled,group ={group}]; \n")
                elif cell.kind == "triple":
                    out.append(f"{label},fillcolor = red,style = filled, group ={group}]; \n")
                else:
                    out.append(f"{label}, group ={group}]; \n")
                out.append(f"{label}, group ={group}]; \n")
                cell_ids[(cell.row, cell.col)] = ident
                counter += 1

        def chain(head: str, cells: list[Cell]) -> None:
            names = [head] + [cell_ids[(c.row, c.col)] for c in cells]
            for a, b in zip(names, names[1:]):
                out.append(f"{a} -> {b} [dir = back];  \n")
                out.append(f"{a} -> {b}\n")

        for col in columns:
            chain(col_ids[col], self.column_cells(col))
        for row in rows:
            chain(row_ids[row], self.row_cells(row))

        for row in rows:
            names = [row_ids[row]] + [cell_ids[(c.row, c.col)] for c in self.row_cells(row)]
            out.append("{rank = same;" + "".join(f"{n};" for n in names) + "} \n")

        out.append("}")
        return "".join(out)

    def render(self, directory: str | Path | None = None) -> Path:
        """Write the board report; an empty board cannot be drawn."""
        if self.is_empty():
            raise ValueError("board is empty, nothing to draw")
        return render_dot(self.to_dot(), "ReporteMatriz", directory)