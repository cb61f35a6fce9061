"""Fixed-size battlefield grid."""

from __future__ import annotations

from collections.abc import Iterator

from .errors import FieldNotFound
from .models import ActorName, Cell


class Battlefield:
    """Width x height grid of cells, addressed by (x, y).

    Cells are only ever mutated by appending deposits.  Storage is row-major
    but callers go through :meth:`cell` / :meth:`require_cell`.
    """

    __slots__ = ("_cells", "height", "width")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("battlefield dimensions must be positive")
        self.width = width
        self.height = height
        self._cells: list[Cell] = [Cell(x=x, y=y) for y in range(height) for x in range(width)]

    def __repr__(self) -> str:
        return f"Battlefield(width={self.width}, height={self.height})"

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def in_bounds(self, x: int, y: int) -> bool:
        if not (_is_coordinate(x) and _is_coordinate(y)):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell | None:
        """Return the cell at (x, y), or ``None`` when out of range."""

        if not self.in_bounds(x, y):
            return None
        return self._cells[y * self.width + x]

    def require_cell(self, x: int, y: int) -> Cell:
        cell = self.cell(x, y)
        if cell is None:
            raise FieldNotFound(x, y)
        return cell

    def cells_occupied_by(self, owner: ActorName) -> list[Cell]:
        """Cells holding at least one deposit from ``owner``."""

        return [cell for cell in self._cells if cell.deposits_of(owner)]

    @property
    def total_deposits(self) -> int:
        return sum(len(cell.deposits) for cell in self._cells)


def _is_coordinate(value: object) -> bool:
    # bool is an int subclass; True must not address column 1
    return isinstance(value, int) and not isinstance(value, bool)
