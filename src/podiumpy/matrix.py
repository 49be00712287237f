"""Dense row-major matrix of floats used throughout the podium engine."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple


class ShapeError(ValueError):
    """Raised when matrices, podiums or scratch buffers disagree in shape."""


def require(condition: bool, message: str) -> None:
    """Raise :class:`ShapeError` with ``message`` unless ``condition`` holds."""

    if not condition:
        raise ShapeError(message)


class Matrix:
    """Fixed-shape 2D array backed by a flat ``list[float]``.

    Cell ``(row, col)`` lives at ``row * cols + col``. The shape never changes
    after construction; rows are contiguous in the backing list while columns
    are strided.
    """

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int, data: List[float]) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{cols}")
        if len(data) != rows * cols:
            raise ShapeError(
                f"backing length {len(data)} does not match a {rows}x{cols} matrix"
            )
        self._rows = rows
        self._cols = cols
        self._data = data

    @classmethod
    def allocate(cls, rows: int, cols: int) -> "Matrix":
        """Return a zero-filled ``rows`` x ``cols`` matrix."""

        return cls(rows, cols, [0.0] * (rows * cols))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        materialised = [list(map(float, row)) for row in rows]
        if not materialised:
            return cls(0, 0, [])
        cols = len(materialised[0])
        for index, row in enumerate(materialised):
            require(
                len(row) == cols,
                f"row {index} has {len(row)} columns, expected {cols}",
            )
        data: List[float] = []
        for row in materialised:
            data.extend(row)
        return cls(len(materialised), cols, data)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def flatten(self) -> List[float]:
        """Return the backing list itself; mutations are visible to the matrix."""

        return self._data

    def row_offset(self, row: int) -> int:
        return row * self._cols

    def row(self, row: int) -> List[float]:
        self._check_row(row)
        start = row * self._cols
        return self._data[start : start + self._cols]

    def col(self, col: int) -> List[float]:
        self._check_col(col)
        return self._data[col :: self._cols] if self._cols else []

    def set_row(self, row: int, values: Sequence[float]) -> None:
        self._check_row(row)
        require(
            len(values) == self._cols,
            f"row length {len(values)} does not match {self._cols} columns",
        )
        start = row * self._cols
        self._data[start : start + self._cols] = [float(value) for value in values]

    def row_sum(self, row: int) -> float:
        self._check_row(row)
        start = row * self._cols
        return sum(self._data[start : start + self._cols])

    def col_sum(self, col: int) -> float:
        return sum(self.col(col))

    def scale_row(self, row: int, factor: float) -> None:
        self._check_row(row)
        data = self._data
        for index in range(row * self._cols, (row + 1) * self._cols):
            data[index] *= factor

    def normalise_row(self, row: int, target: float = 1.0) -> float:
        """Scale ``row`` to sum to ``target`` and return its previous sum.

        A row summing to zero is left untouched.
        """

        total = self.row_sum(row)
        if total != 0.0:
            self.scale_row(row, target / total)
        return total

    def fill(self, value: float) -> None:
        data = self._data
        for index in range(len(data)):
            data[index] = value

    def transpose(self) -> "Matrix":
        rows, cols, data = self._rows, self._cols, self._data
        transposed = [0.0] * len(data)
        for row in range(rows):
            for col in range(cols):
                transposed[col * rows + row] = data[row * cols + col]
        return Matrix(cols, rows, transposed)

    def copy(self) -> "Matrix":
        return Matrix(self._rows, self._cols, list(self._data))

    def verbose(self, precision: int = 6) -> str:
        """Render the matrix as an aligned text grid for diagnostics."""

        lines = []
        for row in self:
            lines.append(" ".join(f"{value:.{precision}f}" for value in row))
        return "\n".join(lines)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        self._check_row(row)
        self._check_col(col)
        return self._data[row * self._cols + col]

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = index
        self._check_row(row)
        self._check_col(col)
        self._data[row * self._cols + col] = value

    def __iter__(self) -> Iterator[List[float]]:
        for row in range(self._rows):
            yield self.row(row)

    def __len__(self) -> int:
        return self._rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self._data!r})"

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise IndexError(f"row {row} out of range for {self._rows} rows")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self._cols:
            raise IndexError(f"column {col} out of range for {self._cols} columns")


__all__ = ["Matrix", "ShapeError", "require"]
