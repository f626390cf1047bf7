"""
Matrix — Immutable generic matrix engine над ArithmeticElement

Прямоугольная матрица rows × cols, параметризованная типом элемента кольца T.
Каждая ячейка — значение T или явно отсутствующая (None, "hole").

Операции:
- Конструирование: empty(rows, cols), from_grid(data), from_rows(rows)
- Доступ: get_value / set_value (set возвращает новую матрицу)
- Алгебра: scalar_multiply, add, subtract, transpose, multiply
- Структурное равенство и hash (пригодно как ключ dict/cache)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows >= 1 и cols >= 1 всегда
2. Каждая строка ровно cols ячеек (нет ragged rows), отсутствующая строка
   недопустима
3. Индексы строго в [0, dimension): индекс, равный размерности, является ошибкой
4. Immutable: каждая операция возвращает новую Matrix с собственной копией
   ячеек, исходные экземпляры не изменяются
5. Absent-ячейки пропагируют через все операции: элементные операции
   никогда не вызываются с None

ФОРМУЛЫ:
    (A + B)[i][j] = A[i][j].add(B[i][j])
    (s·A)[i][j]   = A[i][j].multiply_by(s)
    (Aᵀ)[i][j]    = A[j][i]
    (A·B)[r][c]   = Σ_k A[r][k].multiply_by(B[k][c])
                    (сумма начинается с первого слагаемого, без нуля кольца)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Sequence, TypeVar

from src.core.math.arithmetic import ArithmeticElement
from src.core.math.errors import (
    DomainError,
    IndexOutOfRange,
    InvalidArgument,
    InvalidShape,
    MissingRow,
    NullSource,
    RaggedShape,
    ShapeMismatch,
)

LOG = logging.getLogger(__name__)

T = TypeVar("T", bound=ArithmeticElement)

Row = tuple[Optional[T], ...]
Grid = tuple[Row, ...]


# =============================================================================
# VECTOR HELPERS
# =============================================================================


def dot_product(u: Sequence[Optional[T]], v: Sequence[Optional[T]]) -> Optional[T]:
    """
    Dot product двух векторов одинаковой длины.

    Сумма начинается с первого слагаемого (не с нуля кольца), поэтому
    работает для колец без явного нуля.

    Args:
        u: Row vector
        v: Column vector

    Returns:
        Σ u[i].multiply_by(v[i]), либо None если хотя бы один множитель absent

    Raises:
        ShapeMismatch: Если векторы разной длины
        DomainError: Если векторы пустые (у суммы нет первого слагаемого)
    """
    if len(u) != len(v):
        raise ShapeMismatch(
            f"Cannot produce dot product of vectors of differing sizes: {len(u)} vs {len(v)}"
        )
    if not u:
        raise DomainError("Dot product over a zero-length dimension is undefined")

    if any(a is None for a in u) or any(b is None for b in v):
        return None

    total = u[0].multiply_by(v[0])
    for a, b in zip(u[1:], v[1:]):
        total = total.add(a.multiply_by(b))
    return total


def _check_dimension(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidShape(f"Matrix {name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidShape(f"Cannot create matrix with <1 {name}")


def _copy_rows(source: Iterable[Optional[Iterable[Optional[T]]]]) -> Grid:
    """Defensive copy источника в tuple-of-tuples с проверкой формы."""
    grid: list[Row] = []
    width = None
    for index, row in enumerate(source):
        if row is None:
            if index == 0:
                raise NullSource("Cannot create Matrix of null data")
            raise MissingRow(f"No rows of a matrix can be None (row {index})")
        # Элемент (pydantic BaseModel) итерируем по полям, str итерируем по символам
        if isinstance(row, (ArithmeticElement, str, bytes)):
            raise InvalidArgument(
                f"Row {index} must be a sequence of cells, got {type(row).__name__}"
            )
        try:
            copied = tuple(row)
        except TypeError:
            raise InvalidArgument(
                f"Row {index} must be a sequence of cells, got {type(row).__name__}"
            ) from None
        if width is None:
            width = len(copied)
            _check_dimension(width, "columns")
        elif len(copied) != width:
            raise RaggedShape(
                "All rows of a matrix should have the same number of columns "
                f"(row {index} has {len(copied)}, expected {width})"
            )
        grid.append(copied)

    if not grid:
        raise InvalidShape("Cannot create matrix with <1 rows")
    return tuple(grid)


# =============================================================================
# MATRIX
# =============================================================================


@dataclass(frozen=True)
class Matrix(Generic[T]):
    """
    Immutable прямоугольная матрица над кольцом T.

    Равенство: одинаковые (rows, cols) и попарно равные ячейки
    (None равно только None). Hash вычисляется по всей последовательности
    ячеек, поэтому равные матрицы всегда имеют равный hash.

    Прямой вызов Matrix(rows, cols, cells) допустим: __post_init__ копирует
    cells и проверяет согласованность формы. Обычно используются
    empty / from_grid / from_rows.
    """

    rows: int
    cols: int
    cells: Grid

    def __post_init__(self):
        _check_dimension(self.rows, "rows")
        _check_dimension(self.cols, "columns")
        if self.cells is None:
            raise NullSource("Cannot create Matrix of null data")

        grid = _copy_rows(self.cells)
        if len(grid) != self.rows or len(grid[0]) != self.cols:
            raise RaggedShape(
                f"Cell grid is {len(grid)}x{len(grid[0])}, "
                f"declared shape is {self.rows}x{self.cols}"
            )
        object.__setattr__(self, "cells", grid)

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def empty(cls, rows: int, columns: int) -> "Matrix[T]":
        """
        Матрица заданной формы, все ячейки absent.

        Raises:
            InvalidShape: Если rows < 1 или columns < 1
        """
        _check_dimension(rows, "rows")
        _check_dimension(columns, "columns")
        return cls(rows, columns, ((None,) * columns,) * rows)

    @classmethod
    def from_grid(cls, data: Sequence[Optional[Sequence[Optional[T]]]]) -> "Matrix[T]":
        """
        Матрица из 2-D сетки ячеек.

        Число столбцов берётся из первой строки. Данные копируются, поэтому
        последующее изменение data не влияет на матрицу.

        Args:
            data: Последовательность строк; ячейки могут быть None

        Raises:
            NullSource: Если data или data[0] is None
            MissingRow: Если какая-либо строка None
            RaggedShape: Если длины строк различаются
            InvalidShape: Если строк или столбцов 0
            InvalidArgument: Если строка — элемент или не итерируема
        """
        if data is None:
            raise NullSource("Cannot create Matrix of null data")
        grid = _copy_rows(data)
        return cls(len(grid), len(grid[0]), grid)

    @classmethod
    def from_rows(cls, rows: Iterable[Optional[Iterable[Optional[T]]]]) -> "Matrix[T]":
        """
        Матрица из произвольной итерируемой последовательности строк.

        Та же валидация, что и в from_grid; строки могут быть генераторами.
        """
        if rows is None:
            raise NullSource("Cannot create Matrix of null data")
        grid = _copy_rows(rows)
        return cls(len(grid), len(grid[0]), grid)

    # =========================================================================
    # SHAPE
    # =========================================================================

    @property
    def columns(self) -> int:
        return self.cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        """Число ячеек (absent-ячейки тоже считаются)."""
        return self.rows * self.cols

    # =========================================================================
    # ELEMENT ACCESS
    # =========================================================================

    def _check_index(self, row: int, column: int) -> None:
        if isinstance(row, bool) or not isinstance(row, int) or not 0 <= row < self.rows:
            raise IndexOutOfRange(f"Row index {row!r} out of range [0, {self.rows})")
        if isinstance(column, bool) or not isinstance(column, int) or not 0 <= column < self.cols:
            raise IndexOutOfRange(f"Column index {column!r} out of range [0, {self.cols})")

    def get_value(self, row: int, column: int) -> Optional[T]:
        """
        Ячейка (row, column).

        Raises:
            IndexOutOfRange: Если индекс вне [0, dimension)
        """
        self._check_index(row, column)
        return self.cells[row][column]

    def __getitem__(self, key: tuple[int, int]) -> Optional[T]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise IndexOutOfRange(f"Matrix index must be a (row, column) pair, got {key!r}")
        row, column = key
        return self.get_value(row, column)

    def set_value(self, value: Optional[T], row: int, column: int) -> "Matrix[T]":
        """
        Копия матрицы с заменённой ячейкой (row, column).

        value может быть None (очистка ячейки). self не изменяется.

        Raises:
            IndexOutOfRange: Если индекс вне [0, dimension)
        """
        self._check_index(row, column)
        updated = list(self.cells)
        target = list(updated[row])
        target[column] = value
        updated[row] = tuple(target)
        return Matrix(self.rows, self.cols, tuple(updated))

    def row_vector(self, row: int) -> Row:
        """Строка row как tuple ячеек."""
        self._check_index(row, 0)
        return self.cells[row]

    def column_vector(self, column: int) -> Row:
        """Столбец column как tuple ячеек."""
        self._check_index(0, column)
        return tuple(row[column] for row in self.cells)

    # =========================================================================
    # ALGEBRA
    # =========================================================================

    def _map(self, fn: Callable[[T], T]) -> "Matrix[T]":
        grid = tuple(
            tuple(None if cell is None else fn(cell) for cell in row) for row in self.cells
        )
        return Matrix(self.rows, self.cols, grid)

    def _zip_with(
        self, other: "Matrix[T]", fn: Callable[[T, T], T], operation: str
    ) -> "Matrix[T]":
        if other.rows != self.rows or other.cols != self.cols:
            LOG.debug(
                "%s rejected: %dx%d vs %dx%d", operation, self.rows, self.cols, other.rows, other.cols
            )
            raise ShapeMismatch(
                f"Cannot {operation} matrices of different orders: "
                f"{self.rows}x{self.cols} vs {other.rows}x{other.cols}"
            )
        grid = tuple(
            tuple(
                None if a is None or b is None else fn(a, b)
                for a, b in zip(own_row, other_row)
            )
            for own_row, other_row in zip(self.cells, other.cells)
        )
        return Matrix(self.rows, self.cols, grid)

    def scalar_multiply(self, scalar: T) -> "Matrix[T]":
        """
        Умножение каждой ячейки на scalar (cell.multiply_by(scalar)).

        Absent-ячейки остаются absent.

        Raises:
            InvalidArgument: Если scalar is None
        """
        if scalar is None:
            raise InvalidArgument("Cannot multiply by None")
        return self._map(lambda cell: cell.multiply_by(scalar))

    def add(self, other: "Matrix[T]") -> "Matrix[T]":
        """
        Поэлементная сумма.

        Ячейка результата absent, если absent в любом из операндов.

        Raises:
            ShapeMismatch: Если формы различаются
        """
        return self._zip_with(other, lambda a, b: a.add(b), "add")

    def subtract(self, other: "Matrix[T]") -> "Matrix[T]":
        """
        Поэлементная разность self - other.

        Raises:
            ShapeMismatch: Если формы различаются
        """
        return self._zip_with(other, lambda a, b: a.subtract(b), "subtract")

    def transpose(self) -> "Matrix[T]":
        """Матрица cols × rows, где result[i][j] == self[j][i]."""
        return Matrix(self.cols, self.rows, tuple(zip(*self.cells)))

    def multiply(self, other: "Matrix[T]") -> "Matrix[T]":
        """
        Матричное произведение self · other.

        Ячейка (r, c) результата — dot product строки r и столбца c.

        Args:
            other: Правый множитель (other.rows == self.cols)

        Raises:
            ShapeMismatch: Если self.cols != other.rows
        """
        if self.cols != other.rows:
            LOG.debug(
                "multiply rejected: %dx%d · %dx%d", self.rows, self.cols, other.rows, other.cols
            )
            raise ShapeMismatch(
                f"Cannot multiply matrix where cols != other.rows ({self.cols} != {other.rows})"
            )

        LOG.debug("multiply %dx%d · %dx%d", self.rows, self.cols, other.rows, other.cols)
        columns = [other.column_vector(c) for c in range(other.cols)]
        grid = tuple(tuple(dot_product(row, column) for column in columns) for row in self.cells)
        return Matrix(self.rows, other.cols, grid)

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.scalar_multiply(other)

    def __str__(self) -> str:
        lines = ["Matrix"]
        for index, row in enumerate(self.cells):
            lines.append(f"{index}: [" + " ".join(str(cell) for cell in row) + "]")
        return "\n".join(lines)
