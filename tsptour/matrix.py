from __future__ import annotations
import logging
import math
import numbers
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .errors import InvalidCityCountError, MalformedMatrixError

logger = logging.getLogger(__name__)

# tombstone for a pair of cities with no connecting edge
NO_EDGE = None


class DistanceMatrix:
    """Read-only N x N cost table. ``cost(i, j)`` is an int or ``NO_EDGE``."""

    def __init__(self, rows: Sequence[Sequence[Optional[int]]], missing: Optional[int] = 0):
        n = len(rows)
        if n <= 0:
            raise InvalidCityCountError("a distance matrix needs at least one city")
        table: List[List[Optional[int]]] = []
        for i, row in enumerate(rows):
            if len(row) != n:
                raise MalformedMatrixError(f"row {i} has {len(row)} values, expected {n}")
            out = []
            for j, v in enumerate(row):
                if v is not NO_EDGE and not _is_integral(v):
                    raise MalformedMatrixError(f"non-integer cost {v!r} at ({i}, {j})")
                if i == j:
                    out.append(0)  # staying put is free
                elif v is NO_EDGE or (missing is not None and v == missing):
                    out.append(NO_EDGE)
                elif v < 0:
                    raise MalformedMatrixError(f"negative cost {v} at ({i}, {j})")
                else:
                    out.append(int(v))
            table.append(out)
        self._rows = table
        self.n = n

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, i: int) -> Sequence[Optional[int]]:
        return tuple(self._rows[i])

    def cost(self, i: int, j: int) -> Optional[int]:
        return self._rows[i][j]

    def has_edge(self, i: int, j: int) -> bool:
        return self._rows[i][j] is not NO_EDGE

    def is_symmetric(self) -> bool:
        n = self.n
        return all(self._rows[i][j] == self._rows[j][i] for i in range(n) for j in range(i + 1, n))

    def tour_cost(self, tour: Sequence[int]) -> Optional[int]:
        """Sum of consecutive costs along a closed tour, ``None`` if an edge is missing."""
        total = 0
        for a, b in zip(tour, tour[1:]):
            c = self._rows[a][b]
            if c is NO_EDGE:
                return None
            total += c
        return total

    def to_rows(self) -> List[List[Optional[int]]]:
        return [list(r) for r in self._rows]


def _is_integral(v) -> bool:
    if isinstance(v, bool):
        return False
    if isinstance(v, numbers.Integral):
        return True
    return isinstance(v, (float, np.floating)) and float(v).is_integer()


def _tokens_to_matrix(tokens: Iterable[str], n: Optional[int], missing: Optional[int]) -> DistanceMatrix:
    tokens = list(tokens)
    if n is None:
        n = math.isqrt(len(tokens))
        if n == 0 or n * n != len(tokens):
            raise MalformedMatrixError(f"{len(tokens)} values do not form a square matrix")
    elif n <= 0:
        raise InvalidCityCountError(f"number of cities must be positive, got {n}")
    if len(tokens) < n * n:
        raise MalformedMatrixError(f"expected {n * n} values for {n} cities, found only {len(tokens)}")
    if len(tokens) > n * n:
        raise MalformedMatrixError(f"expected {n * n} values for {n} cities, found {len(tokens)}")
    try:
        values = np.array(tokens, dtype=np.int64)
    except (ValueError, OverflowError) as exc:
        raise MalformedMatrixError(f"non-integer value in matrix: {exc}") from exc
    grid = values.reshape(n, n)
    if (grid < 0).any():
        i, j = np.argwhere(grid < 0)[0]
        raise MalformedMatrixError(f"negative cost {grid[i, j]} at ({i}, {j})")
    logger.debug("parsed %dx%d distance matrix", n, n)
    return DistanceMatrix(grid.tolist(), missing=missing)


def parse_matrix(text: str, n: Optional[int] = None, missing: Optional[int] = 0) -> DistanceMatrix:
    """Parse whitespace-delimited row-major costs.

    ``n`` is inferred from the token count when omitted. With the default
    ``missing=0`` an off-diagonal zero means the two cities are not connected;
    pass ``missing=None`` to treat zero as an ordinary cost.
    """
    return _tokens_to_matrix(text.split(), n, missing)


def load_matrix(path: str, n: Optional[int] = None, missing: Optional[int] = 0) -> DistanceMatrix:
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise MalformedMatrixError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedMatrixError(f"{path} is not a text file: {exc.reason} at byte {exc.start}") from exc
    return parse_matrix(text, n=n, missing=missing)
