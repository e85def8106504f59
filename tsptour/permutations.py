"""Steinhaus-Johnson-Trotter order of 1..n-1 with 0 pinned in front."""
from __future__ import annotations
import math
from typing import Iterator, List, Optional, Tuple

LEFT = -1
RIGHT = 1


def half_steps(n: int) -> int:
    """Steps that enumerate one order of every undirected cycle through ``n`` cities."""
    if n <= 1:
        return 0
    return math.factorial(n - 1) // 2


class SJTPermutations:
    def __init__(self, n: int):
        self.n = n
        self.perm: List[int] = list(range(n))
        self.direction: List[int] = [LEFT]*n

    def _is_mobile(self, j: int) -> bool:
        d = self.direction[j]
        if j == 1 and d == LEFT:
            return False
        if j == self.n - 1 and d == RIGHT:
            return False
        return self.perm[j] > self.perm[j + d]

    def advance(self) -> Optional[int]:
        """Move to the next permutation; return the value moved, ``None`` when exhausted."""
        p, d = self.perm, self.direction
        mobile, idx = 0, None
        for j in range(1, self.n):
            if p[j] > mobile and self._is_mobile(j):
                mobile, idx = p[j], j
        if idx is None:
            return None

        other = idx + d[idx]
        # directions travel with their values
        p[idx], p[other] = p[other], p[idx]
        d[idx], d[other] = d[other], d[idx]

        for j in range(1, self.n):
            if p[j] > mobile:
                d[j] = -d[j]
        return mobile

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        """Yield the current permutation and every successor until exhaustion."""
        yield tuple(self.perm)
        while self.advance() is not None:
            yield tuple(self.perm)
