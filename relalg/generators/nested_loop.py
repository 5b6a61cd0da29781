"""
Nested-loop generator - pairs every outer tuple with every inner tuple

For outer index i and inner index j, pairs are produced in row-major
order: (0, 0), (0, 1) ... (0, N-1), (1, 0) ... until the outer sequence
is exhausted. If either sequence is empty nothing is produced.

Used by: default for binary operations
"""

from typing import Any, Optional

from relalg.generators.base import Generator


class NestedLoopGenerator(Generator):
    """Yields (outer, inner) pairs in row-major order"""

    def __init__(self):
        self.xs: list = []
        self.ys: list = []
        self.i = 0
        self.j = 0

    def set(self, xs, ys) -> None:
        self.xs = list(xs)
        self.ys = list(ys)
        self.i = 0
        self.j = 0

    def has_next(self) -> bool:
        return self.i < len(self.xs) and self.j < len(self.ys)

    def next(self) -> Optional[tuple[Any, Any]]:
        if not self.has_next():
            return None

        pair = (self.xs[self.i], self.ys[self.j])

        # Advance inner index, wrapping into the next outer row
        self.j = (self.j + 1) % len(self.ys)
        if self.j == 0:
            self.i += 1

        return pair
