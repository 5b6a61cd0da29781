"""
Linear generator - yields the tuples of one relation one by one

Used by: default for unary operations
"""

from typing import Any

from relalg.generators.base import Generator


class LinearGenerator(Generator):
    """Yields each tuple of one sequence once, in original order"""

    def __init__(self):
        self.xs: list = []
        self.i = 0

    def set(self, xs, *ignored) -> None:
        # Extra sequences are ignored so binary operators can walk only their first input
        self.xs = list(xs)
        self.i = 0

    def has_next(self) -> bool:
        return self.i < len(self.xs)

    def next(self) -> Any:
        if not self.has_next():
            return None
        element = self.xs[self.i]
        self.i += 1
        return element
