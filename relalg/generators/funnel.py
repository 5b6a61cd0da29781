"""
Funnel generators - treat two relations as one concatenated sequence
"""

from typing import Any

from relalg.generators.base import Generator
from relalg.generators.linear import LinearGenerator


class FunnelGenerator(LinearGenerator):
    """Concatenates two sequences and yields their tuples linearly"""

    def set(self, xs, ys=()) -> None:
        self.xs = list(xs) + list(ys)
        self.i = 0


class BiFunnelGenerator(FunnelGenerator):
    """
    Concatenates two sequences, pairing each tuple with an empty second slot

    The pair shape matches the signature of binary operations.

    Used by: Union
    """

    def next(self) -> tuple[Any, None]:
        return super().next(), None


class FirstOnlyGenerator(Generator):
    """
    Walks only the first of two sequences, pairing each tuple with an empty slot

    Lets a binary operator ignore its second operand during iteration.

    Used by: Without
    """

    def __init__(self):
        self.linear = LinearGenerator()

    def set(self, xs, ys=()) -> None:
        self.linear = LinearGenerator()
        self.linear.set(xs)

    def has_next(self) -> bool:
        return self.linear.has_next()

    def next(self) -> tuple[Any, None]:
        return self.linear.next(), None
