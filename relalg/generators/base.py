"""
Base generator class

A generator produces a finite, restartable sequence of elements from
one or two relations. Calling set() again restarts it.
"""

from collections.abc import Iterator
from typing import Any


class Generator:
    """
    Base class for all iteration strategies

    Subclasses implement set(), has_next() and next(). Iterating over a
    generator drains it from its current position.
    """

    def set(self, *sequences) -> None:
        """
        Initialise the generator with the tuple sequence(s) to iterate over

        Args:
            *sequences: One tuple sequence per input relation
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement set()")

    def has_next(self) -> bool:
        """Check whether another element can be produced"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement has_next()")

    def next(self) -> Any:
        """
        Produce the next element

        Returns:
            A tuple, or a pair of tuples for binary strategies.
            None once the generator is exhausted.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement next()")

    def __iter__(self) -> Iterator[Any]:
        while self.has_next():
            yield self.next()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
