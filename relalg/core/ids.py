"""
Id allocation for tuples and relations

Ids distinguish otherwise identical objects (e.g. for heritage tracking).
They are never used for equality.
"""

import itertools


class IdSequence:
    """
    Allocation context handing out monotonically increasing ids

    Tuples and relations draw from a shared module-level sequence unless
    one is passed explicitly, which keeps tests deterministic.
    """

    def __init__(self, start: int = 0):
        self._tuple_ids = itertools.count(start)
        self._relation_ids = itertools.count(start)

    def next_tuple_id(self) -> int:
        return next(self._tuple_ids)

    def next_relation_id(self) -> int:
        return next(self._relation_ids)


default_ids = IdSequence()
