"""
Iteration strategies - feed operators their input elements

Available generators:
- LinearGenerator: tuples of one relation, in order
- FunnelGenerator: tuples of two relations, concatenated
- BiFunnelGenerator: concatenated tuples, each paired with an empty second slot
- FirstOnlyGenerator: tuples of the first relation paired with an empty slot
- NestedLoopGenerator: every (outer, inner) pair in row-major order
"""

from relalg.generators.base import Generator
from relalg.generators.funnel import BiFunnelGenerator, FirstOnlyGenerator, FunnelGenerator
from relalg.generators.linear import LinearGenerator
from relalg.generators.nested_loop import NestedLoopGenerator

__all__ = [
    "Generator",
    "LinearGenerator",
    "FunnelGenerator",
    "BiFunnelGenerator",
    "FirstOnlyGenerator",
    "NestedLoopGenerator",
]
