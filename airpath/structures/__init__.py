"""Data structures backing the shortest-path traversal.

`BitSet` tracks settled nodes over a dense index universe and
`FibonacciHeap` orders the frontier by tentative cost.
"""

from airpath.structures.bitset import BitSet
from airpath.structures.fibheap import FibonacciHeap, HeapHandle

__all__ = ["BitSet", "FibonacciHeap", "HeapHandle"]
