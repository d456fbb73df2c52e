"""Fibonacci heap with handle-based decrease-key.

The heap is a circular doubly linked list of min-ordered trees. Insert and
decrease-key are amortized O(1); extract-min and delete are amortized
O(log n). Merging equal-degree trees is deferred until `extract_min`, which
consolidates the root list so that no two roots share a degree.

Nodes live in an arena (``self._nodes``) and every structural link (parent,
child, left and right sibling) is an integer slot index rather than an
object reference. Released slots are recycled by later inserts. A handle is
the pair ``(slot, generation)``; the slot's generation advances on release,
so a handle kept past extraction is rejected instead of silently addressing
a newer entry.

Marking: a node is marked when it loses a child while being a non-root.
Cutting a marked node's child cuts the marked node as well (cascading cut).
Roots are never marked; every path that turns a node into a root clears its
mark.

Keys must be mutually comparable and not NaN. Equal keys are returned in no
particular order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, List, NamedTuple, Optional, TypeVar

from airpath.exceptions import EmptyHeapError, InvalidHandleError, InvalidKeyError

T = TypeVar("T")

# log(phi): the maximum root degree of a heap with n nodes is below
# log_phi(n) + 1.
_LOG_PHI = math.log((1 + math.sqrt(5)) / 2)


class HeapHandle(NamedTuple):
    """Opaque reference to a live heap entry, returned by `FibonacciHeap.insert`."""

    slot: int
    generation: int


@dataclass(slots=True)
class _HeapNode:
    payload: Any
    key: Any
    left: int
    right: int
    parent: Optional[int] = None
    child: Optional[int] = None
    degree: int = 0
    marked: bool = False
    live: bool = True
    generation: int = 0


class FibonacciHeap(Generic[T]):
    """Min-ordered mergeable priority queue over arbitrary payloads.

    The heap compares only the keys it was given. A payload's own notion of
    priority is never consulted, so callers must route every key change
    through `decrease_key`.
    """

    def __init__(self) -> None:
        self._nodes: List[_HeapNode] = []
        self._free: List[int] = []
        self._min: Optional[int] = None
        self._size: int = 0

    #
    # Public API
    #
    def insert(self, payload: T, key: Any) -> HeapHandle:
        """Add ``payload`` with priority ``key`` as a new singleton root.

        Raises:
            InvalidKeyError: If ``key`` is NaN.
        """
        self._check_key(key)
        slot = self._allocate(payload, key)
        self._add_root(slot)
        if key < self._nodes[self._min].key:  # type: ignore[index]
            self._min = slot
        self._size += 1
        return HeapHandle(slot, self._nodes[slot].generation)

    def find_min(self) -> T:
        """Return the payload with the smallest key without removing it.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        if self._min is None:
            raise EmptyHeapError("find_min() called on an empty heap")
        return self._nodes[self._min].payload

    def min_key(self) -> Any:
        """Return the smallest key currently in the heap.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        if self._min is None:
            raise EmptyHeapError("min_key() called on an empty heap")
        return self._nodes[self._min].key

    def extract_min(self) -> T:
        """Remove and return the payload with the smallest key.

        The minimum root's children are promoted to roots, the root is
        released, and the remaining roots are consolidated so that every root
        degree is distinct. The new minimum is found by a scan of the
        consolidated roots.

        Raises:
            EmptyHeapError: If the heap is empty.
        """
        if self._min is None:
            raise EmptyHeapError("extract_min() called on an empty heap")

        nodes = self._nodes
        min_slot = self._min
        min_node = nodes[min_slot]

        child = min_node.child
        if child is not None:
            for slot in self._ring(child):
                nodes[slot].parent = None
                nodes[slot].marked = False
            self._join_rings(min_slot, child)
            min_node.child = None
            min_node.degree = 0

        if min_node.right == min_slot:
            self._min = None
        else:
            self._min = min_node.right
            self._unlink(min_slot)

        payload = min_node.payload
        self._release(min_slot)
        self._size -= 1

        if self._min is not None:
            self._consolidate()
        return payload

    def decrease_key(self, handle: HeapHandle, new_key: Any) -> None:
        """Lower the key of a live entry to ``new_key``.

        If the entry now violates heap order with its parent it is cut to the
        root list, followed by a cascading cut up its marked ancestors.

        Raises:
            InvalidHandleError: If ``handle`` does not refer to a live entry.
            InvalidKeyError: If ``new_key`` is NaN or not strictly smaller
                than the current key. The heap is left unchanged.
        """
        slot = self._resolve(handle)
        self._check_key(new_key)
        node = self._nodes[slot]
        if not new_key < node.key:
            raise InvalidKeyError(
                f"decrease_key() requires a smaller key: "
                f"current {node.key!r}, requested {new_key!r}"
            )

        node.key = new_key
        parent = node.parent
        if parent is not None and new_key < self._nodes[parent].key:
            self._cut(slot, parent)
            self._cascading_cut(parent)

        if new_key < self._nodes[self._min].key:  # type: ignore[index]
            self._min = slot

    def delete(self, handle: HeapHandle) -> T:
        """Remove the entry behind ``handle`` and return its payload.

        Equivalent to decreasing the key to negative infinity followed by
        `extract_min`, without requiring a key below every other key.

        Raises:
            InvalidHandleError: If ``handle`` does not refer to a live entry.
        """
        slot = self._resolve(handle)
        parent = self._nodes[slot].parent
        if parent is not None:
            self._cut(slot, parent)
            self._cascading_cut(parent)
        self._min = slot
        return self.extract_min()

    def key(self, handle: HeapHandle) -> Any:
        """Return the current key of a live entry."""
        return self._nodes[self._resolve(handle)].key

    def payload(self, handle: HeapHandle) -> T:
        """Return the payload of a live entry."""
        return self._nodes[self._resolve(handle)].payload

    def clear(self) -> None:
        """Remove every entry. All outstanding handles become invalid."""
        for slot, node in enumerate(self._nodes):
            if node.live:
                self._release(slot)
        self._min = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._min is None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._min is not None

    def __contains__(self, handle: object) -> bool:
        try:
            self._resolve(handle)  # type: ignore[arg-type]
        except InvalidHandleError:
            return False
        return True

    def __repr__(self) -> str:
        if self._min is None:
            return "FibonacciHeap(size=0)"
        return f"FibonacciHeap(size={self._size}, min_key={self.min_key()!r})"

    #
    # Arena management
    #
    def _allocate(self, payload: Any, key: Any) -> int:
        if self._free:
            slot = self._free.pop()
            node = self._nodes[slot]
            node.payload = payload
            node.key = key
            node.left = node.right = slot
            node.parent = node.child = None
            node.degree = 0
            node.marked = False
            node.live = True
            return slot
        slot = len(self._nodes)
        self._nodes.append(_HeapNode(payload=payload, key=key, left=slot, right=slot))
        return slot

    def _release(self, slot: int) -> None:
        node = self._nodes[slot]
        node.payload = None
        node.key = None
        node.parent = node.child = None
        node.left = node.right = slot
        node.live = False
        node.generation += 1
        self._free.append(slot)

    def _resolve(self, handle: HeapHandle) -> int:
        if not isinstance(handle, tuple) or len(handle) != 2:
            raise InvalidHandleError(f"Not a heap handle: {handle!r}")
        slot, generation = handle
        if not 0 <= slot < len(self._nodes):
            raise InvalidHandleError(f"Handle {handle!r} does not belong to this heap")
        node = self._nodes[slot]
        if not node.live or node.generation != generation:
            raise InvalidHandleError(f"Handle {handle!r} refers to a removed entry")
        return slot

    @staticmethod
    def _check_key(key: Any) -> None:
        if key != key:
            raise InvalidKeyError(f"Heap keys must not be NaN, got {key!r}")

    #
    # Circular sibling lists
    #
    def _ring(self, start: int) -> List[int]:
        """Return the slots of the sibling ring containing ``start``."""
        nodes = self._nodes
        slots = [start]
        slot = nodes[start].right
        while slot != start:
            slots.append(slot)
            slot = nodes[slot].right
        return slots

    def _insert_after(self, anchor: int, slot: int) -> None:
        nodes = self._nodes
        right = nodes[anchor].right
        nodes[slot].left = anchor
        nodes[slot].right = right
        nodes[right].left = slot
        nodes[anchor].right = slot

    def _unlink(self, slot: int) -> None:
        nodes = self._nodes
        node = nodes[slot]
        nodes[node.left].right = node.right
        nodes[node.right].left = node.left
        node.left = node.right = slot

    def _join_rings(self, a: int, b: int) -> None:
        """Splice the ring containing ``b`` into the ring containing ``a``."""
        nodes = self._nodes
        a_right = nodes[a].right
        b_left = nodes[b].left
        nodes[a].right = b
        nodes[b].left = a
        nodes[b_left].right = a_right
        nodes[a_right].left = b_left

    def _add_root(self, slot: int) -> None:
        if self._min is None:
            self._min = slot
        else:
            self._insert_after(self._min, slot)

    #
    # Structural operations
    #
    def _link(self, child: int, parent: int) -> None:
        """Make root ``child`` a child of root ``parent``."""
        nodes = self._nodes
        self._unlink(child)
        child_node = nodes[child]
        parent_node = nodes[parent]
        child_node.parent = parent
        child_node.marked = False
        if parent_node.child is None:
            parent_node.child = child
        else:
            self._insert_after(parent_node.child, child)
        parent_node.degree += 1

    def _consolidate(self) -> None:
        nodes = self._nodes
        by_degree: List[Optional[int]] = [None] * (
            int(math.log(self._size) / _LOG_PHI) + 2
        )

        for slot in self._ring(self._min):  # type: ignore[arg-type]
            root = slot
            degree = nodes[root].degree
            while degree < len(by_degree) and by_degree[degree] is not None:
                other = by_degree[degree]
                by_degree[degree] = None
                # On equal keys the earlier root stays on top
                if nodes[other].key <= nodes[root].key:  # type: ignore[index]
                    root, other = other, root  # type: ignore[assignment]
                self._link(other, root)  # type: ignore[arg-type]
                degree += 1
            if degree >= len(by_degree):
                by_degree.extend([None] * (degree - len(by_degree) + 1))
            by_degree[degree] = root

        self._min = None
        for root in by_degree:
            if root is None:
                continue
            if self._min is None or nodes[root].key < nodes[self._min].key:
                self._min = root

    def _cut(self, slot: int, parent: int) -> None:
        """Detach ``slot`` from ``parent`` and make it an unmarked root."""
        nodes = self._nodes
        node = nodes[slot]
        parent_node = nodes[parent]
        if node.right == slot:
            parent_node.child = None
        else:
            if parent_node.child == slot:
                parent_node.child = node.right
            self._unlink(slot)
        parent_node.degree -= 1
        node.parent = None
        node.marked = False
        self._add_root(slot)

    def _cascading_cut(self, slot: int) -> None:
        nodes = self._nodes
        while True:
            node = nodes[slot]
            parent = node.parent
            if parent is None:
                return
            if not node.marked:
                node.marked = True
                return
            self._cut(slot, parent)
            slot = parent
