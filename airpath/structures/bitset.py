"""Fixed-universe membership set packed into 64-bit words.

`BitSet` covers the dense integer universe ``[0, max_element]``. Element ``e``
lives in word ``e // 64`` at bit ``e % 64``. The word array is allocated once
by the constructor or `reserve` and never grows: adding an element outside
the universe is a silent no-op that returns ``False``.

Bits beyond ``max_element`` in the last word ("padding") are kept at zero by
every operation, so popcounts, equality and iteration never see phantom
members. `complement` is the only operation that could set them and masks
them off explicitly.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

import numpy as np

WORD_BITS = 64

_WORD_DTYPE = np.uint64
_ALL_ONES = np.uint64(0xFFFF_FFFF_FFFF_FFFF)


class BitSet:
    """Set of non-negative integers bounded by a reserved maximum.

    Args:
        max_element: Largest element the set may hold. ``None`` creates a set
            with an empty universe; call `reserve` before adding elements.

    Example:
        >>> s = BitSet(100)
        >>> s.add(3), s.add(3), s.add(101)
        (True, False, False)
        >>> str(s)
        '{ 3 }'
    """

    __slots__ = ("_max_element", "_words")

    def __init__(self, max_element: Optional[int] = None) -> None:
        self._max_element: int = -1
        self._words: np.ndarray = np.zeros(0, dtype=_WORD_DTYPE)
        if max_element is not None:
            self.reserve(max_element)

    def reserve(self, max_element: int) -> None:
        """Allocate zeroed storage for the universe ``[0, max_element]``.

        Any existing storage is replaced and all prior members are dropped.

        Raises:
            ValueError: If ``max_element`` is negative.
        """
        if max_element < 0:
            raise ValueError(f"max_element must be non-negative, got {max_element}")
        self._max_element = int(max_element)
        self._words = np.zeros(max_element // WORD_BITS + 1, dtype=_WORD_DTYPE)

    @property
    def max_element(self) -> Optional[int]:
        """Largest admissible element, or ``None`` for an empty universe."""
        return self._max_element if self._max_element >= 0 else None

    @property
    def capacity(self) -> int:
        """Number of admissible elements."""
        return self._max_element + 1

    @property
    def word_count(self) -> int:
        return len(self._words)

    def add(self, element: int) -> bool:
        """Add ``element`` to the set.

        Returns:
            True if the element was newly added. False if it was already a
            member or lies outside ``[0, max_element]``.
        """
        if not 0 <= element <= self._max_element:
            return False
        word, bit = divmod(element, WORD_BITS)
        mask = _WORD_DTYPE(1 << bit)
        if self._words[word] & mask:
            return False
        self._words[word] |= mask
        return True

    def contains(self, element: int) -> bool:
        """Return True if ``element`` is a member; False for out-of-range input."""
        if not 0 <= element <= self._max_element:
            return False
        word, bit = divmod(element, WORD_BITS)
        return bool(self._words[word] & _WORD_DTYPE(1 << bit))

    def cardinality(self) -> int:
        """Return the number of members (popcount over all words)."""
        return int(np.unpackbits(self._words.view(np.uint8)).sum())

    def union(self, other: BitSet) -> BitSet:
        """Return a new set holding members of either set.

        The result's universe is the larger of the two operands' universes.
        """
        result = BitSet._with_universe(max(self._max_element, other._max_element))
        overlap = min(len(self._words), len(other._words))
        result._words[:overlap] = self._words[:overlap] | other._words[:overlap]
        longer = self._words if len(self._words) > overlap else other._words
        result._words[overlap:] = longer[overlap:]
        return result

    def difference(self, other: BitSet) -> BitSet:
        """Return a new set holding members of this set absent from ``other``.

        The result keeps this set's universe.
        """
        result = BitSet._with_universe(self._max_element)
        overlap = min(len(self._words), len(other._words))
        result._words[:overlap] = self._words[:overlap] & ~other._words[:overlap]
        result._words[overlap:] = self._words[overlap:]
        return result

    def complement(self) -> BitSet:
        """Return a new set holding every universe element not in this set."""
        result = BitSet._with_universe(self._max_element)
        if not len(self._words):
            return result
        result._words[:] = ~self._words
        result._words[-1] &= self._tail_mask()
        return result

    def is_empty(self) -> bool:
        return not self._words.any()

    def clear(self) -> None:
        """Remove all members, keeping the reserved universe."""
        self._words.fill(0)

    def copy(self) -> BitSet:
        """Return an independent copy with its own word storage."""
        result = BitSet()
        result._max_element = self._max_element
        result._words = self._words.copy()
        return result

    def _tail_mask(self) -> np.uint64:
        """Mask of the bits in the last word that map to universe elements."""
        used_bits = self._max_element % WORD_BITS + 1
        if used_bits == WORD_BITS:
            return _ALL_ONES
        return _WORD_DTYPE((1 << used_bits) - 1)

    @staticmethod
    def _with_universe(max_element: int) -> BitSet:
        return BitSet(max_element if max_element >= 0 else None)

    #
    # Python protocol support
    #
    def __contains__(self, element: object) -> bool:
        if not isinstance(element, (int, np.integer)):
            return False
        return self.contains(int(element))

    def __len__(self) -> int:
        return self.cardinality()

    def __iter__(self) -> Iterator[int]:
        """Yield members in ascending order."""
        for word_index, word in enumerate(self._words.tolist()):
            base = word_index * WORD_BITS
            while word:
                lowest = word & -word
                yield base + lowest.bit_length() - 1
                word ^= lowest

    def __or__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: object) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.difference(other)

    def __invert__(self) -> BitSet:
        return self.complement()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._max_element == other._max_element and bool(
            np.array_equal(self._words, other._words)
        )

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> BitSet:
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> BitSet:
        return self.copy()

    def __str__(self) -> str:
        members = ", ".join(str(e) for e in self)
        return f"{{ {members} }}" if members else "{ }"

    def __repr__(self) -> str:
        return f"BitSet(max_element={self.max_element}, members={str(self)})"
