# matchclip/core/RangeMerger.py
"""RangeMerger Module
===================
Collapses the matched byte offsets reported by a fuzzy matcher into the
minimal list of contiguous, inclusive byte ranges.

Offsets are the byte positions of the first byte of each matched grapheme
cluster. Two offsets belong to the same range only when the second one is
exactly one past the first; offsets of multi-byte clusters therefore stay in
separate ranges even when the clusters are visually adjacent.

Example:
    >>> RangeMerger.merge([2, 3, 4, 9])
    [(2, 4), (9, 9)]
"""

from typing import Iterable, List, Tuple


# (start_byte, end_byte), both inclusive.
MatchRange = Tuple[int, int]


## ==================== RangeMerger Class ====================
class RangeMerger:
    """Groups strictly increasing byte offsets into maximal contiguous ranges."""

    @staticmethod
    def merge(offsets: Iterable[int]) -> List[MatchRange]:
        """Merges sorted byte offsets into inclusive ``(start, end)`` ranges.

        Args:
            offsets: Strictly increasing, non-negative byte offsets.

        Returns:
            A list of non-overlapping ranges in ascending order. Empty input
            gives an empty list.
        """
        indexes = list(offsets)
        if not indexes:
            return []

        current_start = current_end = indexes[0]
        if len(indexes) == 1:
            return [(current_start, current_end)]

        ranges: List[MatchRange] = []
        for offset in indexes[1:]:
            assert offset > current_end, f"match offsets must increase: {indexes!r}"
            if offset == current_end + 1:
                current_end = offset
            else:
                ranges.append((current_start, current_end))
                current_start = current_end = offset
        ranges.append((current_start, current_end))
        return ranges
