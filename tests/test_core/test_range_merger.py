# tests/test_core/test_range_merger.py
"""RangeMerger Tests
==================

Unit tests for collapsing matched byte offsets into contiguous ranges.
"""

import pytest

from matchclip.core.RangeMerger import RangeMerger


def test_empty_offsets_give_no_ranges():
    assert RangeMerger.merge([]) == []


def test_single_offset_gives_single_range():
    assert RangeMerger.merge([5]) == [(5, 5)]


def test_adjacent_offsets_are_merged():
    """Runs of consecutive offsets collapse; gaps start a new range."""
    assert RangeMerger.merge([2, 3, 4, 9]) == [(2, 4), (9, 9)]


def test_fully_contiguous_offsets_make_one_range():
    assert RangeMerger.merge(range(3, 8)) == [(3, 7)]


def test_no_adjacent_offsets_stay_separate():
    assert RangeMerger.merge([0, 2, 4]) == [(0, 0), (2, 2), (4, 4)]


def test_multibyte_cluster_offsets_are_not_merged():
    """Offsets of consecutive three-byte characters are three bytes apart."""
    # "日本語" -> clusters start at bytes 0, 3 and 6
    assert RangeMerger.merge([0, 3, 6]) == [(0, 0), (3, 3), (6, 6)]


def test_last_range_is_emitted():
    assert RangeMerger.merge([1, 5, 6]) == [(1, 1), (5, 6)]


def test_non_increasing_offsets_are_a_caller_bug():
    with pytest.raises(AssertionError):
        RangeMerger.merge([4, 3])
