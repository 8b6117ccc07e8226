# matchclip/core/Truncator.py
"""Truncator Module
=================
Fits a string into a column budget while keeping the most relevant fuzzy
match visible, and reports where the matched spans ended up.

The policy built on top of :class:`GraphemeMeasurer`:

1. Text that already fits is returned unchanged.
2. Without matches, or when the last match lies inside the window a plain
   tail truncation would keep, the text is cut at the end and a trailing
   ellipsis is appended.
3. Otherwise a prefix is dropped (head truncation) so that the cluster
   holding the last match ends up at the right edge, the remainder is clipped
   to the content width and a leading ellipsis is prepended.

The ellipsis always costs exactly one display column. Highlight column
ranges are measured on the rendered string, so they can be passed straight to
a styling layer. Running the truncator again on its own output with the same
width is a no-op.

Classes:
--------
- TruncationResult: rendered text plus inclusive highlight column ranges.
- Truncator: the truncation policy, parameterised by the ellipsis glyph.
"""

import logging
from bisect import bisect_left, bisect_right
from typing import List, NamedTuple, Sequence, Tuple

from matchclip.core.GraphemeMeasurer import Cluster, GraphemeMeasurer
from matchclip.core.RangeMerger import MatchRange


logger = logging.getLogger("matchclip")

# (start_column, end_column), both inclusive.
ColumnRange = Tuple[int, int]

DEFAULT_ELLIPSIS = "…"
ELLIPSIS_WIDTH = 1


class TruncationResult(NamedTuple):
    """Rendered text and the column ranges of the matches still visible in it."""

    text: str
    highlights: List[ColumnRange]


## ==================== Truncator Class ====================
class Truncator:
    """Match-aware truncation of a single line of text.

    Attributes:
        ellipsis (str): Marker inserted where text was dropped. It must be a
            single grapheme cluster one column wide; anything else is replaced
            by ``"…"``.
    """

    def __init__(self, ellipsis: str = DEFAULT_ELLIPSIS):
        clusters = GraphemeMeasurer.measure(ellipsis)
        if len(clusters) != 1 or clusters[0].width != ELLIPSIS_WIDTH:
            logger.warning(
                "Ellipsis %r is not a single one-column glyph; using %r instead.",
                ellipsis,
                DEFAULT_ELLIPSIS,
            )
            ellipsis = DEFAULT_ELLIPSIS
        self.ellipsis = ellipsis

    def truncate(
        self,
        text: str,
        match_ranges: Sequence[MatchRange],
        available_columns: int,
    ) -> TruncationResult:
        """Truncates ``text`` to ``available_columns`` and maps the match ranges.

        Args:
            text: Plain display text without escape sequences.
            match_ranges: Inclusive byte ranges from :meth:`RangeMerger.merge`.
            available_columns: Column budget; zero or less yields empty output.

        Returns:
            TruncationResult: The rendered text and the inclusive column ranges
            of every match that is at least partly visible in it.
        """
        if available_columns <= 0 or not text:
            return TruncationResult("", [])

        clusters = GraphemeMeasurer.measure(text)
        ranges = self._snap_ranges(clusters, match_ranges)
        total_columns = clusters[-1].column_end

        if total_columns <= available_columns:
            return TruncationResult(text, self._map_highlights(text, ranges, 0, len(text.encode("utf-8")), 0))

        content_width = available_columns - ELLIPSIS_WIDTH
        if not ranges:
            return self._truncate_tail(text, ranges, available_columns)

        last_cluster = self._cluster_at(clusters, ranges[-1][1])
        last_match_column = last_cluster.column
        # For a one-column cluster this is last_match_column < content_width.
        if last_match_column + last_cluster.width <= content_width:
            return self._truncate_tail(text, ranges, available_columns)

        # Keep the whole last-match cluster inside the content window.
        start_column = max(0, last_match_column + last_cluster.width - content_width)
        start_column = min(start_column, last_match_column)
        start_byte = GraphemeMeasurer.byte_at_column(text, start_column)

        encoded = text.encode("utf-8")
        suffix = encoded[start_byte:].decode("utf-8")
        clipped = GraphemeMeasurer.truncate_to_width(suffix, content_width)
        rendered = self.ellipsis + clipped
        logger.debug(
            "Head truncation: last match at column %d, dropped %d bytes, kept %r.",
            last_match_column,
            start_byte,
            clipped,
        )

        shift = len(self.ellipsis.encode("utf-8")) - start_byte
        window_end = start_byte + len(clipped.encode("utf-8"))
        return TruncationResult(rendered, self._map_highlights(rendered, ranges, start_byte, window_end, shift))

    def _truncate_tail(self, text: str, ranges: List[MatchRange], available_columns: int) -> TruncationResult:
        """Keeps a prefix of ``text`` and appends the ellipsis when there is room."""
        content_width = available_columns - ELLIPSIS_WIDTH
        if content_width <= 0:
            kept = GraphemeMeasurer.truncate_to_width(text, available_columns)
            rendered = kept
        else:
            kept = GraphemeMeasurer.truncate_to_width(text, content_width)
            rendered = kept + self.ellipsis
        logger.debug("Tail truncation to %d columns: %r.", available_columns, rendered)
        return TruncationResult(rendered, self._map_highlights(rendered, ranges, 0, len(kept.encode("utf-8")), 0))

    @staticmethod
    def _map_highlights(
        rendered: str,
        ranges: List[MatchRange],
        window_start: int,
        window_end: int,
        shift: int,
    ) -> List[ColumnRange]:
        """Converts byte ranges of the source text to columns of ``rendered``.

        Only the source bytes in ``[window_start, window_end)`` survive in the
        rendered text, where they sit ``shift`` bytes away from their original
        position. Ranges are clipped to that window and dropped when nothing
        of them remains.
        """
        clusters = GraphemeMeasurer.measure(rendered)
        starts = [cluster.byte_offset for cluster in clusters]

        def column_before(byte_offset: int) -> int:
            index = bisect_left(starts, byte_offset)
            return clusters[index - 1].column_end if index else 0

        highlights: List[ColumnRange] = []
        for start, end in ranges:
            if end < window_start or start >= window_end:
                continue
            start = max(start, window_start) + shift
            end = min(end, window_end - 1) + shift
            start_column = column_before(start)
            end_column = column_before(end + 1) - 1
            highlights.append((start_column, end_column))
        return highlights

    @staticmethod
    def _cluster_at(clusters: List[Cluster], byte_offset: int) -> Cluster:
        """Returns the cluster that contains ``byte_offset``."""
        starts = [cluster.byte_offset for cluster in clusters]
        return clusters[max(0, bisect_right(starts, byte_offset) - 1)]

    @staticmethod
    def _snap_ranges(clusters: List[Cluster], match_ranges: Sequence[MatchRange]) -> List[MatchRange]:
        """Clamps ranges to the text and aligns both ends to cluster starts."""
        starts = [cluster.byte_offset for cluster in clusters]
        last_byte = clusters[-1].byte_end - 1

        def snap(byte_offset: int) -> int:
            byte_offset = min(max(byte_offset, 0), last_byte)
            return starts[bisect_right(starts, byte_offset) - 1]

        snapped: List[MatchRange] = []
        for start, end in match_ranges:
            snapped.append((snap(start), snap(end)))
        return snapped
