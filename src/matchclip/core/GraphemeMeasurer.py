# matchclip/core/GraphemeMeasurer.py
"""GraphemeMeasurer Module
========================
Maps UTF-8 byte offsets of a string to terminal display columns.

The string is walked one grapheme cluster (user-perceived character) at a
time using the ``grapheme`` segmenter. Each cluster costs
``max(1, wcswidth(cluster))`` columns: wide East-Asian glyphs and most emoji
take two columns, while combining sequences, zero-width joiners and
non-printable clusters are folded into a single column so that every cluster
stays visible and addressable.

All functions are pure and only depend on their arguments.

Functions provided by :class:`GraphemeMeasurer`:
    - iter_clusters / measure: the measured clusters of a string.
    - cluster_width / string_width: display widths.
    - column_of: byte offset -> column immediately before that cluster.
    - byte_at_column: column -> byte offset of the first cluster at/after it.
    - truncate_to_width: longest cluster prefix that fits a column budget.
"""

from typing import Iterator, List, NamedTuple

import grapheme
from wcwidth import wcswidth


class Cluster(NamedTuple):
    """One grapheme cluster with its byte and column placement."""

    text: str
    byte_offset: int
    byte_length: int
    column: int
    width: int

    @property
    def byte_end(self) -> int:
        return self.byte_offset + self.byte_length

    @property
    def column_end(self) -> int:
        return self.column + self.width


## ==================== GraphemeMeasurer Class ====================
class GraphemeMeasurer:
    """Grapheme-aware width measurement over UTF-8 byte offsets."""

    @staticmethod
    def cluster_width(cluster: str) -> int:
        """Display width of a single cluster, never less than one column.

        ``wcswidth`` returns -1 for clusters containing non-printable code
        points and 0 for zero-width ones; both are counted as one column.
        """
        return max(1, wcswidth(cluster))

    @staticmethod
    def iter_clusters(text: str) -> Iterator[Cluster]:
        """Yields the clusters of ``text`` in order with their placement."""
        byte_offset = 0
        column = 0
        for piece in grapheme.graphemes(text):
            byte_length = len(piece.encode("utf-8"))
            width = GraphemeMeasurer.cluster_width(piece)
            yield Cluster(piece, byte_offset, byte_length, column, width)
            byte_offset += byte_length
            column += width

    @staticmethod
    def measure(text: str) -> List[Cluster]:
        """Returns every cluster of ``text`` with its byte offset and width."""
        return list(GraphemeMeasurer.iter_clusters(text))

    @staticmethod
    def string_width(text: str) -> int:
        """Total display width of ``text`` in columns."""
        return sum(cluster.width for cluster in GraphemeMeasurer.iter_clusters(text))

    @staticmethod
    def column_of(text: str, target_byte: int) -> int:
        """Returns the column reached after consuming clusters up to ``target_byte``.

        Clusters are consumed while the running byte offset is still below
        ``target_byte``. For a cluster boundary the result is the column just
        before the cluster starting there; a target inside a cluster counts
        that whole cluster; a target beyond the end of the text yields the
        total width. The mapping is monotonic in ``target_byte``.
        """
        column = 0
        for cluster in GraphemeMeasurer.iter_clusters(text):
            if cluster.byte_offset >= target_byte:
                break
            column = cluster.column_end
        return column

    @staticmethod
    def byte_at_column(text: str, column: int) -> int:
        """Returns the byte offset of the first cluster starting at or after ``column``.

        When no cluster starts at or after ``column`` the byte length of the
        whole text is returned.
        """
        for cluster in GraphemeMeasurer.iter_clusters(text):
            if cluster.column >= column:
                return cluster.byte_offset
        return len(text.encode("utf-8"))

    @staticmethod
    def truncate_to_width(text: str, width: int) -> str:
        """Returns the longest cluster prefix of ``text`` at most ``width`` columns wide.

        A wide cluster that would straddle the limit is dropped whole, so the
        result may be one column narrower than ``width``.
        """
        kept: List[str] = []
        for cluster in GraphemeMeasurer.iter_clusters(text):
            if cluster.column_end > width:
                break
            kept.append(cluster.text)
        return "".join(kept)
