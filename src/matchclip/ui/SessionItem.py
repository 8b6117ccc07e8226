# matchclip/ui/SessionItem.py
"""SessionItem Module
===================
Renders one row of a session picker: the session title on the left, a
relative-time label on the right, both inside a one-column padding.

The title is fitted with :class:`Truncator`, so the last fuzzy match stays
visible even on narrow terminals. The row is returned as plain text together
with the inclusive column ranges of the matched title characters; applying
underline or colour to those ranges is left to whatever draws the row.

Layout of a row of ``width`` columns (padding 1, time gap 2)::

    ␣<title padded to title_width>␣␣<time label>␣

When the title would get fewer than ``min_title_width`` columns, the time
label is dropped and the title takes the whole inner width.
"""

from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from matchclip.core.GraphemeMeasurer import GraphemeMeasurer
from matchclip.core.RangeMerger import RangeMerger
from matchclip.core.Truncator import ColumnRange, Truncator
from matchclip.utils.utils import DEFAULT_CONFIG, format_time_ago


class Session(NamedTuple):
    """The data shown by a session row. Timestamps are Unix seconds."""

    id: str
    title: str
    created_at: int = 0
    updated_at: int = 0


class RenderedItem(NamedTuple):
    """A rendered row and the columns of ``line`` to highlight."""

    line: str
    highlights: List[ColumnRange]
    time_text: str
    focused: bool


## ==================== SessionItem Class ====================
class SessionItem:
    """Class SessionItem
    ====================
    A focusable, sizeable list item showing a session title and its age.

    Attributes:
        session (Session): The session displayed by this row.
        is_active (bool): Whether this is the session currently in use; active
            sessions show the configured active label instead of their age.
        width (int): Total row width in columns, padding included.
        match_indexes (list[int]): Byte offsets of title characters matched by
            the picker's fuzzy filter.
    """

    def __init__(
        self,
        session: Session,
        is_active: bool = False,
        config: Optional[Dict[str, Any]] = None,
    ):
        settings = dict(DEFAULT_CONFIG["sessions"])
        settings.update((config or {}).get("sessions", {}))
        ellipsis = (config or {}).get("truncation", {}).get("ellipsis", DEFAULT_CONFIG["truncation"]["ellipsis"])

        self.session = session
        self.is_active = is_active
        self.width = 0
        self.match_indexes: List[int] = []
        self._focus = False
        self._min_title_width = int(settings["min_title_width"])
        self._padding = int(settings["padding"])
        self._time_gap = int(settings["time_gap"])
        self._active_label = str(settings["active_label"])
        self._truncator = Truncator(ellipsis)

    # --- List item protocol ---

    def set_size(self, width: int, height: int = 1) -> None:
        self.width = width

    def get_size(self) -> Tuple[int, int]:
        return self.width, 1

    def focus(self) -> None:
        self._focus = True

    def blur(self) -> None:
        self._focus = False

    def is_focused(self) -> bool:
        return self._focus

    def set_match_indexes(self, indexes: Sequence[int]) -> None:
        """Stores the byte offsets of matched title characters."""
        self.match_indexes = list(indexes)

    def filter_value(self) -> str:
        return self.session.title

    def value(self) -> Session:
        return self.session

    def id(self) -> str:
        return self.session.id

    # --- Rendering ---

    def time_text(self, now: Optional[float] = None) -> str:
        """Label shown on the right: the active label or the session's age."""
        if self.is_active:
            return self._active_label
        timestamp = self.session.updated_at
        if timestamp == 0 or timestamp == self.session.created_at:
            timestamp = self.session.created_at
        return format_time_ago(timestamp, now)

    def render(self, now: Optional[float] = None) -> RenderedItem:
        """Lays out the row for the current width and match indexes.

        Args:
            now: Reference time for the age label. Defaults to the current time.

        Returns:
            RenderedItem: The row text (exactly ``width`` columns unless the
            width is smaller than the padding) and the highlight ranges,
            already offset by the left padding.
        """
        inner_width = max(0, self.width - 2 * self._padding)
        time_text = self.time_text(now)
        time_width = GraphemeMeasurer.string_width(time_text)
        title_width = inner_width - time_width - self._time_gap

        if title_width < self._min_title_width:
            title_width = inner_width
            time_text = ""
            time_width = 0

        ranges = RangeMerger.merge(self.match_indexes)
        result = self._truncator.truncate(self.session.title, ranges, title_width)
        title = result.text + " " * max(0, title_width - GraphemeMeasurer.string_width(result.text))

        content = title
        if time_text:
            content += " " * (inner_width - title_width - time_width) + time_text

        pad = " " * self._padding
        highlights = [(start + self._padding, end + self._padding) for start, end in result.highlights]
        return RenderedItem(pad + content + pad, highlights, time_text, self._focus)
