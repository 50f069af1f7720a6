"""Scroll-spy: track the single toc anchor nearest above the viewport top"""

from typing import Mapping, Optional

from artpub.core.models import TocEntry


class ScrollSpy:
    """Observer mapping a scroll position to the active toc anchor.

    Kept apart from the transform pipeline; it consumes a finished toc plus
    anchor offsets measured by whatever renders the article.
    """

    def __init__(self, toc: list[TocEntry]):
        self.anchors = [entry.id for entry in toc]
        self.active: Optional[str] = None

    def update(self, offsets: Mapping[str, float], scroll_top: float, margin: float = 0.0) -> Optional[str]:
        """Return the last anchor (toc order) at or above scroll_top + margin, or None."""
        line = scroll_top + margin
        active = None
        for anchor in self.anchors:
            top = offsets.get(anchor)
            if top is None:
                continue
            if top <= line:
                active = anchor
        self.active = active
        return active
