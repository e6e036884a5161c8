"""
One-shot "fade in when scrolled into view" sections.

VisibilityTracker is the observer service (the browser's IntersectionObserver
plays this role on the client, see static/portfolio.js). AnimatedSection
subscribes to it, latches on the first report at or above its threshold and
unsubscribes, so scrolling away and back never replays the transition.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.1
DEFAULT_DURATION = 0.6  # seconds
DEFAULT_OFFSET = 50  # px, downward start offset

Callback = Callable[[float], None]


class VisibilityTracker:
    """Maps element ids to (threshold, callback) registrations."""

    def __init__(self) -> None:
        self._watchers: Dict[str, List[Tuple[float, Callback]]] = {}

    def observe(self, element_id: str, callback: Callback,
                threshold: float = DEFAULT_THRESHOLD) -> Callable[[], None]:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        entry = (threshold, callback)
        self._watchers.setdefault(element_id, []).append(entry)

        def unobserve() -> None:
            watchers = self._watchers.get(element_id, [])
            if entry in watchers:
                watchers.remove(entry)
            if not watchers:
                self._watchers.pop(element_id, None)

        return unobserve

    def report(self, element_id: str, ratio: float) -> None:
        """Visible fraction of ``element_id`` changed to ``ratio``."""
        if not 0.0 <= ratio <= 1.0:
            raise ValueError(f"intersection ratio must be within [0, 1], got {ratio}")
        for threshold, callback in list(self._watchers.get(element_id, [])):
            if ratio >= threshold and ratio > 0:
                callback(ratio)

    def watching(self, element_id: str) -> int:
        return len(self._watchers.get(element_id, []))


class AnimatedSection:
    """
    Wrapper state for one content block.

    hidden  -> opacity 0, offset ``offset`` px
    visible -> opacity 1, offset 0
    With no tracker (detection unsupported) the section starts visible.
    """

    def __init__(self, element_id: str, tracker: Optional[VisibilityTracker] = None,
                 threshold: float = DEFAULT_THRESHOLD, duration: float = DEFAULT_DURATION,
                 offset: int = DEFAULT_OFFSET):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        if duration < 0:
            raise ValueError(f"duration must not be negative, got {duration}")
        self.element_id = element_id
        self.threshold = threshold
        self.duration = duration
        self.offset = offset
        self.has_been_visible = False
        self.transitions = 0
        self._unobserve: Optional[Callable[[], None]] = None

        if tracker is None:
            self.has_been_visible = True
        else:
            self._unobserve = tracker.observe(element_id, self._on_visible, threshold)

    def _on_visible(self, ratio: float) -> None:
        if self.has_been_visible:
            return
        self.has_been_visible = True
        self.transitions += 1
        logger.debug("section %s entered view (ratio=%.2f)", self.element_id, ratio)
        if self._unobserve is not None:
            self._unobserve()
            self._unobserve = None

    @property
    def state(self) -> str:
        return "visible" if self.has_been_visible else "hidden"

    def style(self) -> dict:
        if self.has_been_visible:
            return {"opacity": 1, "offset": 0, "duration": self.duration}
        return {"opacity": 0, "offset": self.offset, "duration": self.duration}

    def attrs(self) -> Dict[str, str]:
        """data-* attributes read by static/portfolio.js."""
        return {
            "data-animate": "",
            "data-threshold": f"{self.threshold:g}",
            "data-duration": f"{self.duration:g}",
            "data-offset": f"{self.offset:g}",
        }
