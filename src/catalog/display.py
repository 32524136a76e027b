"""
Display region: the one page area whose contents every render or error replaces.
"""

from __future__ import annotations

import html as html_lib
import logging
from typing import Iterable, List

logger = logging.getLogger(__name__)

DISPLAY_ELEMENT_ID = "data-display"


class DisplayRegion:
    """Holds the HTML children of the display region.

    Each ``replace`` / ``show_error`` call clears everything first, so the region
    never mixes the output of two renders.
    """

    def __init__(self, element_id: str = DISPLAY_ELEMENT_ID):
        self.element_id = element_id
        self._children: List[str] = []

    @property
    def children(self) -> List[str]:
        return list(self._children)

    def clear(self) -> None:
        self._children = []

    def replace(self, children: Iterable[str]) -> None:
        self.clear()
        for child in children:
            self._children.append(child)

    def show_error(self, message: str) -> None:
        logger.debug("Showing error in #%s: %s", self.element_id, message)
        self.replace([f'<p class="error">{html_lib.escape(message)}</p>'])

    def inner_html(self) -> str:
        return "\n".join(self._children)

    def to_html(self) -> str:
        return f'<div id="{self.element_id}">{self.inner_html()}</div>'
