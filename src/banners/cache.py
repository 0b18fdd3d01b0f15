# Process-wide record of which banners are on screen.
# Used for show/hide accounting only; it never owns banner content.

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .types import Banner

logger = logging.getLogger(__name__)


class BannersCache:
    def __init__(self):
        self._visible: Dict[str, Banner] = {}
        self._history: List[Tuple[str, str]] = []  # (event, banner_id)

    @property
    def visible(self) -> Tuple[Banner, ...]:
        return tuple(self._visible.values())

    @property
    def history(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._history)

    def banner_is_on_screen(self, banner: Banner) -> None:
        self._visible[banner.banner_id] = banner
        self._history.append(("on_screen", banner.banner_id))
        logger.debug("Banner %s on screen", banner.banner_id)

    def banner_is_out_of_screen(self, banner: Banner) -> None:
        self._visible.pop(banner.banner_id, None)
        self._history.append(("out_of_screen", banner.banner_id))
        logger.debug("Banner %s out of screen", banner.banner_id)

    def reset(self) -> None:
        self._visible.clear()
        self._history.clear()


cache = BannersCache()
