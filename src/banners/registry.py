# Keeps the banners of one search session and tells the result index
# where each of them should render.

from __future__ import annotations

import logging
import weakref
from typing import Dict, List, Optional, Tuple

from src.settings import settings
from .types import Banner, BannerKind, ResultIndex, SearchItemType, VisibilityTracker

logger = logging.getLogger(__name__)

MOPUB_PREFERRED_POSITION = 2

# kind -> (item type, preferred position); anything missing is unsupported
PLACEMENTS: Dict[BannerKind, Tuple[SearchItemType, int]] = {
    BannerKind.MOPUB: (SearchItemType.MOPUB, MOPUB_PREFERRED_POSITION),
}
FALLBACK_PLACEMENT = (SearchItemType.REGULAR, 0)


def classify(banner: Banner) -> Tuple[SearchItemType, int]:
    """Map a banner kind to (item type, preferred position), regular at 0 for unsupported kinds."""
    return PLACEMENTS.get(banner.kind, FALLBACK_PLACEMENT)


class BannerRegistry:
    def __init__(self, search_index: ResultIndex, tracker: VisibilityTracker, debug: Optional[bool] = None):
        self._search_index = weakref.ref(search_index)
        self.tracker = tracker
        self.debug = settings.DEBUG if debug is None else debug

        self._banners: Optional[List[Banner]] = []

    @property
    def search_index(self) -> Optional[ResultIndex]:
        return self._search_index()

    @property
    def count(self) -> int:
        return len(self._require_open())

    def __len__(self) -> int:
        return self.count

    def _require_open(self) -> List[Banner]:
        if self._banners is None:
            raise RuntimeError("BannerRegistry is closed")
        return self._banners

    # -------------------------
    # Public API
    # -------------------------
    def add(self, banner: Banner) -> None:
        banners = self._require_open()
        search_index = self._search_index()
        if search_index is None:
            logger.debug("Search index released, dropping banner %s", banner.banner_id)
            return

        banners.append(banner)
        slot = len(banners) - 1
        item_type, preferred_position = classify(banner)
        search_index.add_item(item_type, preferred_position, slot)

        if banner.kind not in PLACEMENTS:
            logger.warning("Unsupported banner type %r for banner %s", banner.kind, banner.banner_id)
            if self.debug:
                raise AssertionError("Unsupported banner type")

    def get(self, index: int) -> Banner:
        return self._require_open()[index]

    # -------------------------
    # Cleanup
    # -------------------------
    def close(self) -> None:
        if self._banners is None:
            return
        banners, self._banners = self._banners, None
        for banner in banners:
            self.tracker.banner_is_out_of_screen(banner)

    def __enter__(self) -> "BannerRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self):
        # Owner never closed us; the tracker still has to hear about each banner.
        if getattr(self, "_banners", None) is not None:
            self.close()
