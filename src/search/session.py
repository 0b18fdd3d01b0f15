# One search session: organic results, a result index and the banner registry
# bound to it. Closing the session tears the registry down first.
#
# Storing a banner does not make it visible: whoever renders the layout calls
# mark_on_screen() for the banner rows it actually shows.

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from src.banners import Banner, BannerRegistry, SearchItem, cache
from src.banners.types import ScreenTracker
from .index import SearchIndex

logger = logging.getLogger(__name__)


class SearchSession:
    def __init__(self, tracker: ScreenTracker = cache, debug: Optional[bool] = None):
        self.tracker = tracker
        self.results: List[str] = []
        self.index: Optional[SearchIndex] = SearchIndex()
        self.banners: Optional[BannerRegistry] = BannerRegistry(self.index, tracker=tracker, debug=debug)

    def _require_banners(self) -> BannerRegistry:
        if self.banners is None:
            raise RuntimeError("SearchSession is closed")
        return self.banners

    def set_results(self, results: List[str]) -> None:
        self.results = list(results)
        if self.index is not None:
            self.index.update_results_count(len(self.results))

    def add_banner(self, banner: Banner) -> None:
        self._require_banners().add(banner)

    def mark_on_screen(self, container_index: int) -> Banner:
        """Report the banner stored at container_index as shown."""
        banner = self._require_banners().get(container_index)
        self.tracker.banner_is_on_screen(banner)
        return banner

    def layout(self) -> List[Tuple[SearchItem, Union[str, Banner]]]:
        """Resolve each layout row to its organic result or its banner."""
        banners = self._require_banners()
        if self.index is None:
            raise RuntimeError("SearchSession is closed")
        rows = []
        for item in self.index.build():
            if item.from_banner:
                rows.append((item, banners.get(item.container_index)))
            else:
                rows.append((item, self.results[item.container_index]))
        return rows

    def close(self) -> None:
        if self.banners is not None:
            self.banners.close()
            self.banners = None
        # Dropping the index invalidates any registry still pointing at it.
        self.index = None
        logger.debug("Search session closed")

    def __enter__(self) -> "SearchSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
