# Merges organic search results with banner items.
# Banner items are placed at their preferred position, clamped to the list end.

from __future__ import annotations
from typing import Dict, List, Optional

from src.banners.types import SearchItem, SearchItemType


class SearchIndex:
    def __init__(self, results_count: int = 0):
        self.results_count = results_count
        self._items: List[SearchItem] = []
        self._layout: Optional[List[SearchItem]] = None

    def add_item(self, item_type: SearchItemType, preferred_position: int, container_index: int) -> None:
        self._items.append(
            SearchItem(
                item_type=item_type,
                preferred_position=preferred_position,
                container_index=container_index,
                from_banner=True,
            )
        )
        self._layout = None

    def update_results_count(self, results_count: int) -> None:
        self.results_count = results_count
        self._layout = None

    def build(self) -> List[SearchItem]:
        """Return the merged layout, recomputing it after any mutation."""
        if self._layout is not None:
            return self._layout

        rows = [
            SearchItem(item_type=SearchItemType.REGULAR, preferred_position=i, container_index=i)
            for i in range(self.results_count)
        ]
        # sorted() is stable; later ties go after the ones already placed
        placed: Dict[int, int] = {}
        for item in sorted(self._items, key=lambda x: x.preferred_position):
            pos = item.preferred_position
            rows.insert(min(pos + placed.get(pos, 0), len(rows)), item)
            placed[pos] = placed.get(pos, 0) + 1

        self._layout = rows
        return rows

    @property
    def count(self) -> int:
        return len(self.build())

    def item(self, at: int) -> SearchItem:
        return self.build()[at]
