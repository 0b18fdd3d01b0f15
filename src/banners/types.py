# Data models for the banners layer.
# Banners are owned by the ad side; this layer only reads their kind.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any, Protocol


class BannerKind(str, Enum):
    NONE = "none"
    FACEBOOK = "facebook"
    RB = "rb"
    MOPUB = "mopub"
    GOOGLE = "google"


class SearchItemType(str, Enum):
    REGULAR = "regular"
    MOPUB = "mopub"


@dataclass(frozen=True)
class Banner:
    """A sponsored entry shown among search results."""
    banner_id: str
    kind: BannerKind
    meta: Optional[Dict[str, Any]] = None


@dataclass
class SearchItem:
    """One row of the merged results layout."""
    item_type: SearchItemType
    preferred_position: int
    container_index: int
    from_banner: bool = False


class ResultIndex(Protocol):
    def add_item(self, item_type: SearchItemType, preferred_position: int, container_index: int) -> None: ...


class VisibilityTracker(Protocol):
    def banner_is_out_of_screen(self, banner: Banner) -> None: ...


class ScreenTracker(VisibilityTracker, Protocol):
    def banner_is_on_screen(self, banner: Banner) -> None: ...
