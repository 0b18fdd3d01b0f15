# Banners package
# Exports the registry, the visibility cache and shared types.

from .registry import BannerRegistry, classify
from .cache import BannersCache, cache
from .types import Banner, BannerKind, SearchItem, SearchItemType

__all__ = [
    "BannerRegistry",
    "classify",
    "BannersCache",
    "cache",
    "Banner",
    "BannerKind",
    "SearchItem",
    "SearchItemType",
]
