import pytest

from src.banners import cache


@pytest.fixture(autouse=True)
def clean_cache():
    cache.reset()
    yield
    cache.reset()
