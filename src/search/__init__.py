# Makes the folder importable as a package.
# Exports SearchIndex and SearchSession for convenience.

from .index import SearchIndex
from .session import SearchSession

__all__ = ["SearchIndex", "SearchSession"]
