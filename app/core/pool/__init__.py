"""
Connection pool for the application database.

One PoolManager per process, created in the app lifespan and handed to
repositories through FastAPI dependencies.
"""

from .connect import cursor_to_dicts, execute
from .manager import PoolManager

__all__ = [
    "execute",
    "cursor_to_dicts",
    "PoolManager",
]
