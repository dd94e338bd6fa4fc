# Storage backends for the marketplace

from .base import Storage
from .memory import MemoryStorage
from .database import DatabaseStorage

__all__ = ["Storage", "MemoryStorage", "DatabaseStorage"]
