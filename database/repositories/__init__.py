# Repositories module
from .storage import Storage
from .memory_storage import MemoryStorage

__all__ = ["Storage", "MemoryStorage"]
