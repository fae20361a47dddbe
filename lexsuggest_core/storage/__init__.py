"""LexSuggest Storage Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsuggest_core.storage.backend import StorageBackend, StorageConfig
from lexsuggest_core.storage.memory import MemoryStorage
from lexsuggest_core.storage.file import FileStorage

__all__ = ["StorageBackend", "StorageConfig", "MemoryStorage", "FileStorage"]
