"""LexSuggest Storage Backend - Abstract Storage Interface.

Storage backends are the distribution target for index artifacts: the
builder writes one key, runtimes read it back.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import gzip
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

GZIP_MAGIC = b"\x1f\x8b"

@dataclass
class StorageConfig:
    """Storage configuration."""
    path: str = ""
    compression: bool = False

class StorageBackend(ABC):
    """Abstract storage backend."""

    def __init__(self, config: Optional[StorageConfig] = None):
        self.config = config or StorageConfig()

    @abstractmethod
    def write(self, key: str, data: bytes) -> bool:
        pass

    @abstractmethod
    def read(self, key: str) -> Optional[bytes]:
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def list_keys(self, prefix: str = "") -> List[str]:
        pass

    def encode(self, data: bytes) -> bytes:
        """Apply configured compression before writing."""
        return gzip.compress(data) if self.config.compression else data

    def decode(self, data: bytes) -> bytes:
        """Undo compression on read, whatever the current setting."""
        if data[:2] == GZIP_MAGIC:
            return gzip.decompress(data)
        return data

__all__ = ["StorageBackend", "StorageConfig"]
