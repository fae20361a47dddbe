"""LexSuggest File Storage - File-Based Storage Backend.

Keys are relative paths under the configured root directory, so an
artifact written as ``search-index.json`` lands at a predictable,
publishable location.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
import os
import tempfile
from typing import List, Optional
from lexsuggest_core.storage.backend import StorageBackend, StorageConfig

logger = logging.getLogger(__name__)

class FileStorage(StorageBackend):
    """File-based storage backend."""

    def __init__(self, config: Optional[StorageConfig] = None):
        super().__init__(config)
        if self.config.path:
            os.makedirs(self.config.path, exist_ok=True)

    def _key_to_path(self, key: str) -> str:
        root = os.path.abspath(self.config.path or ".")
        path = os.path.abspath(os.path.join(root, key))
        if os.path.commonpath([root, path]) != root:
            raise ValueError(f"Storage key escapes root directory: {key}")
        return path

    def write(self, key: str, data: bytes) -> bool:
        path = self._key_to_path(key)
        directory = os.path.dirname(path)
        try:
            os.makedirs(directory, exist_ok=True)
            # Write then rename so readers never see a partial artifact
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-")
            with os.fdopen(fd, "wb") as f:
                f.write(self.encode(data))
            os.replace(tmp_path, path)
            return True
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            return False

    def read(self, key: str) -> Optional[bytes]:
        path = self._key_to_path(key)
        if os.path.exists(path):
            with open(path, "rb") as f:
                return self.decode(f.read())
        return None

    def delete(self, key: str) -> bool:
        path = self._key_to_path(key)
        if os.path.exists(path):
            os.remove(path)
            return True
        return False

    def exists(self, key: str) -> bool:
        return os.path.exists(self._key_to_path(key))

    def list_keys(self, prefix: str = "") -> List[str]:
        root = os.path.abspath(self.config.path or ".")
        if not os.path.exists(root):
            return []
        keys = []
        for dirpath, _, filenames in os.walk(root):
            for name in filenames:
                if name.startswith(".tmp-"):
                    continue
                key = os.path.relpath(os.path.join(dirpath, name), root).replace(os.sep, "/")
                if key.startswith(prefix):
                    keys.append(key)
        return sorted(keys)

__all__ = ["FileStorage"]
