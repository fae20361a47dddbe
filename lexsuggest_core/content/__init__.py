"""LexSuggest Content Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsuggest_core.content.loader import ContentError, ContentLoader, parse_front_matter

__all__ = ["ContentError", "ContentLoader", "parse_front_matter"]
