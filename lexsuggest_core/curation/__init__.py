"""LexSuggest Curation Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from lexsuggest_core.curation.curator import CurationPolicy, ResultCurator, SuggestContext

__all__ = ["CurationPolicy", "ResultCurator", "SuggestContext"]
