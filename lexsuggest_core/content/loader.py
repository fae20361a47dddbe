"""LexSuggest Content Loader - Corpus from a Content Directory.

Layout::

    <root>/tools/*.json       name, description, tags, platform, categories
    <root>/prompts/*.mdx      YAML front matter: title, description, tags
    <root>/skills/*.mdx       YAML front matter: title, description, tags
    <root>/playbooks/*.json   title, description, conditions.matter_types

A preview root overrides only the subdirectories it contains; the rest
come from the production root.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import yaml

from lexsuggest_core.index.document import Document, DocumentType

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"


class ContentError(ValueError):
    """Raised when a content file cannot be read or parsed."""


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split an MDX/Markdown file into front matter and body.

    Args:
        text: File contents

    Returns:
        (front matter mapping, body). Files without front matter
        return an empty mapping and the whole text.

    Raises:
        ContentError: If the front matter is unterminated or not a mapping
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for i in range(1, len(lines)):
        if lines[i].strip() == FRONT_MATTER_DELIMITER:
            header = "".join(lines[1:i])
            body = "".join(lines[i + 1:])
            break
    else:
        raise ContentError("Unterminated front matter")

    try:
        data = yaml.safe_load(header) or {}
    except yaml.YAMLError as e:
        raise ContentError(f"Invalid front matter: {e}") from e
    if not isinstance(data, dict):
        raise ContentError("Front matter must be a mapping")
    return data, body


def _labels(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v is not None]


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


class ContentLoader:
    """Reads the directory corpus."""

    def __init__(
        self,
        content_root: str = "content",
        production_root: Optional[str] = None,
        strict: bool = False,
        include_playbooks: bool = True,
    ):
        """Initialize content loader.

        Args:
            content_root: Directory to read (production or preview)
            production_root: Fallback for subdirectories missing from a
                preview root; defaults to ``content_root``
            strict: Raise ContentError on unreadable files instead of skipping
            include_playbooks: Load playbooks as well
        """
        self.content_root = content_root
        self.production_root = production_root or content_root
        self.strict = strict
        self.include_playbooks = include_playbooks
        self.skipped: List[str] = []

    def overlay_dir(self, subdir: str) -> str:
        """Resolve a content subdirectory, falling back to production."""
        preferred = os.path.join(self.content_root, subdir)
        if os.path.abspath(self.content_root) == os.path.abspath(self.production_root):
            return preferred
        if os.path.isdir(preferred):
            return preferred
        return os.path.join(self.production_root, subdir)

    def _list(self, subdir: str, suffix: str) -> Iterator[Tuple[str, str]]:
        """Yield (slug, path) for matching files in sorted order."""
        directory = self.overlay_dir(subdir)
        if not os.path.isdir(directory):
            return
        for filename in sorted(os.listdir(directory)):
            if filename.startswith(".") or not filename.endswith(suffix):
                continue
            yield filename[:-len(suffix)], os.path.join(directory, filename)

    def _read(
        self,
        subdir: str,
        suffix: str,
        parse: Callable[[str, str], Document],
    ) -> List[Document]:
        documents = []
        for slug, path in self._list(subdir, suffix):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    raw = f.read()
                documents.append(parse(slug, raw))
            except (OSError, TypeError, ValueError) as e:
                if self.strict:
                    if isinstance(e, ContentError):
                        raise ContentError(f"{path}: {e}") from e
                    raise ContentError(f"Cannot read {path}: {e}") from e
                logger.warning(f"Skipping {path}: {e}")
                self.skipped.append(path)
        return documents

    def _parse_tool(self, slug: str, raw: str) -> Document:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ContentError("Tool file must hold a JSON object")
        return Document(
            type=DocumentType.TOOL,
            slug=_text(data.get("slug")) or slug,
            title=_text(data.get("name")),
            description=_text(data.get("description")),
            tags=_labels(data.get("tags")) + _labels(data.get("platform")),
            categories=_labels(data.get("categories")),
        )

    def _front_matter_parser(self, doc_type: DocumentType) -> Callable[[str, str], Document]:
        def parse(slug: str, raw: str) -> Document:
            meta, _ = parse_front_matter(raw)
            return Document(
                type=doc_type,
                slug=slug,
                title=_text(meta.get("title")),
                description=_text(meta.get("description")),
                tags=_labels(meta.get("tags")),
            )
        return parse

    def _parse_playbook(self, slug: str, raw: str) -> Document:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ContentError("Playbook file must hold a JSON object")
        conditions = data.get("conditions")
        if not isinstance(conditions, dict):
            conditions = {}
        return Document(
            type=DocumentType.PLAYBOOK,
            slug=_text(data.get("slug")) or slug,
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            tags=_labels(conditions.get("matter_types")),
        )

    def load_tools(self) -> List[Document]:
        return self._read("tools", ".json", self._parse_tool)

    def load_prompts(self) -> List[Document]:
        return self._read("prompts", ".mdx", self._front_matter_parser(DocumentType.PROMPT))

    def load_skills(self) -> List[Document]:
        return self._read("skills", ".mdx", self._front_matter_parser(DocumentType.SKILL))

    def load_playbooks(self) -> List[Document]:
        return self._read("playbooks", ".json", self._parse_playbook)

    def load(self) -> List[Document]:
        """Load the full corpus: tools, prompts, skills, then playbooks.

        Raises:
            ContentError: In strict mode, on the first unreadable file
        """
        self.skipped = []
        corpus = self.load_tools() + self.load_prompts() + self.load_skills()
        if self.include_playbooks:
            corpus += self.load_playbooks()
        logger.info(
            f"Loaded {len(corpus)} documents from {self.content_root} "
            f"({len(self.skipped)} skipped)"
        )
        return corpus


__all__ = [
    "ContentError",
    "ContentLoader",
    "parse_front_matter",
]
