"""LexSuggest CLI - Build the index artifact and query it.

Usage:
    lexsuggest build-index [--content-root DIR] [--out PATH] [--strict]
    lexsuggest suggest "motion to compel" [--context global] [--json]
    lexsuggest search "contr" [--limit 8] [--tools-only]

Each command returns a process exit code; ``main()`` never raises for
data errors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from lexsuggest_core.content.loader import ContentError, ContentLoader
from lexsuggest_core.engine import SuggestConfig, SuggestEngine
from lexsuggest_core.index.builder import IndexBuildError, IndexBuilder

logger = logging.getLogger(__name__)


def _config_from_args(args: argparse.Namespace) -> SuggestConfig:
    config = SuggestConfig.from_env()
    overrides = {}
    if getattr(args, "index", None):
        overrides["index_path"] = args.index
    if getattr(args, "out", None):
        overrides["index_path"] = args.out
    if getattr(args, "content_root", None):
        overrides["content_root"] = args.content_root
    if getattr(args, "strict", False):
        overrides["strict_build"] = True
    if getattr(args, "include_playbooks", False):
        overrides["include_playbooks"] = True
    return replace(config, **overrides)


def run_build_index(args: argparse.Namespace) -> int:
    """Load the corpus, build the artifact, and write it."""
    config = _config_from_args(args)
    loader = ContentLoader(
        content_root=config.content_root,
        production_root=config.production_root,
        strict=config.strict_build,
        include_playbooks=config.include_playbooks,
    )
    builder = IndexBuilder(strict=config.strict_build)
    storage, key = config.artifact_storage()

    try:
        corpus = loader.load()
        artifact = builder.build_and_write(corpus, storage, key)
    except (ContentError, IndexBuildError) as e:
        logger.error(f"Index build failed: {e}")
        return 1

    print(f"Wrote {artifact.doc_count} docs to {config.index_path}")
    return 0


def run_suggest(args: argparse.Namespace) -> int:
    """Print curated suggestions for a query."""
    engine = SuggestEngine.from_config(_config_from_args(args))
    result = engine.suggest(args.query, context=args.context)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    if not result.ok:
        if result.message:
            print(result.message)
        return 0

    for doc in result:
        print(f"{doc.type.value:<9} {doc.slug:<40} {doc.title}")
    return 0


def run_search(args: argparse.Namespace) -> int:
    """Print strict prefix search results, or tool slugs."""
    engine = SuggestEngine.from_config(_config_from_args(args))

    if args.tools_only:
        limit = args.limit if args.limit is not None else 1000
        for slug in engine.search_tools(args.query, limit=limit):
            print(slug)
        return 0

    limit = args.limit if args.limit is not None else 8
    for doc in engine.search_all(args.query, limit=limit):
        print(f"{doc.type.value:<9} {doc.slug:<40} {doc.title}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexsuggest",
        description="Search index builder and intent-aware suggestions",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build-index", help="Build and write the index artifact")
    build.add_argument("--content-root", help="Content directory (default: $LEXSUGGEST_CONTENT_ROOT or content)")
    build.add_argument("--out", help="Artifact path (default: $LEXSUGGEST_INDEX_PATH or public/search-index.json)")
    build.add_argument("--strict", action="store_true", help="Abort on invalid content or documents")
    build.add_argument("--include-playbooks", action="store_true", help="Index playbooks too")
    build.set_defaults(handler=run_build_index)

    suggest = subparsers.add_parser("suggest", help="Curated suggestions for a query")
    suggest.add_argument("query")
    suggest.add_argument("--index", help="Artifact path")
    suggest.add_argument("--context", choices=["homepage", "global"], default="homepage")
    suggest.add_argument("--json", action="store_true", help="Print the full result as JSON")
    suggest.set_defaults(handler=run_suggest)

    search = subparsers.add_parser("search", help="Strict prefix search")
    search.add_argument("query")
    search.add_argument("--index", help="Artifact path")
    search.add_argument("--limit", type=int, default=None, help="Maximum results")
    search.add_argument("--tools-only", action="store_true", help="Print matching tool slugs")
    search.set_defaults(handler=run_search)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
