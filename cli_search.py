"""Terminal client that reuses the in-process ranking logic."""
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Iterable, List

from catalog_search.catalog import CatalogSnapshot
from catalog_search.es_client import get_client
from catalog_search.importer import load_catalog_file
from catalog_search.models import Product
from catalog_search.search import search
from catalog_search.search_service import load_snapshot
from catalog_search.suggestions import get_search_suggestions

MAX_RESULTS = 100


def load_snapshot_for(catalog: Path | None) -> CatalogSnapshot:
    if catalog is not None:
        return load_catalog_file(catalog)
    return asyncio.run(load_snapshot(get_client()))


def perform_query(snapshot: CatalogSnapshot, query: str, suggest: bool) -> None:
    if suggest:
        entries = get_search_suggestions(query, snapshot.products, snapshot.categories)
        print(f"Suggestions for {query!r}: {len(entries)}")
        for entry in entries:
            print(f"  [{entry.kind}] {entry.id} | {entry.name}")
        return
    results = search(query, None, snapshot.products, snapshot.categories)
    pretty_print_results(query, results)


def pretty_print_results(query: str, results: List[Product]) -> None:
    print(f"Query: {query} | results: {len(results)}")
    for idx, product in enumerate(results[:MAX_RESULTS], start=1):
        tags = ",".join(sorted(tag.value for tag in product.tags)) or "-"
        print(f"  {idx:02d}. {product.id} | {product.name} | {product.price:.2f} | {product.rating:.1f} | {tags}")


def interactive_shell(snapshot: CatalogSnapshot, suggest: bool) -> None:
    print("Interactive product search. Type 'exit' to quit.")
    while True:
        try:
            query = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if query.lower() in {"exit", "quit"}:
            return
        perform_query(snapshot, query, suggest)


def batch_mode(snapshot: CatalogSnapshot, file_path: Path, suggest: bool) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            query = line.strip()
            if not query:
                continue
            perform_query(snapshot, query, suggest)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the catalog search service")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    parser.add_argument("--catalog", type=Path, help="Search a local catalog JSON file instead of Elasticsearch")
    parser.add_argument("--suggest", action="store_true", help="Print autocomplete suggestions instead of results")
    args = parser.parse_args(list(argv) if argv is not None else None)

    snapshot = load_snapshot_for(args.catalog)
    if args.batch:
        batch_mode(snapshot, args.batch, args.suggest)
        return 0
    if args.query:
        perform_query(snapshot, args.query, args.suggest)
        return 0
    interactive_shell(snapshot, args.suggest)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
