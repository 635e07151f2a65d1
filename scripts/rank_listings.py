#!/usr/bin/env python3
"""
Rank listings from a JSON file without the database.

The file holds {"preferences": {...}, "listings": [...]}, using the
stored (snake_case) field names.

Usage:
    uv run python scripts/rank_listings.py scripts/data/sample.json
    uv run python scripts/rank_listings.py scripts/data/sample.json --page 2 --limit 5
    uv run python scripts/rank_listings.py scripts/data/sample.json --explain
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.matching import rank_listings, score_dimensions  # noqa: E402


def main(path: Path, page: int, limit: int, explain: bool) -> int:
    """Rank listings in a JSON file and print the page."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        return 1

    preferences = data.get("preferences") or {}
    listings = data.get("listings") or []

    result = rank_listings(listings, preferences, page=page, limit=limit)
    print(json.dumps(result.model_dump(), ensure_ascii=False, indent=2))

    if explain:
        by_id = {str(listing.get("id")): listing for listing in listings}
        print(f"\n{'=' * 60}")
        for match in result.matches:
            listing = by_id[match.listing_id]
            print(f"--- Listing {match.listing_id} (score {match.score}) ---")
            for s in score_dimensions(preferences.get("compatibility"), listing.get("rules")):
                kind = "compared" if s.compared else "placeholder"
                print(f"  {s.dimension:<18} {s.points:5.1f} / {s.weight:<3} ({kind})")
        print(f"{'=' * 60}")

    print(
        f"Summary: {len(listings)} listings, {result.total} matched, "
        f"page {result.page}/{result.pages}",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rank listings for a seeker")
    parser.add_argument("path", type=Path, help="JSON file with preferences and listings")
    parser.add_argument("--page", type=int, default=1, help="Page number (1-based)")
    parser.add_argument("--limit", type=int, default=20, help="Page size")
    parser.add_argument("--explain", action="store_true", help="Print per-dimension points")

    args = parser.parse_args()
    sys.exit(main(args.path, args.page, args.limit, args.explain))
