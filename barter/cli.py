from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from barter.models import BarterOffer, SystemTaxonomy, UserProfile
from barter.services.feed_service import FeedFilters, FeedService, FeedServiceError, FeedSort, FeedView
from config import LOG_LEVEL


def _load_json(path: Path):
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build an offer feed for a user from JSON exports of users, offers and the taxonomy."
    )
    parser.add_argument("--user", type=Path, help="Path to the viewing user's JSON profile")
    parser.add_argument("--offers", type=Path, required=True, help="Path to a JSON array of offers")
    parser.add_argument("--taxonomy", type=Path, help="Path to the taxonomy JSON document")
    parser.add_argument(
        "--view",
        choices=[v.value for v in FeedView],
        default=FeedView.FOR_YOU.value,
        help="Feed to build (default: for_you)",
    )
    parser.add_argument("--search", default="", help="Case-insensitive title/description search")
    parser.add_argument(
        "--sort",
        choices=[s.value for s in FeedSort],
        default=FeedSort.NEWEST.value,
        help="Sort order (default: newest)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    if args.view == FeedView.FOR_YOU.value and not args.user:
        raise SystemExit("--user is required for the for_you feed")

    viewer = UserProfile.from_dict(_load_json(args.user)) if args.user else None
    offers = [BarterOffer.from_dict(o) for o in _load_json(args.offers)]
    taxonomy = SystemTaxonomy.from_dict(_load_json(args.taxonomy)) if args.taxonomy else None

    filters = FeedFilters(
        view=FeedView(args.view),
        search_query=args.search,
        sort_by=FeedSort(args.sort),
    )
    try:
        feed = FeedService(taxonomy).build(offers, filters, viewer=viewer)
    except FeedServiceError as e:
        raise SystemExit(str(e)) from e

    for offer in feed:
        print(f"{offer.id}\t{offer.title}")


if __name__ == "__main__":
    main()
