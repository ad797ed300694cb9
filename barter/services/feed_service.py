"""Feed Service - Builds the offer feeds shown on the main page.

This module handles:
- The personalized "for you" feed (relevance matching per offer)
- Visibility rules for non-active offers
- Search, duration and category filters, and sort orders

Interface Contract:
- for_you(user, offers) -> list[BarterOffer]
- build(offers, filters, viewer=None) -> list[BarterOffer]
- All methods raise FeedServiceError on invalid requests
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from barter.matching import explain_relevance
from barter.models import BarterOffer, SystemTaxonomy, UserProfile

logger = logging.getLogger(__name__)


class FeedServiceError(Exception):
    """Raised when a feed request is invalid."""
    pass


class FeedView(Enum):
    """Which feed the user is looking at."""
    ALL = "all"
    FOR_YOU = "for_you"


class FeedSort(Enum):
    """Available sort orders."""
    NEWEST = "newest"
    RATING = "rating"
    DEADLINE = "deadline"


DURATION_FILTERS = ("all", "one-time", "ongoing")


@dataclass
class FeedFilters:
    """Filters selected on the feed screen."""
    view: FeedView = FeedView.ALL
    search_query: str = ""
    duration: str = "all"
    categories: list[str] = field(default_factory=list)
    sort_by: FeedSort = FeedSort.NEWEST

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "FeedFilters":
        """Create from dictionary.

        Raises:
            FeedServiceError: If a value is not one of the known options
        """
        data = data or {}
        try:
            filters = cls(
                view=FeedView(data.get("view") or "all"),
                search_query=data.get("search") or data.get("searchQuery") or "",
                duration=data.get("duration") or "all",
                categories=list(data.get("categories") or []),
                sort_by=FeedSort(data.get("sortBy") or data.get("sort") or "newest"),
            )
        except ValueError as e:
            raise FeedServiceError(f"Invalid filter: {e}") from e
        if filters.duration not in DURATION_FILTERS:
            raise FeedServiceError(f"Invalid filter: unknown duration {filters.duration!r}")
        return filters


class FeedService:
    """Service for building offer feeds against a taxonomy snapshot."""

    def __init__(self, taxonomy: SystemTaxonomy | None = None):
        """Initialize with the current taxonomy.

        Args:
            taxonomy: Taxonomy holding the tag mapping table. If None, no tag
                has a mapped meaning and only raw interest matches apply.
        """
        self.taxonomy = taxonomy or SystemTaxonomy()

    def for_you(self, user: UserProfile, offers: Iterable[BarterOffer]) -> list[BarterOffer]:
        """Return the offers relevant to ``user``, in their original order."""
        matched = []
        total = 0
        for offer in offers:
            total += 1
            decision = explain_relevance(user, offer, self.taxonomy)
            if decision.relevant:
                logger.debug(
                    "[feed] offer=%s reason=%s matched=%s",
                    offer.id, decision.reason.value, decision.matched,
                )
                matched.append(offer)
        logger.info("[feed] user=%s offers=%d matched=%d", user.id, total, len(matched))
        return matched

    def build(
        self,
        offers: Iterable[BarterOffer],
        filters: FeedFilters | None = None,
        *,
        viewer: UserProfile | None = None,
    ) -> list[BarterOffer]:
        """Build a filtered, sorted feed.

        Args:
            offers: Every candidate offer
            filters: Feed screen selections (defaults to the "all" feed)
            viewer: The signed-in user, if any

        Returns:
            list[BarterOffer]: Offers to show, in display order

        Raises:
            FeedServiceError: If the "for you" view is requested without a viewer
        """
        filters = filters or FeedFilters()

        if filters.view is FeedView.FOR_YOU:
            if viewer is None:
                raise FeedServiceError("The for-you feed requires a signed-in user")
            result = self.for_you(viewer, offers)
        else:
            result = [o for o in offers if self._is_visible(o, viewer)]

        query = filters.search_query.strip().lower()
        if query:
            result = [
                o for o in result
                if query in o.title.lower() or query in o.description.lower()
            ]

        if filters.duration != "all":
            result = [o for o in result if o.duration_type.value == filters.duration]

        if filters.categories:
            result = [
                o for o in result
                if any(c in o.tags or c in o.offered_service for c in filters.categories)
            ]

        return self._sort(result, filters.sort_by)

    def _is_visible(self, offer: BarterOffer, viewer: UserProfile | None) -> bool:
        """Non-active offers are shown only to their owner and to admins."""
        if offer.is_active:
            return True
        if viewer is None:
            return False
        return offer.profile_id == viewer.id or viewer.is_admin

    def _sort(self, offers: list[BarterOffer], sort_by: FeedSort) -> list[BarterOffer]:
        if sort_by is FeedSort.RATING:
            return sorted(offers, key=lambda o: o.average_rating, reverse=True)
        if sort_by is FeedSort.DEADLINE:
            # offers without a deadline go last
            return sorted(
                offers,
                key=lambda o: (o.expiration_date is None, o.expiration_date or ""),
            )
        return sorted(offers, key=lambda o: o.created_at, reverse=True)
