"""Relevance evaluation for the personalized "for you" feed.

Rules, checked in order:

1. Professional match - the offer needs (receiving side) one of the user's
   occupations and does not itself give that occupation. The second half is
   the competitor check: a plumber is not shown another plumber's offer.
2. Interest match - one of the user's interests is mapped from the giving
   side, mapped from the receiving side, or appears verbatim as a raw tag on
   either side. The raw fallback covers tags the admins have not mapped yet.

All comparisons are exact, case-sensitive string equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from barter.matching.tag_resolver import resolve_tags
from barter.models import BarterOffer, OfferStatus, SystemTaxonomy, UserProfile


class RelevanceReason(Enum):
    """Why an offer was or was not included."""
    INACTIVE = "inactive"
    OWN_OFFER = "own_offer"
    PROFESSIONAL = "professional"
    INTEREST = "interest"
    NONE = "none"


@dataclass
class RelevanceDecision:
    """Outcome of evaluating one (user, offer) pair."""
    relevant: bool
    reason: RelevanceReason
    matched: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "relevant": self.relevant,
            "reason": self.reason.value,
            "matched": self.matched,
        }


def _side_tags(specific: list[str] | None, fallback: list[str] | None) -> list[str]:
    return list(specific) if specific else list(fallback or [])


def explain_relevance(
    user: UserProfile,
    offer: BarterOffer,
    taxonomy: SystemTaxonomy | None,
) -> RelevanceDecision:
    """Evaluate an offer for a user and report which rule decided it."""
    if offer.status is not OfferStatus.ACTIVE:
        return RelevanceDecision(False, RelevanceReason.INACTIVE)
    if offer.profile_id == user.id:
        return RelevanceDecision(False, RelevanceReason.OWN_OFFER)

    occupations = [user.main_field, *(user.secondary_fields or [])]
    user_occupations = {o for o in occupations if o}
    user_interests = set(user.interests or [])

    giving_tags = _side_tags(offer.giving_tags, offer.tags)
    receiving_tags = _side_tags(offer.receiving_tags, offer.tags)

    mapping = taxonomy.tag_mappings if taxonomy is not None else None
    giving = resolve_tags(giving_tags, mapping)
    receiving = resolve_tags(receiving_tags, mapping)

    # sorted() keeps the reported match deterministic
    for occupation in sorted(user_occupations):
        if occupation in receiving.categories and occupation not in giving.categories:
            return RelevanceDecision(True, RelevanceReason.PROFESSIONAL, occupation)

    raw_tags = set(giving_tags) | set(receiving_tags)
    for interest in sorted(user_interests):
        if (
            interest in giving.interests
            or interest in receiving.interests
            or interest in raw_tags
        ):
            return RelevanceDecision(True, RelevanceReason.INTEREST, interest)

    return RelevanceDecision(False, RelevanceReason.NONE)


def is_offer_relevant_for_user(
    user: UserProfile,
    offer: BarterOffer,
    taxonomy: SystemTaxonomy | None,
) -> bool:
    """Decide whether an offer belongs in the user's "for you" feed.

    Args:
        user: The viewing user
        offer: Candidate offer
        taxonomy: System taxonomy holding the tag mapping table. ``None`` or
            an empty table means no tag carries mapped meaning.

    Returns:
        bool: True if a professional or interest rule matched
    """
    return explain_relevance(user, offer, taxonomy).relevant
