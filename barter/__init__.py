"""Barter marketplace relevance matching package."""

from .models import BarterOffer, SystemTaxonomy, TagMapping, UserProfile
from .matching import explain_relevance, is_offer_relevant_for_user, resolve_tags

__all__ = [
    "BarterOffer",
    "SystemTaxonomy",
    "TagMapping",
    "UserProfile",
    "explain_relevance",
    "is_offer_relevant_for_user",
    "resolve_tags",
]
