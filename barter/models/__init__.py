"""Data models - Pure data structures with no business logic."""

from .profile import UserProfile
from .offer import BarterOffer, DurationType, OfferStatus, Rating
from .taxonomy import SystemTaxonomy, TagMapping

__all__ = [
    "UserProfile",
    "BarterOffer",
    "DurationType",
    "OfferStatus",
    "Rating",
    "SystemTaxonomy",
    "TagMapping",
]
