"""Relevance matching - decides what goes in a user's "for you" feed."""

from .tag_resolver import ResolvedTags, resolve_tags
from .relevance import (
    RelevanceDecision,
    RelevanceReason,
    explain_relevance,
    is_offer_relevant_for_user,
)

__all__ = [
    "ResolvedTags",
    "resolve_tags",
    "RelevanceDecision",
    "RelevanceReason",
    "explain_relevance",
    "is_offer_relevant_for_user",
]
