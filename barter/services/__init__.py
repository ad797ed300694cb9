"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .llm_service import LLMService
from .feed_service import FeedService
from .offer_service import OfferService

__all__ = [
    "LLMService",
    "FeedService",
    "OfferService",
]
