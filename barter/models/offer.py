"""Barter offer data models.

Pure data structures for offers posted to the marketplace.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any

from barter.models.profile import as_list


class OfferStatus(Enum):
    """Moderation status of an offer."""
    ACTIVE = "active"
    PENDING = "pending"
    REJECTED = "rejected"
    EXPIRED = "expired"


class DurationType(Enum):
    """How long the barter runs."""
    ONE_TIME = "one-time"
    ONGOING = "ongoing"


@dataclass
class Rating:
    """A single 1-5 rating left on an offer."""
    user_id: str
    score: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"userId": self.user_id, "score": self.score}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rating":
        """Create from dictionary."""
        return cls(user_id=data.get("userId", ""), score=int(data.get("score", 0)))


@dataclass
class BarterOffer:
    """A posted barter listing.

    ``tags`` is the generic list. ``giving_tags`` and ``receiving_tags`` are
    the structured per-side lists; either may be empty, in which case the
    matcher falls back to ``tags`` for that side only.

    ``status`` and ``duration_type`` also accept their stored string values;
    unknown values raise ``ValueError``.
    """
    id: str
    profile_id: str
    status: OfferStatus = OfferStatus.ACTIVE
    tags: list[str] = dataclass_field(default_factory=list)
    giving_tags: list[str] = dataclass_field(default_factory=list)
    receiving_tags: list[str] = dataclass_field(default_factory=list)
    title: str = ""
    description: str = ""
    offered_service: str = ""
    requested_service: str = ""
    location: str = ""
    duration_type: DurationType = DurationType.ONE_TIME
    expiration_date: str | None = None
    created_at: str = ""
    ratings: list[Rating] = dataclass_field(default_factory=list)
    average_rating: float = 0.0

    def __post_init__(self):
        # accept the stored string values as well as the enums
        self.status = OfferStatus(self.status)
        self.duration_type = DurationType(self.duration_type)

    @property
    def is_active(self) -> bool:
        return self.status is OfferStatus.ACTIVE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "profileId": self.profile_id,
            "status": self.status.value,
            "tags": self.tags,
            "giving_tags": self.giving_tags,
            "receiving_tags": self.receiving_tags,
            "title": self.title,
            "description": self.description,
            "offeredService": self.offered_service,
            "requestedService": self.requested_service,
            "location": self.location,
            "durationType": self.duration_type.value,
            "expirationDate": self.expiration_date,
            "createdAt": self.created_at,
            "ratings": [r.to_dict() for r in self.ratings],
            "averageRating": self.average_rating,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BarterOffer":
        """Create from dictionary.

        Raises:
            ValueError: If ``status`` or ``durationType`` is not a known value
        """
        return cls(
            id=data.get("id", ""),
            profile_id=data.get("profileId", ""),
            status=OfferStatus(data.get("status") or "active"),
            tags=as_list(data.get("tags")),
            giving_tags=as_list(data.get("giving_tags")),
            receiving_tags=as_list(data.get("receiving_tags")),
            title=data.get("title") or "",
            description=data.get("description") or "",
            offered_service=data.get("offeredService") or "",
            requested_service=data.get("requestedService") or "",
            location=data.get("location") or "",
            duration_type=DurationType(data.get("durationType") or "one-time"),
            expiration_date=data.get("expirationDate") or None,
            created_at=data.get("createdAt") or "",
            ratings=[Rating.from_dict(r) for r in as_list(data.get("ratings")) if isinstance(r, dict)],
            average_rating=float(data.get("averageRating") or 0.0),
        )
