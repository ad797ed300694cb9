"""Offer Service - LLM-assisted offer drafting.

This module handles:
- Turning a free-text barter request into a structured offer draft
- Filling safe defaults for anything the model leaves out

Interface Contract:
- optimize(raw_input) -> OfferDraft
- All methods raise OfferServiceError on failure
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from barter.models import DurationType
from config import OFFER_LANGUAGE

logger = logging.getLogger(__name__)

MAX_TAGS = 5

# Response shape for drafting; required fields and the duration enum match
# what the offer form needs to prefill
OFFER_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "A professional and catchy title"},
        "description": {"type": "string", "description": "A persuasive and clear description"},
        "offeredService": {"type": "string", "description": "Short summary of what is given"},
        "requestedService": {"type": "string", "description": "Short summary of what is requested"},
        "location": {"type": "string", "description": "The city, or Nationwide"},
        "tags": {
            "type": "array",
            "items": {"type": "string"},
            "description": f"Up to {MAX_TAGS} relevant tags",
        },
        "durationType": {
            "type": "string",
            "enum": [d.value for d in DurationType],
            "description": "Duration of the barter",
        },
        "expirationDate": {"type": "string", "description": "YYYY-MM-DD if mentioned"},
    },
    "required": ["title", "description", "offeredService", "requestedService", "tags", "durationType"],
}


class OfferServiceError(Exception):
    """Raised when offer drafting fails."""
    pass


@dataclass
class OfferDraft:
    """Structured offer fields suggested from free text."""
    title: str
    description: str
    offered_service: str
    requested_service: str
    location: str
    tags: list[str] = field(default_factory=list)
    duration_type: DurationType = DurationType.ONE_TIME
    expiration_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "offeredService": self.offered_service,
            "requestedService": self.requested_service,
            "location": self.location,
            "tags": self.tags,
            "durationType": self.duration_type.value,
            "expirationDate": self.expiration_date,
        }


class OfferService:
    """Service for drafting offers from free text."""

    def __init__(self, llm_service=None, language: str = OFFER_LANGUAGE):
        """Initialize with optional LLM service dependency.

        Args:
            llm_service: LLM service for drafting. If None, uses default.
            language: Language the draft should be written in
        """
        self._llm = llm_service
        self.language = language

    @property
    def llm(self):
        """Lazy load LLM service."""
        if self._llm is None:
            from barter.services.llm_service import LLMService
            self._llm = LLMService.get_instance()
        return self._llm

    def optimize(self, raw_input: str, *, today: date | None = None) -> OfferDraft:
        """Draft a structured offer from a free-text request.

        Args:
            raw_input: What the user typed, e.g. "I'll build a website for a logo"
            today: Reference date for relative deadlines (defaults to today)

        Returns:
            OfferDraft: Structured offer fields

        Raises:
            OfferServiceError: If input is empty or drafting fails
        """
        raw_input = (raw_input or "").strip()
        if not raw_input:
            raise OfferServiceError("Missing raw input")

        prompt = self._build_prompt(raw_input, today or date.today())

        try:
            response = self.llm.call(prompt, json_mode=True, response_schema=OFFER_SCHEMA)
        except Exception as e:
            raise OfferServiceError(f"Offer drafting failed: {e}") from e

        draft = self._parse_draft(response, raw_input)
        logger.info("[optimize] title=%s tags=%s", draft.title, draft.tags)
        return draft

    def _build_prompt(self, raw_input: str, today: date) -> str:
        """Build prompt for offer drafting."""
        return f'''Current Date: {today.isoformat()}
Analyze this barter offer request: "{raw_input}"
Extract structured data in {self.language}, following the response schema.
Keep at most {MAX_TAGS} tags and only set expirationDate if a deadline is mentioned.

Return ONLY the JSON object, no additional text.'''

    def _parse_draft(self, response: str, raw_input: str) -> OfferDraft:
        """Parse LLM response into OfferDraft."""
        try:
            data = json.loads(response)
        except json.JSONDecodeError as e:
            raise OfferServiceError(f"Invalid JSON response: {e}") from e
        if not isinstance(data, dict):
            raise OfferServiceError("Invalid JSON response: expected an object")

        tags = data.get("tags")
        if not isinstance(tags, list):
            tags = []

        duration = DurationType.ONGOING if data.get("durationType") == "ongoing" else DurationType.ONE_TIME

        return OfferDraft(
            title=data.get("title") or "New offer",
            description=data.get("description") or raw_input,
            offered_service=data.get("offeredService") or "Service",
            requested_service=data.get("requestedService") or "Service",
            location=data.get("location") or "Nationwide",
            tags=[str(t) for t in tags if t][:MAX_TAGS],
            duration_type=duration,
            expiration_date=data.get("expirationDate") or None,
        )
