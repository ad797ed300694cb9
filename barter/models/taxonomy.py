"""Taxonomy data models.

Approved occupation categories and interest topics, plus the table that maps
free-text offer tags onto them.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Any

from barter.models.profile import as_list


@dataclass
class TagMapping:
    """Canonical meaning of one free-text tag.

    A hidden mapping is blacklisted: it resolves to nothing.
    """
    tag_name: str
    mapped_categories: list[str] = dataclass_field(default_factory=list)
    mapped_interests: list[str] = dataclass_field(default_factory=list)
    is_hidden: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tagName": self.tag_name,
            "mappedCategories": self.mapped_categories,
            "mappedInterests": self.mapped_interests,
            "isHidden": self.is_hidden,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], tag_name: str = "") -> "TagMapping":
        """Create from dictionary."""
        return cls(
            tag_name=data.get("tagName") or tag_name,
            mapped_categories=as_list(data.get("mappedCategories")),
            mapped_interests=as_list(data.get("mappedInterests")),
            is_hidden=bool(data.get("isHidden", False)),
        )


@dataclass
class SystemTaxonomy:
    """The system-wide taxonomy document."""
    approved_categories: list[str] = dataclass_field(default_factory=list)
    pending_categories: list[str] = dataclass_field(default_factory=list)
    approved_interests: list[str] = dataclass_field(default_factory=list)
    pending_interests: list[str] = dataclass_field(default_factory=list)
    category_hierarchy: dict[str, str] = dataclass_field(default_factory=dict)
    tag_mappings: dict[str, TagMapping] = dataclass_field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "approvedCategories": self.approved_categories,
            "pendingCategories": self.pending_categories,
            "approvedInterests": self.approved_interests,
            "pendingInterests": self.pending_interests,
            "categoryHierarchy": self.category_hierarchy,
            "tagMappings": {tag: m.to_dict() for tag, m in self.tag_mappings.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "SystemTaxonomy":
        """Create from dictionary. ``None`` yields an empty taxonomy.

        Mapping entries that are not objects are dropped, as if unmapped.

        Raises:
            ValueError: If ``data`` is not a dictionary
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError("taxonomy must be an object")
        mappings = data.get("tagMappings") or {}
        if not isinstance(mappings, dict):
            mappings = {}
        hierarchy = data.get("categoryHierarchy")
        return cls(
            approved_categories=as_list(data.get("approvedCategories")),
            pending_categories=as_list(data.get("pendingCategories")),
            approved_interests=as_list(data.get("approvedInterests")),
            pending_interests=as_list(data.get("pendingInterests")),
            category_hierarchy=dict(hierarchy) if isinstance(hierarchy, dict) else {},
            tag_mappings={
                tag: TagMapping.from_dict(entry, tag_name=tag)
                for tag, entry in mappings.items()
                if isinstance(entry, dict)
            },
        )
