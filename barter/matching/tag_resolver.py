"""Tag resolution - free-text offer tags to canonical taxonomy terms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from barter.models import TagMapping
from barter.models.profile import as_list


@dataclass
class ResolvedTags:
    """Canonical occupations and interests implied by a set of tags."""
    categories: set[str] = field(default_factory=set)
    interests: set[str] = field(default_factory=set)


def _mapping_parts(entry: TagMapping | dict[str, Any]) -> tuple[bool, list[str], list[str]]:
    if isinstance(entry, TagMapping):
        return entry.is_hidden, as_list(entry.mapped_categories), as_list(entry.mapped_interests)
    return (
        bool(entry.get("isHidden", False)),
        as_list(entry.get("mappedCategories")),
        as_list(entry.get("mappedInterests")),
    )


def resolve_tags(
    tags: Iterable[str] | None,
    mapping: Mapping[str, TagMapping | dict[str, Any]] | None,
) -> ResolvedTags:
    """Resolve tags into the categories and interests they map to.

    Unmapped tags, hidden mappings and malformed entries contribute nothing.
    Duplicates collapse into the result sets.

    Args:
        tags: Free-text tags, possibly repeated
        mapping: Tag -> mapping entry, as ``TagMapping`` or stored dict

    Returns:
        ResolvedTags: Union of every visible mapping's categories and interests
    """
    resolved = ResolvedTags()
    if not tags or not isinstance(mapping, Mapping):
        return resolved

    for tag in tags:
        if not isinstance(tag, str):
            continue
        entry = mapping.get(tag)
        if not isinstance(entry, (TagMapping, dict)):
            continue
        is_hidden, categories, interests = _mapping_parts(entry)
        if is_hidden:
            continue
        resolved.categories.update(categories)
        resolved.interests.update(interests)

    return resolved
