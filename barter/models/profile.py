"""User profile data model.

Pure data structures with no business logic.
These can be safely used by any module.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Any


def as_list(value: Any) -> list[str]:
    """Normalize an optional stored collection to a list.

    A lone string becomes a one-item list; anything that is not a list,
    tuple or set becomes empty.
    """
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return []


@dataclass
class UserProfile:
    """A marketplace member as stored in the users collection."""
    id: str
    name: str = ""
    main_field: str = ""
    secondary_fields: list[str] = dataclass_field(default_factory=list)
    interests: list[str] = dataclass_field(default_factory=list)
    role: str = "user"
    email: str | None = None
    bio: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "mainField": self.main_field,
            "secondaryFields": self.secondary_fields,
            "interests": self.interests,
            "role": self.role,
            "email": self.email,
            "bio": self.bio,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        """Create from dictionary.

        Some registration flows store ``mainField`` as a list of up to three
        professions. The first entry becomes the main field and the rest are
        put in front of ``secondaryFields``.
        """
        main_field = data.get("mainField") or ""
        secondary = as_list(data.get("secondaryFields"))
        if isinstance(main_field, (list, tuple)):
            fields = [f for f in main_field if f]
            main_field = fields[0] if fields else ""
            secondary = fields[1:] + secondary

        return cls(
            id=data.get("id", ""),
            name=data.get("name") or "",
            main_field=main_field,
            secondary_fields=secondary,
            interests=as_list(data.get("interests")),
            role=data.get("role") or "user",
            email=data.get("email"),
            bio=data.get("bio") or "",
        )
