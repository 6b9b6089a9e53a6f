"""
Domain Entities - Core Business Objects
Posts and their identifiers
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..exceptions import InvalidPostIdError


TAG_SEPARATOR = ","


@dataclass(frozen=True)
class PostId:
    """Value Object for Post Identification"""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidPostIdError(f"Post ID must be an integer, got {self.value!r}")
        if self.value < 0:
            raise InvalidPostIdError(f"Post ID must be non-negative, got {self.value}")

    @classmethod
    def parse(cls, raw: str) -> "PostId":
        """Build a PostId from user input such as a CLI argument"""
        try:
            return cls(int(raw))
        except (TypeError, ValueError):
            raise InvalidPostIdError(f"Post ID must be a non-negative integer, got {raw!r}")

    def __str__(self) -> str:
        return str(self.value)


def split_tags(raw_tags: str) -> List[str]:
    """Split comma separated tags verbatim.

    No trimming and no filtering: ``""`` gives ``[""]`` and ``"a,"`` gives
    ``["a", ""]``.
    """
    return raw_tags.split(TAG_SEPARATOR)


@dataclass
class Post:
    """
    Core Post Entity - Aggregate Root
    Content is fixed at creation, only liking_users grows
    """
    id: int
    title: str
    description: str
    tags: List[str]
    media: str
    owner_id: str
    liking_users: List[str] = field(default_factory=list)

    @property
    def like_count(self) -> int:
        return len(self.liking_users)

    def with_like(self, user_id: str) -> "Post":
        """Return an updated copy with user_id appended to liking_users"""
        updated = self.snapshot()
        updated.liking_users.append(user_id)
        return updated

    def snapshot(self) -> "Post":
        """Independent copy; later changes to either side don't leak"""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "media": self.media,
            "liking_users": list(self.liking_users),
            "owner_id": self.owner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            tags=list(data["tags"]),
            media=data["media"],
            owner_id=data["owner_id"],
            liking_users=list(data.get("liking_users", [])),
        )
