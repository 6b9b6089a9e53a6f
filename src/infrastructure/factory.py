"""Wiring of the storage backend selected in settings."""
from dataclasses import dataclass

from ..domain.repositories.base import LikeIndex, PostStore, TagIndex
from .config.settings import Settings
from .memory.repositories import InMemoryLikeIndex, InMemoryPostStore, InMemoryTagIndex
from .sqlite_store import SQLiteDatabase, SQLiteLikeIndex, SQLitePostStore, SQLiteTagIndex


@dataclass
class Repositories:
    posts: PostStore
    tags: TagIndex
    likes: LikeIndex


def build_repositories(settings: Settings) -> Repositories:
    if settings.backend == 'memory':
        return Repositories(
            posts=InMemoryPostStore(),
            tags=InMemoryTagIndex(),
            likes=InMemoryLikeIndex(),
        )

    db = SQLiteDatabase(settings.database)
    return Repositories(
        posts=SQLitePostStore(db),
        tags=SQLiteTagIndex(db),
        likes=SQLiteLikeIndex(db),
    )


__all__ = ["Repositories", "build_repositories"]
