"""
In-Memory Repository Implementations
Dict-backed post store and snapshot indices
"""

import logging
from typing import Dict, List, Optional, Tuple

from ...domain.entities.post import Post, split_tags
from ...domain.exceptions import LikesNotFoundError, PostNotFoundError, TagNotFoundError
from ...domain.repositories.base import LikeIndex, PostStore, TagIndex


logger = logging.getLogger(__name__)


class InMemoryPostStore(PostStore):
    """
    In-memory repository for posts
    Dict insertion order doubles as creation order
    """

    def __init__(self):
        self._posts: Dict[int, Post] = {}
        self._next_id = 0

    @property
    def next_id(self) -> int:
        return self._next_id

    def create(self, title: str, description: str, raw_tags: str, media: str, owner_id: str) -> Post:
        post = Post(
            id=self._next_id,
            title=title,
            description=description,
            tags=split_tags(raw_tags),
            media=media,
            owner_id=owner_id,
        )
        self._posts[post.id] = post
        self._next_id += 1
        logger.debug("Stored post %s in memory", post.id)
        # callers get their own copy so the stored record only changes through record_like
        return post.snapshot()

    def get(self, post_id: int) -> Optional[Post]:
        post = self._posts.get(post_id)
        return post.snapshot() if post is not None else None

    def record_like(self, post_id: int, user_id: str) -> Post:
        current = self._posts.get(post_id)
        if current is None:
            raise PostNotFoundError(post_id)
        updated = current.with_like(user_id)
        self._posts[post_id] = updated
        return updated.snapshot()

    def list_all(self) -> List[Tuple[int, Post]]:
        return [(post_id, post.snapshot()) for post_id, post in self._posts.items()]


class InMemoryTagIndex(TagIndex):

    def __init__(self):
        self._posts_by_tag: Dict[str, List[Post]] = {}

    def index_post(self, post: Post, tags: List[str]) -> None:
        for tag in tags:
            self._posts_by_tag.setdefault(tag, []).append(post.snapshot())

    def lookup(self, tag: str) -> List[Post]:
        if tag not in self._posts_by_tag:
            raise TagNotFoundError(tag)
        return [post.snapshot() for post in self._posts_by_tag[tag]]

    def all_tags(self) -> List[str]:
        return list(self._posts_by_tag)


class InMemoryLikeIndex(LikeIndex):

    def __init__(self):
        self._likes_by_user: Dict[str, List[Post]] = {}

    def record_like(self, user_id: str, post: Post) -> None:
        self._likes_by_user.setdefault(user_id, []).append(post.snapshot())

    def lookup(self, user_id: str) -> List[Post]:
        if user_id not in self._likes_by_user:
            raise LikesNotFoundError(user_id)
        return [post.snapshot() for post in self._likes_by_user[user_id]]

    def all_users(self) -> List[str]:
        return list(self._likes_by_user)
