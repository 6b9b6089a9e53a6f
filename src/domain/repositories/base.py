"""
Domain Repository Interfaces
One primary store and two snapshot indices built from it
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..entities.post import Post


class PostStore(ABC):
    """
    Repository interface for the canonical post table
    Owns id allocation and is the source of truth for like history
    """

    @abstractmethod
    def create(self, title: str, description: str, raw_tags: str, media: str, owner_id: str) -> Post:
        """Store a new post under the next id and return it"""
        pass

    @abstractmethod
    def get(self, post_id: int) -> Optional[Post]:
        """Get post by id, None when absent"""
        pass

    @abstractmethod
    def record_like(self, post_id: int, user_id: str) -> Post:
        """Append user_id to the post's liking users, raise PostNotFoundError if absent"""
        pass

    @abstractmethod
    def list_all(self) -> List[Tuple[int, Post]]:
        """All (id, post) pairs in creation order"""
        pass

    @property
    @abstractmethod
    def next_id(self) -> int:
        """Id the next created post will receive"""
        pass


class TagIndex(ABC):
    """Repository interface for tag -> post snapshots"""

    @abstractmethod
    def index_post(self, post: Post, tags: List[str]) -> None:
        """Append a snapshot of post under every tag, in order"""
        pass

    @abstractmethod
    def lookup(self, tag: str) -> List[Post]:
        """Posts indexed under tag, raise TagNotFoundError if never indexed"""
        pass

    @abstractmethod
    def all_tags(self) -> List[str]:
        """Tags in first-indexed order, used by export"""
        pass


class LikeIndex(ABC):
    """Repository interface for user -> liked post snapshots"""

    @abstractmethod
    def record_like(self, user_id: str, post: Post) -> None:
        """Append a snapshot of the already liked post to the user's history"""
        pass

    @abstractmethod
    def lookup(self, user_id: str) -> List[Post]:
        """Liked posts in like order, raise LikesNotFoundError if none"""
        pass

    @abstractmethod
    def all_users(self) -> List[str]:
        """Users in first-like order, used by export"""
        pass
