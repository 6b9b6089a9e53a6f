"""
Domain Services - Business Logic Layer
Keeps the post store and its secondary indices in step
"""

import logging
from typing import List, Tuple

from ..entities.post import Post, PostId
from ..exceptions import PostNotFoundError
from ..repositories.base import LikeIndex, PostStore, TagIndex


logger = logging.getLogger(__name__)


class SocialNetworkService:
    """
    Domain Service for posting, tagging and liking.

    Every write goes to the post store first and is then propagated to the
    matching index. The two steps are not atomic: a failure between them
    leaves the post stored but missing from the index, and nothing repairs
    that afterwards. Callers must run one write at a time (single writer);
    concurrent writers need a lock around each create/like call.

    The caller identity is always passed in explicitly.
    """

    def __init__(self, post_store: PostStore, tag_index: TagIndex, like_index: LikeIndex):
        self._posts = post_store
        self._tags = tag_index
        self._likes = like_index

    def create_post(self, caller: str, title: str, description: str, raw_tags: str, media: str) -> Post:
        """Store a new post owned by caller and index it under each of its tags.

        Parameters
        ----------
        caller: str
            Identity of the user creating the post; becomes ``owner_id``.
        raw_tags: str
            Comma separated tags, split verbatim (empty tags are kept).

        Returns
        -------
        Post
            The stored post, with an empty like history.
        """
        post = self._posts.create(title, description, raw_tags, media, caller)
        logger.info("Created post %s by %s", post.id, caller)
        self._tags.index_post(post, post.tags)
        logger.debug("Indexed post %s under %d tag(s)", post.id, len(post.tags))
        return post

    def get_post(self, post_id: int) -> Post:
        post = self._posts.get(PostId(post_id).value)
        if post is None:
            logger.debug("Post %s not found", post_id)
            raise PostNotFoundError(post_id)
        return post

    def get_all_posts(self) -> List[Tuple[int, Post]]:
        return self._posts.list_all()

    def like_post(self, caller: str, post_id: int) -> Post:
        """Record a like by caller and add the liked post to caller's history.

        Repeated likes by the same caller are all recorded. Raises
        PostNotFoundError for an unknown id.
        """
        self.get_post(post_id)
        liked = self._posts.record_like(post_id, caller)
        logger.info("Post %s liked by %s (%d like(s))", post_id, caller, liked.like_count)
        self._likes.record_like(caller, liked)
        return liked

    def get_liked_posts(self, caller: str) -> List[Post]:
        """Posts liked by caller, as they were at the time of each like"""
        return self._likes.lookup(caller)

    def get_posts_by_tag(self, tag: str) -> List[Post]:
        """Posts created with tag, as they were at creation time"""
        return self._tags.lookup(tag)
