"""
Application Use Cases - Orchestration Layer
Following Use Case pattern and Clean Architecture principles
"""

from dataclasses import dataclass
from typing import List, Tuple
from ...domain.entities.post import Post
from ...domain.services.social_service import SocialNetworkService


@dataclass
class CreatePostRequest:
    """Request DTO for post creation"""
    caller: str
    title: str
    description: str
    tags: str
    media: str


@dataclass
class PostResponse:
    """Response DTO carrying a single post"""
    post: Post


@dataclass
class PostListResponse:
    """Response DTO carrying an ordered list of posts"""
    posts: List[Post]

    @property
    def total(self) -> int:
        return len(self.posts)


@dataclass
class AllPostsResponse:
    """Response DTO for listing the whole store"""
    entries: List[Tuple[int, Post]]

    @property
    def total(self) -> int:
        return len(self.entries)


class CreatePostUseCase:
    """Use Case for publishing a post"""

    def __init__(self, service: SocialNetworkService):
        self._service = service

    def execute(self, request: CreatePostRequest) -> PostResponse:
        post = self._service.create_post(
            caller=request.caller,
            title=request.title,
            description=request.description,
            raw_tags=request.tags,
            media=request.media,
        )
        return PostResponse(post=post)


@dataclass
class LikePostRequest:
    """Request DTO for liking a post"""
    caller: str
    post_id: int


class LikePostUseCase:
    """Use Case for liking a post; NotFoundError propagates"""

    def __init__(self, service: SocialNetworkService):
        self._service = service

    def execute(self, request: LikePostRequest) -> PostResponse:
        return PostResponse(post=self._service.like_post(request.caller, request.post_id))


@dataclass
class GetPostRequest:
    post_id: int


class GetPostUseCase:

    def __init__(self, service: SocialNetworkService):
        self._service = service

    def execute(self, request: GetPostRequest) -> PostResponse:
        return PostResponse(post=self._service.get_post(request.post_id))


class ListPostsUseCase:

    def __init__(self, service: SocialNetworkService):
        self._service = service

    def execute(self) -> AllPostsResponse:
        return AllPostsResponse(entries=self._service.get_all_posts())


@dataclass
class PostsByTagRequest:
    tag: str


class PostsByTagUseCase:
    """Use Case for browsing a tag"""

    def __init__(self, service: SocialNetworkService):
        self._service = service

    def execute(self, request: PostsByTagRequest) -> PostListResponse:
        return PostListResponse(posts=self._service.get_posts_by_tag(request.tag))


@dataclass
class LikedPostsRequest:
    caller: str


class LikedPostsUseCase:
    """Use Case for the caller's liked posts"""

    def __init__(self, service: SocialNetworkService):
        self._service = service

    def execute(self, request: LikedPostsRequest) -> PostListResponse:
        return PostListResponse(posts=self._service.get_liked_posts(request.caller))
