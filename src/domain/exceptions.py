"""
Domain Exceptions
Every lookup miss is a NotFoundError and ends the operation
"""


class PostboardError(Exception):
    """Base class for all postboard errors"""


class NotFoundError(PostboardError, LookupError):
    """A post, tag or like history does not exist"""


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: int):
        self.post_id = post_id
        super().__init__(f"No post found with id {post_id}")


class TagNotFoundError(NotFoundError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No posts found for tag {tag!r}")


class LikesNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"No liked posts found for user {user_id!r}")


class InvalidPostIdError(PostboardError, ValueError):
    """Post identifiers are non-negative integers"""


class ConfigurationError(PostboardError):
    """Configuration file is unreadable or a required setting is missing"""
