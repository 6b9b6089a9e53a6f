"""
Post Display Helpers
"""

import json
from typing import Iterable, List, Tuple

from rich.markup import escape
from rich.table import Table

from src.domain.entities.post import Post


class PostDisplay:
    """Helper for rendering posts as rich tables or JSON"""

    @staticmethod
    def create_posts_table(posts: Iterable[Post], title: str) -> Table:
        table = Table(title=title, show_lines=False)
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Title", style="bold")
        table.add_column("Tags", style="magenta")
        table.add_column("Media", style="dim")
        table.add_column("Likes", justify="right", style="green")
        table.add_column("Owner", style="yellow")

        for post in posts:
            table.add_row(
                str(post.id),
                escape(post.title),
                escape(", ".join(repr(tag) if not tag else tag for tag in post.tags)),
                escape(post.media),
                str(post.like_count),
                escape(post.owner_id),
            )
        return table

    @staticmethod
    def create_post_table(post: Post) -> Table:
        """Single post, one field per row"""
        table = Table(title=f"Post {post.id}", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Title", escape(post.title))
        table.add_row("Description", escape(post.description))
        table.add_row("Tags", escape(json.dumps(post.tags, ensure_ascii=False)))
        table.add_row("Media", escape(post.media))
        table.add_row("Owner", escape(post.owner_id))
        table.add_row("Liked by", escape(json.dumps(post.liking_users, ensure_ascii=False)))
        return table

    @staticmethod
    def posts_to_json(posts: List[Post]) -> str:
        return json.dumps([post.to_dict() for post in posts], ensure_ascii=False, indent=2)

    @staticmethod
    def entries_to_json(entries: List[Tuple[int, Post]]) -> str:
        """(id, post) pairs as two-element JSON arrays"""
        return json.dumps([[post_id, post.to_dict()] for post_id, post in entries], ensure_ascii=False, indent=2)
