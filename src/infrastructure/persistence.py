"""Persistence helpers for exporting the store and its indices as JSON."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .factory import Repositories


logger = logging.getLogger(__name__)


def dump_state(repositories: Repositories) -> Dict[str, Any]:
    """Collect the three maps and the post counter into plain data.

    Returns
    -------
    Dict[str, Any]
        ``post_counter`` (int), ``posts`` keyed by id, ``posts_by_tag`` keyed
        by tag and ``likes_by_user`` keyed by user. Index entries are the
        snapshots as stored, not the current posts.
    """
    return {
        'post_counter': repositories.posts.next_id,
        'posts': {
            str(post_id): post.to_dict() for post_id, post in repositories.posts.list_all()
        },
        'posts_by_tag': {
            tag: [post.to_dict() for post in repositories.tags.lookup(tag)]
            for tag in repositories.tags.all_tags()
        },
        'likes_by_user': {
            user: [post.to_dict() for post in repositories.likes.lookup(user)]
            for user in repositories.likes.all_users()
        },
    }


def export_state(repositories: Repositories, output_path: str) -> Dict[str, Any]:
    """Write dump_state() to output_path and return the dumped data."""
    state = dump_state(repositories)
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, 'w', encoding='utf-8') as f:
        json.dump(state, f, ensure_ascii=False, indent=2)
    logger.info("Exported %d posts to %s", len(state['posts']), out)
    return state


__all__ = ["dump_state", "export_state"]
