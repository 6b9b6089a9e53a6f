"""
SQLite storage for posts and their secondary indices.
Durable counterpart of the in-memory repositories so that separate CLI
invocations share state.

Layout: posts, posts_by_tag, likes_by_user and a counters table holding
the post counter. Posts and index snapshots are stored as JSON text.
"""
import json
import logging
import random
import sqlite3
import time
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import List, Optional, Tuple

from ..domain.entities.post import Post, split_tags
from ..domain.exceptions import LikesNotFoundError, PostNotFoundError, TagNotFoundError
from ..domain.repositories.base import LikeIndex, PostStore, TagIndex


logger = logging.getLogger(__name__)

POST_COUNTER = "post_counter"

# SQLite INTEGER is signed 64-bit; larger ids can never be stored
SQLITE_MAX_INTEGER = 2 ** 63 - 1

_BUSY_MESSAGES = ("database is locked", "database is busy", "unable to open database file")


def with_sqlite_retry(
    max_retries: int = 8,
    base_delay: float = 0.2,
    max_delay: float = 5.0,
):
    """
    Retry on SQLite 'database is locked' errors.
    Exponential backoff plus jitter.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            delay = base_delay

            for attempt in range(max_retries):
                try:
                    return func(*args, **kwargs)

                except sqlite3.OperationalError as e:
                    msg = str(e).lower()

                    if any(x in msg for x in _BUSY_MESSAGES):
                        if attempt >= max_retries - 1:
                            raise

                        sleep_time = min(delay, max_delay)
                        sleep_time += random.uniform(0, sleep_time * 0.1)

                        logger.warning(
                            "SQLite busy in %s (attempt %d/%d), retrying in %.2fs",
                            func.__name__, attempt + 1, max_retries, sleep_time,
                        )
                        time.sleep(sleep_time)
                        delay *= 2
                        continue

                    raise

        return wrapper

    return decorator


def _dump(post: Post) -> str:
    return json.dumps(post.to_dict(), ensure_ascii=False)


def _load(data: str) -> Post:
    return Post.from_dict(json.loads(data))


class SQLiteDatabase:
    """Shared connection factory and schema owner for the SQLite repositories"""

    def __init__(self, db_path: str = "outputs/postboard.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    @contextmanager
    def connection(self):
        """Context manager for database connections, commits on success"""
        conn = sqlite3.connect(self.db_path, timeout=30.0)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
            conn.execute("PRAGMA busy_timeout=30000;")
        except sqlite3.DatabaseError as e:
            # not fatal, defaults still work
            logger.debug("Could not apply SQLite pragmas: %s", e)
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    @with_sqlite_retry()
    def _ensure_schema(self):
        with self.connection() as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS posts (
                    id INTEGER PRIMARY KEY,
                    data TEXT NOT NULL  -- JSON Post
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS posts_by_tag (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    tag TEXT NOT NULL,
                    post_id INTEGER NOT NULL,
                    snapshot TEXT NOT NULL  -- JSON Post at indexing time
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS likes_by_user (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id TEXT NOT NULL,
                    post_id INTEGER NOT NULL,
                    snapshot TEXT NOT NULL  -- JSON Post right after the like
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS counters (
                    name TEXT PRIMARY KEY,
                    value INTEGER NOT NULL
                )
            """)

            cursor.execute("CREATE INDEX IF NOT EXISTS idx_posts_by_tag_tag ON posts_by_tag(tag)")
            cursor.execute("CREATE INDEX IF NOT EXISTS idx_likes_by_user_user ON likes_by_user(user_id)")

            cursor.execute(
                "INSERT OR IGNORE INTO counters (name, value) VALUES (?, 0)",
                (POST_COUNTER,),
            )


class SQLitePostStore(PostStore):
    """Post table; id allocation and insert share one transaction"""

    def __init__(self, db: SQLiteDatabase):
        self._db = db

    @property
    @with_sqlite_retry()
    def next_id(self) -> int:
        with self._db.connection() as conn:
            row = conn.execute("SELECT value FROM counters WHERE name = ?", (POST_COUNTER,)).fetchone()
            return row["value"]

    @with_sqlite_retry()
    def create(self, title: str, description: str, raw_tags: str, media: str, owner_id: str) -> Post:
        with self._db.connection() as conn:
            row = conn.execute("SELECT value FROM counters WHERE name = ?", (POST_COUNTER,)).fetchone()
            post = Post(
                id=row["value"],
                title=title,
                description=description,
                tags=split_tags(raw_tags),
                media=media,
                owner_id=owner_id,
            )
            conn.execute("INSERT INTO posts (id, data) VALUES (?, ?)", (post.id, _dump(post)))
            conn.execute(
                "UPDATE counters SET value = value + 1 WHERE name = ?",
                (POST_COUNTER,),
            )
        logger.debug("Stored post %s in %s", post.id, self._db.db_path)
        return post

    @with_sqlite_retry()
    def get(self, post_id: int) -> Optional[Post]:
        if post_id > SQLITE_MAX_INTEGER:
            return None
        with self._db.connection() as conn:
            row = conn.execute("SELECT data FROM posts WHERE id = ?", (post_id,)).fetchone()
        return _load(row["data"]) if row else None

    @with_sqlite_retry()
    def record_like(self, post_id: int, user_id: str) -> Post:
        if post_id > SQLITE_MAX_INTEGER:
            raise PostNotFoundError(post_id)
        with self._db.connection() as conn:
            row = conn.execute("SELECT data FROM posts WHERE id = ?", (post_id,)).fetchone()
            if row is None:
                raise PostNotFoundError(post_id)
            updated = _load(row["data"]).with_like(user_id)
            conn.execute("UPDATE posts SET data = ? WHERE id = ?", (_dump(updated), post_id))
        return updated

    @with_sqlite_retry()
    def list_all(self) -> List[Tuple[int, Post]]:
        with self._db.connection() as conn:
            rows = conn.execute("SELECT id, data FROM posts ORDER BY id").fetchall()
        return [(row["id"], _load(row["data"])) for row in rows]


class SQLiteTagIndex(TagIndex):

    def __init__(self, db: SQLiteDatabase):
        self._db = db

    @with_sqlite_retry()
    def index_post(self, post: Post, tags: List[str]) -> None:
        snapshot = _dump(post)
        with self._db.connection() as conn:
            conn.executemany(
                "INSERT INTO posts_by_tag (tag, post_id, snapshot) VALUES (?, ?, ?)",
                [(tag, post.id, snapshot) for tag in tags],
            )

    @with_sqlite_retry()
    def lookup(self, tag: str) -> List[Post]:
        with self._db.connection() as conn:
            rows = conn.execute(
                "SELECT snapshot FROM posts_by_tag WHERE tag = ? ORDER BY seq",
                (tag,),
            ).fetchall()
        if not rows:
            raise TagNotFoundError(tag)
        return [_load(row["snapshot"]) for row in rows]

    @with_sqlite_retry()
    def all_tags(self) -> List[str]:
        with self._db.connection() as conn:
            rows = conn.execute(
                "SELECT tag FROM posts_by_tag GROUP BY tag ORDER BY MIN(seq)"
            ).fetchall()
        return [row["tag"] for row in rows]


class SQLiteLikeIndex(LikeIndex):

    def __init__(self, db: SQLiteDatabase):
        self._db = db

    @with_sqlite_retry()
    def record_like(self, user_id: str, post: Post) -> None:
        with self._db.connection() as conn:
            conn.execute(
                "INSERT INTO likes_by_user (user_id, post_id, snapshot) VALUES (?, ?, ?)",
                (user_id, post.id, _dump(post)),
            )

    @with_sqlite_retry()
    def lookup(self, user_id: str) -> List[Post]:
        with self._db.connection() as conn:
            rows = conn.execute(
                "SELECT snapshot FROM likes_by_user WHERE user_id = ? ORDER BY seq",
                (user_id,),
            ).fetchall()
        if not rows:
            raise LikesNotFoundError(user_id)
        return [_load(row["snapshot"]) for row in rows]

    @with_sqlite_retry()
    def all_users(self) -> List[str]:
        with self._db.connection() as conn:
            rows = conn.execute(
                "SELECT user_id FROM likes_by_user GROUP BY user_id ORDER BY MIN(seq)"
            ).fetchall()
        return [row["user_id"] for row in rows]
