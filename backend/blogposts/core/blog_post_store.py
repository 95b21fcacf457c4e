"""Blog Post Store — in-memory ordered collection of BlogPost records.

Invariants:
    - get() returns records in insertion order
    - update() overwrites title/content/author only; id and publish_date never change
    - update() and delete() of an unknown id are silent no-ops

Design Decisions:
    - Instance state, not module state: the app owns one store and injects it
      into the router factory, tests build their own
    - Synchronous methods: single event loop, each call completes before the
      next request runs, so no locking
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping

from blogposts.core.domain_types import BlogPost, PostId

logger = logging.getLogger(__name__)


class BlogPostStore:
    """Process-lifetime collection of blog posts."""

    def __init__(self) -> None:
        self._posts: list[BlogPost] = []

    def __len__(self) -> int:
        return len(self._posts)

    def create(
        self,
        title: Any,
        content: Any,
        author: Any,
        publish_date: datetime | None = None,
    ) -> BlogPost:
        """Append a new post with a fresh id and creation timestamp."""
        post = BlogPost(
            id=PostId(str(uuid.uuid4())),
            title=title,
            content=content,
            author=author,
            publish_date=publish_date or datetime.now(timezone.utc),
        )
        self._posts.append(post)
        logger.debug("Created blog post", extra={"post_id": post.id})
        return post

    def get(self) -> list[BlogPost]:
        return list(self._posts)

    def get_by_id(self, post_id: str) -> BlogPost | None:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def update(self, record: Mapping[str, Any]) -> BlogPost | None:
        """Overwrite title/content/author of the post matching record["id"].

        Returns the updated post, or None when no post has that id.
        """
        post = self.get_by_id(record["id"])
        if post is None:
            return None
        post.title = record["title"]
        post.content = record["content"]
        post.author = record["author"]
        return post

    def delete(self, post_id: str) -> None:
        self._posts = [p for p in self._posts if p.id != post_id]
