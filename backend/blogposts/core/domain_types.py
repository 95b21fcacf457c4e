"""Domain Types — the BlogPost record and its identity type.

Invariants:
    - PostId is a UUID4 rendered as str (clients send it back verbatim in paths)
    - id and publish_date are assigned once at creation and never reassigned
    - to_dict() uses the public JSON field names (publishDate, not publish_date)

Design Decisions:
    - Plain dataclass over Pydantic model: values are stored as the client sent
      them, only key presence is checked at the boundary
    - publish_date is timezone-aware UTC, serialized as ISO 8601
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NewType


PostId = NewType("PostId", str)


@dataclass
class BlogPost:
    """A single blog post record held by BlogPostStore."""
    id: PostId
    title: Any
    content: Any
    author: Any
    publish_date: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "content": self.content,
            "publishDate": self.publish_date.isoformat(),
        }
