"""Blog Posts Routes — list, create, update and delete over an injected store.

Invariants:
    - Collection routes answer on both /blog-posts and /blog-posts/
    - POST requires title, author, content; PUT requires author, title, content, id
    - PUT body id must equal the path id (compared as sent, no coercion)
    - PUT and DELETE respond 204 with an empty body, found or not
    - A missing or non-JSON body reads as {} and fails on its first required key
    - A JSON body that is malformed or not an object → RequestValidationError

Design Decisions:
    - Router built by create_blog_posts_router(store): handlers close over the
      store passed in, no module-level state
    - Presence checks go through require_fields so both write routes report
      missing keys identically
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError

from blogposts.core.blog_post_store import BlogPostStore
from blogposts.core.errors import IdMismatchError
from blogposts.core.require_fields import (
    CREATE_FIELDS, UPDATE_FIELDS, require_fields,
)

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> dict[str, Any]:
    """Read the request body as a JSON object.

    An empty body or a non-JSON content type reads as {} so presence checks
    name the first missing field.
    """
    raw = await request.body()
    media_type = request.headers.get("content-type", "").split(";")[0]
    media_type = media_type.strip().lower()
    if not raw or not (
        media_type == "application/json" or media_type.endswith("+json")
    ):
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise RequestValidationError([{
            "type": "json_invalid", "loc": ("body",),
            "msg": "JSON decode error", "input": {},
        }])
    if not isinstance(body, dict):
        raise RequestValidationError([{
            "type": "dict_type", "loc": ("body",),
            "msg": "Input should be a valid dictionary", "input": body,
        }])
    return body


def create_blog_posts_router(store: BlogPostStore) -> APIRouter:
    """Build the /blog-posts router bound to `store`."""
    router = APIRouter(prefix="/blog-posts", tags=["blog-posts"])

    @router.get("/")
    @router.get("", include_in_schema=False)
    async def list_blog_posts():
        """Return every blog post in insertion order."""
        return [post.to_dict() for post in store.get()]

    @router.post("/", status_code=status.HTTP_201_CREATED)
    @router.post(
        "", status_code=status.HTTP_201_CREATED, include_in_schema=False,
    )
    async def create_blog_post(
        body: dict[str, Any] = Depends(read_json_body),
    ):
        """Create a blog post from title, author and content."""
        require_fields(body, CREATE_FIELDS)
        post = store.create(body["title"], body["content"], body["author"])
        logger.info(
            f"Created blog post `{post.id}`", extra={"post_id": post.id},
        )
        return post.to_dict()

    @router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def update_blog_post(
        post_id: str, body: dict[str, Any] = Depends(read_json_body),
    ):
        """Overwrite title, author and content of an existing post."""
        require_fields(body, UPDATE_FIELDS)
        if body["id"] != post_id:
            raise IdMismatchError(post_id, body["id"])

        logger.info(
            f"Updating blog post item `{post_id}`", extra={"post_id": post_id},
        )
        updated = store.update({
            "id": post_id,
            "title": body["title"],
            "author": body["author"],
            "content": body["content"],
        })
        if updated is None:
            logger.warning(
                f"Blog post `{post_id}` not found, nothing updated",
                extra={"post_id": post_id},
            )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_blog_post(post_id: str):
        """Remove a post. Unknown ids are ignored."""
        store.delete(post_id)
        logger.info(
            f"Deleted blog post `{post_id}`", extra={"post_id": post_id},
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
