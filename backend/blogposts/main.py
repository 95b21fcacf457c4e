"""Blog Posts API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The store is owned by the app (app.state.store) and injected into the
      blog posts router; nothing else holds a reference at module level
    - A default store is seeded with one post when settings.seed_posts is set
    - Global error handlers map BlogPostError → plain-text 400 responses

Design Decisions:
    - create_app(store) factory: tests inject an empty store, production gets
      the seeded default through the module-level `app`
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - uvicorn single worker: the store lives in process memory
    - uvicorn access log off: the request-logging middleware writes one line
      per request
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogposts.api.error_handlers import register_error_handlers
from blogposts.api.routes import health
from blogposts.api.routes.blog_posts import create_blog_posts_router
from blogposts.config import Settings, get_settings
from blogposts.core.blog_post_store import BlogPostStore
from blogposts.infrastructure.observability import (
    register_request_logging, setup_logging,
)

logger = logging.getLogger(__name__)


def seed_store(store: BlogPostStore) -> None:
    """Give a fresh store its single starter post."""
    store.create("the alchemist", "poetry", "paulo coelho")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Blog Posts API started with {len(app.state.store)} post(s)",
    )
    yield
    logger.info("Blog Posts API shutting down")


def create_app(
    store: BlogPostStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the application around `store` (a seeded one when omitted)."""
    settings = settings or get_settings()
    if store is None:
        store = BlogPostStore()
        if settings.seed_posts:
            seed_store(store)

    app = FastAPI(title="Blog Posts API", version="1.0.0", lifespan=lifespan)
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(app)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(create_blog_posts_router(store))

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the module-level app on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "blogposts.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    run()
