"""Root conftest — shared test configuration."""

import os

# Keep test runs independent of a developer's .env / shell
os.environ.setdefault("SEED_POSTS", "true")
os.environ.setdefault("LOG_FORMAT", "text")
