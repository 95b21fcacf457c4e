"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes delegate storage to BlogPostStore, never touch records directly

Design Decisions:
    - Thin routes: presence validation + store call + response mapping
"""
