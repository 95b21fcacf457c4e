"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Stateful routers are built by a factory that receives their dependencies
"""
