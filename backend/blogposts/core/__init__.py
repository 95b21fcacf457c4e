"""Core Layer — blog post domain logic, no HTTP, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - The store is the only stateful object; validators are pure
"""
