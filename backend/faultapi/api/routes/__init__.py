"""Route Modules — one file per concern.

Invariants:
    - Each module builds its own APIRouter with prefix and tags
    - Routes never contain validation logic (delegate to services)
"""
