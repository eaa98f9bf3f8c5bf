"""Infrastructure Layer — database lifecycle and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures mapped to DatabaseError before leaving this layer

Design Decisions:
    - Process-wide engine created in lifespan, injected per request via get_db
"""
