"""Database Layer — declarative Base and repository implementations.

Invariants:
    - Repositories implement core/repository_protocols.py structurally
    - Repositories are the only code that builds SQL statements

Design Decisions:
    - One repository per aggregate, bound to a request-scoped AsyncSession
"""
