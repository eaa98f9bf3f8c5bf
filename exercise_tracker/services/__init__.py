"""Services Layer — orchestrates core logic around repository IO.

Invariants:
    - Services receive repositories; they never open sessions themselves
    - Domain errors propagate to the API layer's global handlers

Design Decisions:
    - One service module per resource for locality
"""
