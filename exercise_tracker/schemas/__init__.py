"""Pydantic Schemas — response validation for API endpoints.

Invariants:
    - Schemas describe the wire contract; field order is the serialized key order

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
