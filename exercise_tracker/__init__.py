"""Exercise Tracker Package — users, exercises and filtered exercise logs over REST.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty apart from the version: explicit imports only, no star exports
"""

__version__ = "1.0.0"
