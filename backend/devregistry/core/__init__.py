"""Core Layer — domain types, error hierarchy, and persistence contracts.

Invariants:
    - Core never imports from infrastructure/ or api/
    - All IO reached through Protocol types (repository_protocols.py)

Design Decisions:
    - Errors carry their own HTTP status so the API layer maps them uniformly
"""
