"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols, never the other way round
    - All SQLAlchemy failures mapped to DatabaseError

Design Decisions:
    - Session manager, repository and logging setup kept in separate modules
"""
