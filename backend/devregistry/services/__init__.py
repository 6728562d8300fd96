"""Services Layer — developer lifecycle orchestration.

Invariants:
    - Services depend on repository protocols, not on SQLAlchemy
    - Domain rule violations raised as typed DeveloperRegistryError subclasses
"""
