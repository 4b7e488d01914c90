"""Database Infrastructure — SQLAlchemy declarative Base for the store schema.

Invariants:
    - The schema is owned by the hosted store; metadata here mirrors it for queries and tests
"""
