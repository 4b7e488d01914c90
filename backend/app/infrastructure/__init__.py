"""Infrastructure Layer — store client, session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store calls wrapped with rollback and error mapping (DatabaseError)
"""
