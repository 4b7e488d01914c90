"""Services Layer — dashboard queries and invoice mutations.

Invariants:
    - Services receive their store (and invalidator) at construction; no globals
    - Services never import from api/ or infrastructure/
"""
