"""Pydantic Schemas — form validation and response models at the API boundary.

Invariants:
    - Schemas validate at system boundary (submitted forms, API responses)
    - Domain types from core/ used for enum fields
"""
