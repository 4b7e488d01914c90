"""Invoice Dashboard Application Package — read/write layer for the invoicing dashboard.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
