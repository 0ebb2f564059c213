"""Infrastructure Layer — database sessions, logging and credential primitives.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Database errors are mapped to core/errors.py types before leaving this layer
"""
