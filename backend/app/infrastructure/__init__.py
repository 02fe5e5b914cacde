"""Infrastructure Layer - database, identity verification, and logging.

Invariants:
    - Infrastructure never imports from services/
    - External failures are mapped to core/errors.py types before they reach routes
"""
