"""Infrastructure Layer - database sessions, AuthGate client, logging.

Invariants:
    - Infrastructure never imports from services/
    - All external failures mapped to core/errors.py types
"""
