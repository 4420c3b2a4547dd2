"""Services Layer - versioned store, tournament registry, lifecycle coordinator.

Invariants:
    - Every mutating operation runs inside one database transaction
    - Services never talk HTTP; they receive an authenticated user id
"""
