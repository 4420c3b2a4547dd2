"""Core Layer - pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Randomness enters only through an injected random source

Design Decisions:
    - Functional core separated from imperative shell: rules raise typed errors,
      the shell decides what to append
"""
