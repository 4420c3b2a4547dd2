"""Pydantic Schemas - request/response contracts for the public API.

Invariants:
    - Wire format is camelCase; Python attributes are snake_case
"""
