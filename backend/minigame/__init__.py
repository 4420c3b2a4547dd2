"""Minigame Service Package - tournament lifecycle over an append-only log.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
