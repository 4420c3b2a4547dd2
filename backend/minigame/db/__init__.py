"""Database Infrastructure - SQLAlchemy Base and shared column types.

Invariants:
    - All sessions are async (AsyncSession)
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
