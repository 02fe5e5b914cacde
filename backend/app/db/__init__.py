"""Database Infrastructure - SQLAlchemy Base and shared timestamp columns.

Invariants:
    - Single async engine per process (built by infrastructure/database.py in the lifespan)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
