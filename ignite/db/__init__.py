"""Database Infrastructure — SQLAlchemy Base for snapshot persistence.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local and test runs
"""
