"""Database Infrastructure: SQLAlchemy Base for the control store.

Invariants:
    - Single async engine per process (owned by DatabaseSessionManager)

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
