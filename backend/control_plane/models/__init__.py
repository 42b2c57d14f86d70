"""ORM Models: SQLAlchemy declarative models for control-plane tables.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per table; all models imported here so Base.metadata is complete
      for alembic autogenerate and test fixtures
"""

from control_plane.models.city import City  # noqa: F401
