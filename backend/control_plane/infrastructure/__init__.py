"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures are converted to core result variants at this boundary

Design Decisions:
    - Repository implementations live next to the session manager they wrap
"""
