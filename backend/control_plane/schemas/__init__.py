"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Schemas serialize at the system boundary only
    - Wire keys are camelCase (aliases); Python attributes stay snake_case

Design Decisions:
    - Separate from models and core: schemas are API contracts, models are persistence
"""
