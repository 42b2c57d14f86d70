"""Core Layer: pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or schemas/
    - Projection and validation functions are pure and deterministic
    - Store and service outcomes are tagged result types, never sentinel errors

Design Decisions:
    - Functional core separated from imperative shell: the service orchestrates
      the async repository call around these pure pieces
"""
