"""API Layer: FastAPI routes, middleware, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All JSON bodies served as application/json; charset=utf-8

Design Decisions:
    - Thin routes delegate to services and map result variants to HTTP
"""
