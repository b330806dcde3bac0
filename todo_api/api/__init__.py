"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Handlers translate HTTP to TodoRepository calls; rules live in core/
"""
