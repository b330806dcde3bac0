"""Pydantic Schemas — request/response contracts for the todo endpoints.

Invariants:
    - Schemas validate shape and types only; task rules live in core/enforce_todo.py
"""
