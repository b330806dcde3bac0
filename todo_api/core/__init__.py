"""Core — pure domain types, rules and error hierarchy.

Invariants:
    - Nothing in core/ performs IO or imports from api/, storage/ or infrastructure/
"""
