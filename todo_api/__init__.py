"""Todo API Package — CRUD service over a single todo resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
