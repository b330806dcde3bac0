"""Database Metadata — SQLAlchemy declarative base for the todos table."""
