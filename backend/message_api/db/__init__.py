"""Database Base — SQLAlchemy declarative base shared by all models.

Invariants:
    - Single async engine per process, owned by DatabaseSessionManager
"""
