# app\adapters\persistence\__init__.py
"""
Persistence Adapters.

This package implements the Candidate Repository port defined in the Core Domain.
It handles the translation between Domain Entities and relational rows
(SQLite via aiosqlite by default, any async SQLAlchemy driver in production).

Components:
- SQLAlchemyCandidateRepository: Concrete implementation of ICandidateRepository.
- build_engine / build_session_factory / create_tables: engine plumbing.
"""

from .database import Base, build_engine, build_session_factory, create_tables
from .sqlalchemy_candidate_repo import SQLAlchemyCandidateRepository

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "SQLAlchemyCandidateRepository",
]
