"""
SuperApp Backend — Application Package
========================================

What: Personal productivity API. Contacts/CRM with tasks, finance, fitness,
      meals, habits, wellness, travel, and the AI-assisted Universal Saver.
Who:  Used implicitly by Python's import system and explicitly by Alembic,
      pytest, and uvicorn (`uvicorn superapp.main:app`).

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, auth gate
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, orchestration
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Reads for guests never reach the database: the read boundary selects
    a static data source instead (see services/data_sources.py).
"""

__version__ = "1.0.0"
