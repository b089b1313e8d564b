"""
BirdRef Backend — Application Package Initializer
==================================================

What: Marks the `birdref` directory as a Python package.
Who:  Imported by uvicorn (`birdref.main:app`), pytest, and the module runner.

Architecture Note:
    The backend is a thin translation layer between HTTP and SQL:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, request bodies
    ├─────────────────────────────────────┤
    │      Bird Service (SQL builders)    │  ← one parameterized statement per call
    ├─────────────────────────────────────┤
    │   Store (BirdStore → SQLAlchemy)    │  ← execute SQL, return rowcount + rows
    ├─────────────────────────────────────┤
    │      PostgreSQL (external)          │  ← constraints, concurrency, storage
    └─────────────────────────────────────┘

    No domain state lives in the process; the connection pool is the only
    object shared between requests.
"""

__version__ = "1.0.0"
