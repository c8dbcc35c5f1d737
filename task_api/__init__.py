"""Task API: create-only task service (FastAPI + async SQLAlchemy)."""

__version__ = "1.0.0"
