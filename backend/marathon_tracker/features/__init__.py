"""
Feature modules for Marathon Tracker.

Each feature is a self-contained module with:
- models.py - dataclasses (SQLAlchemy models for markers)
- schemas.py - Pydantic schemas
- service.py / state.py - Business logic
- repository.py - Data access (markers only)
"""
