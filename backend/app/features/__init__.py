"""
Feature modules for GPX Stats.

Each feature is a self-contained module with:
- models.py - Dataclasses for the in-memory domain
- schemas.py - Pydantic schemas
- service.py - Business logic
- parser.py - Input conversion (optional)
"""
