"""
SQLAlchemy models.

Exposes `Base`, `now_utc`, and the ORM classes.
"""

from .base import Base, now_utc  # re-export

from .personas import Persona

__all__ = [
    "Base",
    "now_utc",
    "Persona",
]
