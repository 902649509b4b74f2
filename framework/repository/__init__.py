"""
Repository pattern: data access abstraction, decouples the service layer from the database session.
"""

from .base import BaseRepository, IRepository

__all__ = ["BaseRepository", "IRepository"]
