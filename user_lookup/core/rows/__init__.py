"""Persistence models."""

from .user_row import UserRow

__all__ = ["UserRow"]
