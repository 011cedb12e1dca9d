"""Data-access layer."""

from .user_repo import UserRepository

__all__ = ["UserRepository"]
