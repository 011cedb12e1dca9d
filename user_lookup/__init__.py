"""User lookup service.

A FastAPI application that serves ``GET /user/{id}`` from a single
SQLModel-backed ``user`` table.
"""

__version__ = "0.1.0"
