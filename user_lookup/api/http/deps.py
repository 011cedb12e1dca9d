"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from user_lookup.api.http.app_data import ApplicationDependencies
from user_lookup.core.repositories.user_repo import UserRepository
from user_lookup.runtime.config.config_data import ConfigData


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session, closed when the request ends."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.get_session() as session:
        yield session


def get_user_repository(session: Session = Depends(get_db_session)) -> UserRepository:
    """Get the user repository bound to the request's session."""
    return UserRepository(session)


def get_app_config(request: Request) -> ConfigData:
    """Get the configuration the application was built with."""
    return request.app.state.config
