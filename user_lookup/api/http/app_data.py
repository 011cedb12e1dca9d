from dataclasses import dataclass

from user_lookup.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
