from dataclasses import dataclass

from bakery_catalog.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
