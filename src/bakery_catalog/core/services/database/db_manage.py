"""Schema management for the catalog tables."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from bakery_catalog.core.services.database.db_session import build_engine
from bakery_catalog.runtime.context import get_config


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else build_engine(get_config())

    def create_all(self) -> None:
        """Create all database tables."""
        from bakery_catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        from bakery_catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")
