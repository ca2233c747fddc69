"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from bakery_catalog.api.http.app_data import ApplicationDependencies
from bakery_catalog.core.services import ProductCatalogService
from bakery_catalog.entities.service.product import (
    ProductRepository,
    SqlProductRepository,
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies built during application startup."""
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield a request-scoped database session.

    Request errors roll the session back and are left for the exception
    handlers to log.
    """
    session = app_deps.database_service.get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_product_repository(
    session: Session = Depends(get_db_session),
) -> ProductRepository:
    return SqlProductRepository(session)


def get_product_catalog_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductCatalogService:
    return ProductCatalogService(repository)
