"""Product catalog API router."""

from fastapi import APIRouter, Depends, Query

from bakery_catalog.api.http.deps import get_product_catalog_service
from bakery_catalog.api.http.schemas import ErrorResponse, ProductResponse
from bakery_catalog.core.services import ProductCatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
def list_products(
    active_only: bool = Query(default=False, alias="activeOnly"),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> list[ProductResponse]:
    """List catalog products, optionally only the active ones."""
    products = service.get_all_active() if active_only else service.get_all()
    return [ProductResponse.from_domain(product) for product in products]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_product(
    product_id: int,
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> ProductResponse:
    """Get a product by ID."""
    return ProductResponse.from_domain(service.get_by_id(product_id))
