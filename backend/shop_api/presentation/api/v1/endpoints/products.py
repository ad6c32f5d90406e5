"""Product CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from shop_api.application.schemas import ProductCreate, ProductResponse, ProductUpdate
from shop_api.application.services import ProductsFacade
from shop_api.domain.exceptions import EntityNotFoundError
from shop_api.infrastructure.dependencies import get_products_facade

router = APIRouter(prefix="/products", tags=["Products"])


def _server_error(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Cannot {action} product",
    )


@router.get("", response_model=list[ProductResponse])
async def list_products(
    limit: int = Query(10, ge=1, le=100, description="Data limit"),
    offset: int = Query(0, ge=0, description="Data offset"),
    facade: ProductsFacade = Depends(get_products_facade),
) -> list[ProductResponse]:
    """Retrieve a paginated list of products ordered by ID."""
    try:
        return await facade.find_all(limit=limit, offset=offset)
    except SQLAlchemyError as e:
        raise _server_error("list") from e


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    facade: ProductsFacade = Depends(get_products_facade),
) -> ProductResponse:
    """Retrieve a single product by ID."""
    try:
        return await facade.find_one(product_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    except SQLAlchemyError as e:
        raise _server_error("fetch") from e


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    facade: ProductsFacade = Depends(get_products_facade),
) -> ProductResponse:
    """Create a new product."""
    try:
        product = await facade.create(data)
    except SQLAlchemyError as e:
        raise _server_error("create") from e
    return ProductResponse.model_validate(product, from_attributes=True)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    data: ProductUpdate,
    facade: ProductsFacade = Depends(get_products_facade),
) -> ProductResponse:
    """Partially update a product — only fields present in the body are applied."""
    try:
        product = await facade.update(product_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    except SQLAlchemyError as e:
        raise _server_error("update") from e
    return ProductResponse.model_validate(product, from_attributes=True)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    facade: ProductsFacade = Depends(get_products_facade),
) -> None:
    """Delete a product by ID."""
    try:
        await facade.delete(product_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    except SQLAlchemyError as e:
        raise _server_error("delete") from e
