"""User CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from shop_api.application.schemas import UserCreate, UserResponse, UserUpdate
from shop_api.application.services import UsersFacade
from shop_api.domain.exceptions import (
    EntityNotFoundError,
    InvalidStateError,
)
from shop_api.infrastructure.dependencies import get_users_facade

router = APIRouter(prefix="/users", tags=["Users"])


def _server_error(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Cannot {action} user",
    )


@router.get("", response_model=list[UserResponse])
async def list_users(
    limit: int = Query(10, ge=1, le=100, description="Data limit"),
    offset: int = Query(0, ge=0, description="Data offset"),
    facade: UsersFacade = Depends(get_users_facade),
) -> list[UserResponse]:
    """Retrieve a paginated list of users ordered by ID."""
    try:
        return await facade.find_all(limit=limit, offset=offset)
    except SQLAlchemyError as e:
        raise _server_error("list") from e


@router.get("/email", response_model=UserResponse)
async def get_user_by_email(
    email: str = Query(..., min_length=1, description="E-mail address of the user"),
    facade: UsersFacade = Depends(get_users_facade),
) -> UserResponse:
    """Retrieve a single user by e-mail address."""
    try:
        return await facade.find_one_by({"email": email})
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except SQLAlchemyError as e:
        raise _server_error("fetch") from e


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    facade: UsersFacade = Depends(get_users_facade),
) -> UserResponse:
    """Retrieve a single user by ID."""
    try:
        return await facade.find_one(user_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except SQLAlchemyError as e:
        raise _server_error("fetch") from e


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    facade: UsersFacade = Depends(get_users_facade),
) -> UserResponse:
    """Register a new user. The password is stored hashed."""
    try:
        user = await facade.create(data)
    except InvalidStateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError as e:
        raise _server_error("create") from e
    return UserResponse.model_validate(user, from_attributes=True)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: UserUpdate,
    facade: UsersFacade = Depends(get_users_facade),
) -> UserResponse:
    """Partially update a user — only fields present in the body are applied."""
    try:
        user = await facade.update(user_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except SQLAlchemyError as e:
        raise _server_error("update") from e
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    facade: UsersFacade = Depends(get_users_facade),
) -> None:
    """Delete a user by ID."""
    try:
        await facade.delete(user_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except SQLAlchemyError as e:
        raise _server_error("delete") from e
