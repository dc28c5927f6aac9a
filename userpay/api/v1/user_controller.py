# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Query, Response, status

# Local application imports
from ...application.dto.user_dto import (
    CreateUserRequest,
    UpdateUserRequest,
    UserBatchRequest,
    UserListResponse,
    UserResponse,
)
from ...application.services.user_service import UserService
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: CreateUserRequest) -> UserResponse:
    """
    Create a new user

    Args:
        request: User creation request (email, name, password)

    Returns:
        UserResponse with the created user (no password)
    """
    container = get_container()
    user_service = container.get(UserService)

    result = await user_service.create_user(request)
    return result.unwrap()


@router.get("", response_model=UserListResponse)
async def list_users(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> UserListResponse:
    """List users, newest first"""
    container = get_container()
    user_service = container.get(UserService)

    result = await user_service.get_users(limit=limit, offset=offset)
    return result.unwrap()


@router.post("/batch", response_model=List[UserResponse])
async def get_users_batch(request: UserBatchRequest) -> List[UserResponse]:
    """Fetch several users by ID; unknown IDs are omitted"""
    container = get_container()
    user_service = container.get(UserService)

    result = await user_service.get_users_by_ids(request.ids)
    return result.unwrap()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    container = get_container()
    user_service = container.get(UserService)

    result = await user_service.get_user_by_id(user_id)
    return result.unwrap()


@router.head("/{user_id}")
async def user_exists(user_id: str) -> Response:
    """200 if the user exists, 404 otherwise (no body)"""
    container = get_container()
    user_service = container.get(UserService)

    result = await user_service.get_user_by_id(user_id)
    result.unwrap()
    return Response(status_code=status.HTTP_200_OK)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, request: UpdateUserRequest) -> UserResponse:
    """
    Partially update a user

    Only fields present in the request are changed.
    """
    container = get_container()
    user_service = container.get(UserService)

    result = await user_service.update_user(user_id, request)
    return result.unwrap()


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(user_id: str) -> Response:
    container = get_container()
    user_service = container.get(UserService)

    result = await user_service.delete_user(user_id)
    result.unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
