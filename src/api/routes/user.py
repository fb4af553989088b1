from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserGroupsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserGroupResponse,
    UserResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


def _strip_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("name must not be blank")
    return value


class CreateUserRequest(BaseModel):
    """
    Create user HTTP request payload

    Validates incoming request for creating a user.
    """

    name: str = Field(..., max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Unique email address")
    group_id: Optional[UUID] = Field(default=None, description="Group to place the user in")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return _strip_name(value)


class UpdateUserRequest(BaseModel):
    """
    Update user HTTP request payload

    Only the fields sent are changed. group_id=null detaches the user.
    """

    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    group_id: Optional[UUID] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return _strip_name(value)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[UserResponse])
async def list_users(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all users with the group each one currently belongs to"""
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create User

    Raises:
        - 404 Not Found: GROUP_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422 Unprocessable Entity: missing name or invalid email
    """
    use_case = CreateUserUseCase(uow)
    result = await use_case.execute(request.name, request.email, request.group_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user(user_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    user_uuid = parse_uuid(user_id, "INVALID_USER_ID", "Invalid user ID format")

    result = await GetUserUseCase(uow).execute(user_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Partial update; sending group_id moves the user out of every group it was
    in and into the given one.

    Raises:
        - 400 Bad Request: invalid user ID
        - 404 Not Found: USER_NOT_FOUND, GROUP_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    user_uuid = parse_uuid(user_id, "INVALID_USER_ID", "Invalid user ID format")

    changes = request.model_dump(exclude_unset=True)
    # name and email are not nullable
    for field in ("name", "email"):
        if field in changes and changes[field] is None:
            changes.pop(field)

    result = await UpdateUserUseCase(uow).execute(user_uuid, changes)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(user_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Delete a user and its membership edges"""
    user_uuid = parse_uuid(user_id, "INVALID_USER_ID", "Invalid user ID format")

    result = await DeleteUserUseCase(uow).execute(user_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{user_id}/groups",
    status_code=status.HTTP_200_OK,
    response_model=List[UserGroupResponse],
)
async def get_user_groups(user_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Groups containing the user

    Direct groups are flagged direct=true; their ancestors are included with
    direct=false.
    """
    user_uuid = parse_uuid(user_id, "INVALID_USER_ID", "Invalid user ID format")

    result = await GetUserGroupsUseCase(uow).execute(user_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
