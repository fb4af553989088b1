from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field, field_validator

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.groups import (
    CreateGroupUseCase,
    DeleteGroupUseCase,
    GetGroupUseCase,
    GroupResponse,
    ListGroupsUseCase,
    UpdateGroupUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/groups", tags=["Group"])


def _strip_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("name must not be blank")
    return value


class CreateGroupRequest(BaseModel):
    """
    Create group HTTP request payload

    Without parent_id the group becomes a root.
    """

    name: str = Field(..., max_length=255, description="Group name")
    parent_id: Optional[UUID] = Field(default=None, description="Parent group ID")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return _strip_name(value)


class UpdateGroupRequest(BaseModel):
    """
    Update group HTTP request payload

    Only the fields sent are changed. parent_id=null makes the group a root.
    """

    name: Optional[str] = Field(default=None, max_length=255)
    parent_id: Optional[UUID] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return _strip_name(value)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[GroupResponse])
async def list_groups(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all groups as a flat list"""
    result = await ListGroupsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=GroupResponse)
async def create_group(
    request: CreateGroupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Group

    The group and the membership edge from its parent are written together.

    Raises:
        - 404 Not Found: PARENT_NOT_FOUND
        - 422 Unprocessable Entity: missing or blank name
    """
    result = await CreateGroupUseCase(uow).execute(request.name, request.parent_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{group_id}", status_code=status.HTTP_200_OK, response_model=GroupResponse)
async def get_group(group_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await GetGroupUseCase(uow).execute(group_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{group_id}", status_code=status.HTTP_200_OK, response_model=GroupResponse)
async def update_group(
    group_id: str,
    request: UpdateGroupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Group

    Raises:
        - 400 Bad Request: invalid group ID
        - 404 Not Found: GROUP_NOT_FOUND, PARENT_NOT_FOUND
        - 409 Conflict: CYCLE_REJECTED
    """
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    changes = request.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"] is None:
        changes.pop("name")

    result = await UpdateGroupUseCase(uow).execute(group_uuid, changes)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_group(group_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Group

    Raises:
        - 404 Not Found: GROUP_NOT_FOUND
        - 409 Conflict: GROUP_HAS_CHILDREN
    """
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await DeleteGroupUseCase(uow).execute(group_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
