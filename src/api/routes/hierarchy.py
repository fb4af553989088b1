from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.groups import GroupResponse
from src.app.use_cases.hierarchy import (
    AllMembersResponse,
    CheckMembershipUseCase,
    GetAllMembersUseCase,
    GetHierarchyUseCase,
    GetParentUseCase,
    MembershipCheckResponse,
    SetParentUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import MemberType
from src.domain.hierarchy import HierarchyNode

router = APIRouter(prefix="/groups", tags=["Group Hierarchy"])


class MembershipCheckRequest(BaseModel):
    """
    Membership check HTTP request payload
    """

    member_id: UUID = Field(..., description="User or group ID")
    member_type: MemberType = Field(..., description="user or group")


class SetParentRequest(BaseModel):
    """
    Set parent HTTP request payload

    parent_id is required; null turns the group into a root.
    """

    parent_id: Optional[UUID] = Field(..., description="New parent group ID or null")


@router.get(
    "/hierarchy",
    status_code=status.HTTP_200_OK,
    response_model=List[HierarchyNode],
)
async def get_hierarchy(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Complete Group Hierarchy

    Returns the root groups, each with nested children, attached users and
    user_count / group_count / total_count.
    """
    result = await GetHierarchyUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value.roots


@router.get(
    "/{group_id}/parent",
    status_code=status.HTTP_200_OK,
    response_model=Optional[GroupResponse],
)
async def get_parent(group_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Parent group, or null for a root group"""
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await GetParentUseCase(uow).execute(group_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{group_id}/parent",
    status_code=status.HTTP_200_OK,
    response_model=GroupResponse,
)
async def set_parent(
    group_id: str,
    request: SetParentRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Set Parent Group

    Raises:
        - 400 Bad Request: invalid group ID
        - 404 Not Found: GROUP_NOT_FOUND, PARENT_NOT_FOUND
        - 409 Conflict: CYCLE_REJECTED
    """
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await SetParentUseCase(uow).execute(group_uuid, request.parent_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{group_id}/check-membership",
    status_code=status.HTTP_200_OK,
    response_model=MembershipCheckResponse,
)
async def check_membership(
    group_id: str,
    request: MembershipCheckRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Check Membership

    is_member is true when the member is attached to the group or to any
    group below it.

    Raises:
        - 404 Not Found: GROUP_NOT_FOUND
    """
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await CheckMembershipUseCase(uow).execute(
        group_uuid, request.member_id, request.member_type
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{group_id}/all-members",
    status_code=status.HTTP_200_OK,
    response_model=AllMembersResponse,
)
async def get_all_members(group_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Every user and group found anywhere in the group's subtree"""
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await GetAllMembersUseCase(uow).execute(group_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
