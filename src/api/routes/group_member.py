from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.ids import parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.memberships import (
    AddGroupMemberUseCase,
    ListGroupMembersUseCase,
    MembershipResponse,
    RemoveGroupMemberUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import MemberType

router = APIRouter(prefix="/groups", tags=["Group Members"])


class AddMemberRequest(BaseModel):
    """
    Add member HTTP request payload
    """

    member_id: UUID = Field(..., description="User or group ID")
    member_type: MemberType = Field(..., description="user or group")


@router.get(
    "/{group_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=List[MembershipResponse],
)
async def list_members(group_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Direct members of the group"""
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await ListGroupMembersUseCase(uow).execute(group_uuid)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{group_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=MembershipResponse,
)
async def add_member(
    group_id: str,
    request: AddMemberRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Member to Group

    Adding a group member moves that group under this one.

    Raises:
        - 400 Bad Request: SELF_MEMBERSHIP
        - 404 Not Found: GROUP_NOT_FOUND, MEMBER_NOT_FOUND
        - 409 Conflict: MEMBERSHIP_ALREADY_EXISTS, CYCLE_REJECTED
    """
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")

    result = await AddGroupMemberUseCase(uow).execute(
        group_uuid, request.member_id, request.member_type
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{group_id}/members/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_member(
    group_id: str,
    member_id: str,
    member_type: MemberType = Query(default=MemberType.user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member from Group

    Raises:
        - 404 Not Found: GROUP_NOT_FOUND, MEMBERSHIP_NOT_FOUND
    """
    group_uuid = parse_uuid(group_id, "INVALID_GROUP_ID", "Invalid group ID format")
    member_uuid = parse_uuid(member_id, "INVALID_MEMBER_ID", "Invalid member ID format")

    result = await RemoveGroupMemberUseCase(uow).execute(
        group_uuid, member_uuid, member_type
    )
    if result.is_err():
        raise_for_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
