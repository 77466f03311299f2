"""
User endpoints for API v1.

Listing, creation and lookup of users.  Service errors are translated
into ``HTTPException``; the application renders those as plain-text
responses.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from ticket_api.app.core.exceptions import UserServiceError
from ticket_api.app.schemas.user import UserCreate, UserRead
from ticket_api.app.services.user_service import UserService, decode_user, parse_user_id


router = APIRouter()


def get_user_service(request: Request) -> UserService:
    """Build a ``UserService`` over the store owned by the application."""
    return UserService(request.app.state.store)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every stored user.  An empty store yields ``[]``."""
    return await service.list_users()


@router.post(
    "",
    response_model=UserRead,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": UserCreate.model_json_schema(by_alias=True)}},
        }
    },
)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user and issue its ticket.

    The expiry date and price are always computed here; values sent by
    the client for those fields are ignored.  The body is decoded as
    JSON regardless of its Content-Type header.
    """
    try:
        user = decode_user(await request.body())
        return await service.create_user(user)
    except UserServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Fetch a single user by its numeric id."""
    try:
        return await service.get_user(parse_user_id(user_id))
    except UserServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
