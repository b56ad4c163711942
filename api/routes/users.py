"""User endpoints."""

from fastapi import APIRouter, status

from api.dependencies import PrincipalDep, SampleStoreDep
from api.exceptions import ResourceNotFoundError
from api.models import CreateUserRequest, UserResponse

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: CreateUserRequest, store: SampleStoreDep, principal: PrincipalDep):
    """Create a user.

    Args:
        request: The new user's details.
        store: The SampleStore instance (injected by FastAPI).
        principal: The authenticated caller (injected by FastAPI).

    Returns:
        The stored user, including its generated id.
    """
    return store.create_user(request)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, store: SampleStoreDep, principal: PrincipalDep):
    """Get a user by id.

    Raises:
        ResourceNotFoundError: If no user has that id.
    """
    user = store.get_user(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return user
