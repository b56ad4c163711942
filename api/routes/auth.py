"""Authentication endpoints.

Issues opaque bearer tokens that the user and order endpoints require.
"""

from fastapi import APIRouter

from api.dependencies import SampleStoreDep
from api.exceptions import UnauthorizedError
from api.models import LoginRequest, LoginResponse

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, store: SampleStoreDep):
    """Exchange any non-blank credentials for a bearer token.

    Args:
        request: Username and password.
        store: The SampleStore instance (injected by FastAPI).

    Returns:
        The issued token and the principal's id.

    Raises:
        UnauthorizedError: If the username or password is blank.
    """
    if not request.username.strip() or not request.password.strip():
        raise UnauthorizedError("Username and password are required.")
    return store.issue_token()
