"""
Authentication endpoints for API v1.

Registration and login.  Authentication is a mock: the password is
compared with the stored value and the user profile (without the
password) is returned.  No token or session is issued.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.user import AuthResponse, UserCreate, UserLogin
from marketplace_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, store: EntityStore = Depends(get_storage)) -> AuthResponse:
    """Register a new user.

    Returns 400 if the e‑mail address or the username is already
    taken.
    """
    try:
        user = await UserService.register(store, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return AuthResponse(user=user)


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin, store: EntityStore = Depends(get_storage)) -> AuthResponse:
    user = await UserService.authenticate(store, credentials.email, credentials.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return AuthResponse(user=user)
