import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from app.api import deps
from app.core import security
from app.db.mock_db import MemoryStore
from app.models.user import AuthResponse, Token, UserCreate, UserLogin, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _authenticate(store: MemoryStore, username: str, password: str) -> Dict[str, Any]:
    user = store.get_user_by_username(username)
    if not user or not security.verify_password(password, user["password"]):
        logger.warning("Failed login for username '%s'", username)
        raise HTTPException(status_code=400, detail="Incorrect username or password")
    return user


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """Create a regular (non-admin) account and log it in."""
    if store.get_user_by_username(user_in.username):
        raise HTTPException(status_code=400, detail="Username already exists")

    user = store.create_user({
        "username": user_in.username,
        "password": security.get_password_hash(user_in.password),
    })
    logger.info("Registered user %s", user["id"])
    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=Token(
            access_token=security.create_access_token(user["id"]),
            token_type="bearer",
        ),
    )


@router.post("/login", response_model=Token)
async def login_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """OAuth2 compatible token login, get an access token for future requests."""
    user = _authenticate(store, form_data.username, form_data.password)
    return {
        "access_token": security.create_access_token(user["id"]),
        "token_type": "bearer",
    }


@router.post("/login/json", response_model=Token)
async def login_json(
    user_in: UserLogin,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """JSON based login for the admin dashboard."""
    user = _authenticate(store, user_in.username, user_in.password)
    return {
        "access_token": security.create_access_token(user["id"]),
        "token_type": "bearer",
    }


@router.get("/user", response_model=UserResponse)
async def read_current_user(
    current_user: Dict[str, Any] = Depends(deps.get_current_user),
) -> Any:
    """Get current user."""
    return current_user
