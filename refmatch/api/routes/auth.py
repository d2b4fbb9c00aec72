"""Auth endpoints - register, login, current user, logout."""

from fastapi import APIRouter, Depends, Response

from refmatch.api.deps import bearer_token, get_current_user, get_session_service
from refmatch.db.store import Store, get_store
from refmatch.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from refmatch.schemas.profile import PublicProfile
from refmatch.services.auth_service import auth_service
from refmatch.services.session_service import SessionService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    data: RegisterRequest,
    store: Store = Depends(get_store),
    sessions: SessionService = Depends(get_session_service),
):
    """Create an account and return the public profile with a token."""
    profile = await auth_service.register(
        store,
        email=data.email,
        password=data.password,
        name=data.name or "",
        relationship_status=data.relationship_status or "single",
    )
    token = await sessions.issue(profile.id)
    return AuthResponse(user=PublicProfile.model_validate(profile), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    store: Store = Depends(get_store),
    sessions: SessionService = Depends(get_session_service),
):
    profile = await auth_service.login(store, data.email, data.password)
    token = await sessions.issue(profile.id)
    return AuthResponse(user=PublicProfile.model_validate(profile), token=token)


@router.get("/me", response_model=PublicProfile)
async def me(profile=Depends(get_current_user)):
    """Resolve the bearer token to the caller's profile."""
    return PublicProfile.model_validate(profile)


@router.post("/logout", status_code=204)
async def logout(
    token: str = Depends(bearer_token),
    sessions: SessionService = Depends(get_session_service),
):
    await sessions.revoke(token)
    return Response(status_code=204)
