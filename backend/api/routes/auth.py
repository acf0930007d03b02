"""
Authentication API routes.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from api.dependencies import AuthServiceDep, CurrentAdmin
from api.middleware.rate_limit import limiter
from api.schemas.auth import (
    AdminUserResponse,
    LoginRequest,
    LoginResponse,
    MeResponse,
    MessageResponse,
)
from infrastructure.config.settings import Settings, settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _get_cookie_kwargs(settings_obj: Settings) -> dict:
    """HttpOnly session cookie; Secure whenever the deployment is served over HTTPS."""
    return dict(
        httponly=True,
        secure=settings_obj.session_cookie_secure,
        samesite="lax",
        path="/",
    )


def _set_session_cookie(response: JSONResponse, token: str, settings_obj: Settings) -> None:
    response.set_cookie(
        settings_obj.cookie_name,
        token,
        max_age=settings_obj.jwt_expire_hours * 3600,
        **_get_cookie_kwargs(settings_obj),
    )


def _clear_session_cookie(response: JSONResponse, settings_obj: Settings) -> None:
    response.delete_cookie(settings_obj.cookie_name, **_get_cookie_kwargs(settings_obj))


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    login_data: LoginRequest,
    auth_service: AuthServiceDep,
) -> JSONResponse:
    """
    Authenticate an admin and start a session.

    The signed token is delivered as an HttpOnly cookie; the body only
    carries the admin profile.
    """
    result = await auth_service.login(login_data.email, login_data.password)

    body = LoginResponse(
        message="Login successful",
        user=AdminUserResponse.model_validate(result.user),
    )
    response = JSONResponse(content=jsonable_encoder(body))
    _set_session_cookie(response, result.token, settings)
    return response


@router.post("/logout", response_model=MessageResponse)
async def logout() -> JSONResponse:
    """End the session by expiring the cookie."""
    response = JSONResponse(content={"message": "Logout successful"})
    _clear_session_cookie(response, settings)
    return response


@router.get("/me", response_model=MeResponse, status_code=status.HTTP_200_OK)
async def get_me(current_admin: CurrentAdmin) -> MeResponse:
    """Get the authenticated admin profile."""
    return MeResponse(user=AdminUserResponse.model_validate(current_admin))
