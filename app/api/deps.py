"""Shared dependencies: settings lookup and the admin token gate."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings
from app.core.errors import AuthenticationError, AuthorizationError
from app.core.security import tokens_match

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


def require_admin_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> None:
    """
    Dependency: require ``Authorization: Bearer <ADMIN_TOKEN>``.

    Missing header, another scheme or an empty token raise 401; a wrong token
    raises 403. The token is a single static shared secret; user roles are
    not consulted.
    """
    if credentials is None or not credentials.credentials.strip():
        raise AuthenticationError()
    token = credentials.credentials.strip()
    if not tokens_match(token, settings.ADMIN_TOKEN.get_secret_value()):
        raise AuthorizationError()
