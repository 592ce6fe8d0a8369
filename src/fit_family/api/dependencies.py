"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from fit_family.containers import AppContainer
from fit_family.domain.models import UserRecord
from fit_family.errors import InvalidTokenError

_bearer = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    container: AppContainer = Depends(get_container),
) -> UserRecord:
    """Resolve the bearer token on the request to the stored user."""
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError("Missing authentication token")
    return container.auth_service.authenticate(credentials.credentials)
