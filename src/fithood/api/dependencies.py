"""Request dependencies shared by the API routers."""

from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from fithood.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_user(
    x_api_token: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> UUID:
    """Check the shared API token and return the caller's user id."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing user id"
        )
    try:
        return UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid user id"
        ) from exc
