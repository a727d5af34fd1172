"""Shared request dependencies for admin routes."""

from typing import Annotated

from fastapi import Cookie, Depends, HTTPException, Request, status

from estate.domain.service import JWTService
from estate.domain.value import ListQuery

LIST_PARAMS = frozenset({"search", "sort", "direction", "page", "per_page"})


async def admin_user_id(
    request: Request, auth_token: str | None = Cookie(default=None)
) -> str:
    """ID of the signed-in admin from the ``auth_token`` cookie.

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    container = request.state.dishka_container
    jwt_service = await container.get(JWTService)
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


AdminId = Annotated[str, Depends(admin_user_id)]


async def current_user_id(
    request: Request, auth_token: str | None = Cookie(default=None)
) -> str | None:
    """ID of the signed-in user, None for guests."""
    container = request.state.dishka_container
    jwt_service = await container.get(JWTService)
    return jwt_service.get_user_id_from_token(auth_token)


CurrentUserId = Annotated[str | None, Depends(current_user_id)]


def list_query(
    request: Request,
    search: str | None = None,
    sort: str | None = None,
    direction: str | None = None,
    page: int = 1,
    per_page: int | None = None,
) -> ListQuery:
    """Build a ListQuery from query parameters.

    Every other query parameter is passed through as a filter; the
    repository ignores the ones it does not know.
    """
    filters = {
        key: value
        for key, value in request.query_params.items()
        if key not in LIST_PARAMS
    }
    return ListQuery(
        search=search,
        filters=filters,
        sort=sort,
        direction=direction if direction in ("asc", "desc") else None,
        page=max(page, 1),
        per_page=min(per_page, 100) if per_page and per_page > 0 else None,
    )


Listing = Annotated[ListQuery, Depends(list_query)]
