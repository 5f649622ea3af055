"""FastAPI dependencies for admin authentication.

Provides dependency injection functions for FastAPI endpoints to check the
admin session token.
"""

from typing import Annotated

from fastapi import Header, HTTPException

from restaurant_menu_service.auth.admin_session import AdminSessionStore


def get_session_token_from_header(
    x_admin_session: Annotated[str | None, Header()] = None,
    sessions: AdminSessionStore | None = None,
) -> str:
    """FastAPI dependency to extract and check the X-Admin-Session header.

    Args:
        x_admin_session: Session token from X-Admin-Session header (injected by FastAPI)
        sessions: AdminSessionStore instance (injected as dependency)

    Returns:
        str: The validated session token

    Raises:
        HTTPException: 401 if the token is missing or not an open session
    """
    if not x_admin_session:
        raise HTTPException(status_code=401, detail="Missing admin session")

    # Session store will be None in tests where it's mocked
    if sessions and not sessions.is_authenticated(x_admin_session):
        raise HTTPException(status_code=401, detail="Invalid admin session")

    return x_admin_session
