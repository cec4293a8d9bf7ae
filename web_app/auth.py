"""HTTP basic authentication for the admin surface."""

import secrets
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from shortener.errors import UnauthorizedError

security = HTTPBasic(auto_error=False)


def credentials_match(
    credentials: HTTPBasicCredentials,
    username: str,
    password: Optional[str],
) -> bool:
    """Compare supplied credentials with the configured pair in constant time.

    Always False when no password is configured.
    """
    if not password:
        return False
    # Evaluate both comparisons so timing does not reveal which field failed
    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), username.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), password.encode("utf-8")
    )
    return username_ok and password_ok


async def require_admin(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
) -> str:
    """FastAPI dependency guarding admin routes.

    Returns:
        The authenticated username

    Raises:
        UnauthorizedError: If credentials are missing or wrong
    """
    config = request.app.state.config

    if credentials is None:
        raise UnauthorizedError("Admin credentials required")

    if not credentials_match(credentials, config.admin_username, config.admin_password):
        request.app.state.logger.warning(
            f"Rejected admin credentials for user '{credentials.username}' on {request.url.path}"
        )
        raise UnauthorizedError()

    return credentials.username
