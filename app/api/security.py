import logging
import secrets

from fastapi import HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.config import Settings

logger = logging.getLogger(__name__)

# auto_error=False: only some versions of an operation require a caller.
basic_auth = HTTPBasic(auto_error=False)


def ensure_authenticated(credentials: HTTPBasicCredentials | None, settings: Settings) -> str:
    """
    Checks Basic credentials against the configured pair.

    Returns:
        The authenticated username.

    Raises:
        HTTPException 401 when credentials are missing, wrong, or not configured.
    """
    expected_user = settings.basic_auth_username
    expected_password = settings.basic_auth_password

    if credentials is not None and expected_user and expected_password:
        user_ok = secrets.compare_digest(credentials.username.encode(), expected_user.encode())
        password_ok = secrets.compare_digest(
            credentials.password.encode(), expected_password.encode()
        )
        if user_ok and password_ok:
            return credentials.username

    logger.info("Rejected unauthenticated caller")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Valid credentials are required for this API version",
        headers={"WWW-Authenticate": "Basic"},
    )
