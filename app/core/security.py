import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.core.config import settings

logger = logging.getLogger(__name__)

REALM = "url-shortener"

basic_auth = HTTPBasic(realm=REALM)


def require_basic_auth(credentials: HTTPBasicCredentials = Depends(basic_auth)) -> str:
    """
    FastAPI dependency guarding write endpoints.
    Usage: user: str = Depends(require_basic_auth)
    """
    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), settings.HTTP_SERVER_USER.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), settings.HTTP_SERVER_PASSWORD.encode("utf-8")
    )
    if not (user_ok and password_ok):
        logger.warning(f"Basic auth rejected for user '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
        )
    return credentials.username
