import hmac
from typing import Optional

from fastapi import Header

from app.config import settings
from app.errors import Unauthorized

BEARER_PREFIX = "Bearer "


def verify_api_key(authorization: Optional[str], secret: str) -> bool:
    """
    Check an Authorization header of the form "Bearer <token>" against secret.
    Missing or malformed headers, an empty token and an unset secret all fail.
    """
    if not authorization or not secret:
        return False
    if not authorization.startswith(BEARER_PREFIX):
        return False
    token = authorization[len(BEARER_PREFIX):]
    if not token:
        return False
    return hmac.compare_digest(token.encode("utf-8"), secret.encode("utf-8"))


def require_api_key(authorization: Optional[str] = Header(None)):
    if not verify_api_key(authorization, settings.API_SECRET_KEY):
        raise Unauthorized()
