import hmac
import logging
import re
from typing import Optional
from fastapi import HTTPException
from shopbudget.core.config import settings

logger = logging.getLogger(__name__)

BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


def get_bearer(authorization: Optional[str]) -> Optional[str]:
    match = BEARER_RE.match(authorization or "")
    return match.group(1).strip() if match else None


def require_token(authorization: Optional[str]) -> None:
    """
    Checks `Authorization: Bearer <token>` against SHOPPING_TOKEN.
    When no token is configured every request is allowed (dev mode).
    """
    expected = settings.SHOPPING_TOKEN
    if not expected:
        return

    got = get_bearer(authorization)
    if not got:
        logger.warning("Rejected request without bearer token")
        raise HTTPException(status_code=401, detail="missing bearer token")
    if not hmac.compare_digest(got.encode(), expected.encode()):
        logger.warning("Rejected request with invalid token")
        raise HTTPException(status_code=403, detail="invalid token")
