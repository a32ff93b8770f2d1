"""
API-key guard for write endpoints.

When an API key is configured, requests must carry it verbatim in the
Authorization header. With no key configured the guard lets everything
through. Caller identity never reaches the domain layer.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from app.api.v1.dependencies import get_api_key

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="Authorization", auto_error=False)


def require_api_key(
    provided: Optional[str] = Security(api_key_header),
    expected: Optional[str] = Depends(get_api_key),
) -> None:
    """Reject the request with 401 unless it carries the configured API key."""
    if expected is None:
        return

    if provided is None or not secrets.compare_digest(provided.encode(), expected.encode()):
        logger.warning("Rejected request with missing or invalid API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
