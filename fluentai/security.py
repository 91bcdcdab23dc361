"""
API key guard for the JSON endpoints.

Active only when API_TOKEN is configured.
"""
import logging
from typing import Optional

from fastapi import HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from fluentai import config

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def get_api_key(api_key_header: Optional[str] = Security(api_key_header)) -> Optional[str]:
    if config.API_TOKEN is None:
        return None
    if api_key_header is None:
        logger.warning("Missing X-API-Key header")
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Missing X-API-Key header")
    if api_key_header != config.API_TOKEN:
        logger.warning("Invalid API key")
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Invalid API key")
    return api_key_header
