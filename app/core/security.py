from __future__ import annotations

import secrets

from fastapi import HTTPException, status

from app.core.config import settings

_AUTH_ERROR_MESSAGE = "Please provide a valid API key to process CV batches."


def check_api_key(x_api_key: str | None) -> None:
    if not settings.api_key:
        return
    if not x_api_key or not secrets.compare_digest(x_api_key, settings.api_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=_AUTH_ERROR_MESSAGE,
        )
