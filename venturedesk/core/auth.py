from __future__ import annotations

import logging
import secrets
from datetime import datetime, timezone
from functools import wraps
from typing import Optional

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from venturedesk.core.config import settings
from venturedesk.core.database import get_db
from venturedesk.models.misc import ApiKey

logger = logging.getLogger(__name__)

API_KEY_PREFIX = "vdk_"


def generate_api_key() -> str:
    return f"{API_KEY_PREFIX}{secrets.token_hex(32)}"


def create_api_key(session: Session, name: str, permissions: list[str]) -> ApiKey:
    api_key = ApiKey(name=name, key=generate_api_key(), permissions=permissions)
    session.add(api_key)
    session.commit()
    session.refresh(api_key)
    return api_key


def validate_api_key(session: Session, supplied: Optional[str], permission: Optional[str]) -> Optional[str]:
    """Return an error message, or None when the key grants the permission."""
    if not supplied:
        return "Missing API key"
    api_key = session.query(ApiKey).filter(ApiKey.key == supplied).first()
    if api_key is None:
        return "Invalid API key"
    if not api_key.allows(permission):
        return "Insufficient permissions"

    try:
        api_key.last_used_at = datetime.now(timezone.utc)
        session.commit()
    except SQLAlchemyError as exc:
        # Usage stamp only; never blocks the request.
        session.rollback()
        logger.warning("could not stamp last_used_at for key %s: %s", api_key.id, exc)
    return None


def require_api_key(permission: Optional[str] = None):
    """Route decorator: 401 unless the request header carries a key with permission."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            supplied = request.headers.get(settings.API_KEY_HEADER)
            with get_db() as db:
                error = validate_api_key(db, supplied, permission)
            if error:
                return jsonify({"detail": error}), 401
            return view(*args, **kwargs)

        return wrapper

    return decorator
