"""
Security helpers for JWT authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed
arbitrary claims and an expiration timestamp (``exp``).  The subject
claim (``sub``) is the id of a stored user.  A secret key from the
application settings is used to sign and verify the token.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings, settings
from ..schemas.user import UserRead
from ..services.repository import Repository


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[int] = None,
    app_settings: Optional[Settings] = None,
) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field representing the
    expiration time as a UNIX timestamp.  Clients must include the
    token in the ``Authorization`` header as ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "42"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``access_token_expire_minutes * 60``.
    app_settings : Optional[Settings]
        Settings supplying the signing key and default lifetime.
        Defaults to the module‑level ``settings``.

    Returns
    -------
    str
        A signed JWT token.
    """
    cfg = app_settings or settings
    to_encode = data.copy()
    exp_seconds = expires_delta or cfg.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, cfg.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret_key: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Verifies the HMAC signature and checks the ``exp`` field.  Returns
    the payload dictionary if the token is valid, otherwise ``None``.
    """
    secret = secret_key or settings.secret_key
    try:
        parts = token.split('.')
        if len(parts) != 3:
            return None
        header_b64, payload_b64, signature_b64 = parts
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, secret)
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
        return data
    except (ValueError, TypeError, UnicodeDecodeError):
        # Malformed base64, JSON or claim types.
        return None


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was built with."""
    return request.app.state.settings


def get_repository(request: Request) -> Repository:
    """Dependency returning the application's repository."""
    return request.app.state.repository


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    app_settings: Settings = Depends(get_settings),
    repository: Repository = Depends(get_repository),
) -> UserRead:
    """Dependency that retrieves the current authenticated user.

    Raises HTTP 401 if the request carries no bearer token, if the
    token is invalid or expired, or if its subject is not a stored
    user.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials, app_settings.secret_key)
    if not payload or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = repository.get_user(str(payload["sub"]))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
