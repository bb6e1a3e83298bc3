import json
import time
import hmac
import hashlib
import base64
import secrets
from typing import Optional

from app.core.config import settings


def _b64u_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64u_decode(data: str) -> bytes:
    padding = "=" * ((4 - len(data) % 4) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(payload_enc: str) -> str:
    sig = hmac.new(settings.SECRET_KEY.encode("utf-8"), payload_enc.encode("utf-8"), hashlib.sha256).digest()
    return _b64u_encode(sig)


def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), 100_000)
    return f"{salt}${dk.hex()}"


def verify_password(password: str, hashed: str) -> bool:
    if "$" not in hashed:
        return False
    salt, hash_hex = hashed.split("$", 1)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), 100_000)
    return hmac.compare_digest(dk.hex(), hash_hex)


def create_access_token(login: str, expires_seconds: Optional[int] = None) -> str:
    """Issue a signed token whose subject is the user's login."""
    if expires_seconds is None:
        expires_seconds = settings.ACCESS_TOKEN_EXPIRE_SECONDS
    payload = {
        "sub": login,
        "exp": int(time.time()) + int(expires_seconds),
    }
    payload_b = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    payload_enc = _b64u_encode(payload_b)
    return f"{payload_enc}.{_sign(payload_enc)}"


def verify_access_token(token: str) -> Optional[dict]:
    """Return the token payload, or None when the token is malformed, forged or expired."""
    parts = token.split(".")
    if len(parts) != 2:
        return None
    payload_enc, sig_enc = parts
    # bytes comparison: header values may carry non-ASCII characters
    if not hmac.compare_digest(_sign(payload_enc).encode("ascii"), sig_enc.encode("utf-8")):
        return None
    try:
        payload = json.loads(_b64u_decode(payload_enc))
    except ValueError:
        return None
    if not isinstance(payload, dict) or payload.get("exp", 0) < int(time.time()):
        return None
    return payload
