from datetime import UTC, datetime, timedelta
from typing import Optional, Tuple
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def issue_token(
    login_id: str,
    jti: UUID,
    device_type: str = "default",
    timeout_seconds: Optional[int] = None,
) -> Tuple[str, datetime]:
    """
    Issue a signed bearer token

    Args:
        login_id: Principal login id (username)
        jti: Unique token id, also the id of the server-side token record
        device_type: Device the login came from (PC, APP, H5, ...)
        timeout_seconds: Lifetime, defaults to TOKEN_TIMEOUT_SECONDS

    Returns:
        (JWT token string (HS256), naive UTC expiry)
    """
    if timeout_seconds is None:
        timeout_seconds = ApplicationConfig.TOKEN_TIMEOUT_SECONDS
    now = datetime.now(UTC)
    expires_at = now + timedelta(seconds=timeout_seconds)
    payload = {
        "login_id": login_id,
        "device": device_type,
        "jti": str(jti),
        "exp": expires_at,
        "iat": now,
    }
    token = jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")
    return token, expires_at.replace(tzinfo=None)


def verify_jwt(token: str, verify_exp: bool = True) -> Optional[dict]:
    """
    Verify and decode a bearer token

    Args:
        token: JWT token string
        verify_exp: Reject expired tokens; disable when the caller checks
            expiry against the server-side record instead

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_exp": verify_exp},
        )
        return payload
    except JWTError:
        return None
