from datetime import datetime, timedelta, timezone
from jose import jwt
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("JWT_HANDLER")

ACCESS_TOKEN_EXPIRE_MINUTES = 60

def create_access_token(data: dict, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES):
    """
    Creates JWT token with expiry, signed the same way the identity provider signs them.
    Used by the dev token script and the tests.
    """
    logger.info("Access token creation requested")
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire, "iat": now})
    if settings.JWT_AUDIENCE and "aud" not in to_encode:
        to_encode["aud"] = settings.JWT_AUDIENCE
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    logger.info(f"Access token created successfully with expiry {expire}")
    return encoded_jwt

def decode_access_token(token: str) -> dict:
    """
    Decode JWT token and return payload.
    Raises JWTError if invalid or expired.
    """
    logger.debug("Decoding access token")
    options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        options=options
    )

