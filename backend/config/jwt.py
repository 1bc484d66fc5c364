from datetime import datetime, timedelta, timezone
import logging
import os
import jwt

logger = logging.getLogger("app.config.jwt")

# Get environment variables
JWT_SECRET = os.getenv("JWT_SECRET", "change-me-in-production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRATION_MINUTES = int(os.getenv("JWT_EXPIRATION_MINUTES", "1440"))

if not JWT_SECRET:
    logger.fatal("JWT_SECRET is not set in environment")
    raise RuntimeError("JWT_SECRET missing")

logger.info("JWT configuration loaded successfully")


# Sign a token whose only identity claim is the user id
def create_access_token(subject: str, expires_minutes: int = None) -> str:
    now = datetime.now(timezone.utc)
    minutes = JWT_EXPIRATION_MINUTES if expires_minutes is None else expires_minutes
    payload = {
        "sub": subject,
        "iat": now,
        "exp": now + timedelta(minutes = minutes),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm = JWT_ALGORITHM)


# Verify signature and expiry, raises jwt.PyJWTError on any failure
def decode_access_token(token: str) -> str:
    payload = jwt.decode(
        token,
        JWT_SECRET,
        algorithms = [JWT_ALGORITHM],
        options = {"require": ["exp", "sub"]},
    )
    return payload["sub"]
