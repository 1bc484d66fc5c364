from passlib.context import CryptContext
import logging
import os

logger = logging.getLogger("app.config.security")

# Get environment variables
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
ENROLL_ALLOW_PROFESSOR_ROLE = os.getenv("ENROLL_ALLOW_PROFESSOR_ROLE", "true").strip().lower() in ("1", "true", "yes")

pwd_ctx = CryptContext(schemes = ["bcrypt"], deprecated = "auto", bcrypt__rounds = BCRYPT_ROUNDS)

if ENROLL_ALLOW_PROFESSOR_ROLE:
    logger.info("Self-assigned PROFESSOR enrollments are allowed")


# Helpers to manage password securely
def hash_password(plain: str) -> str:
    return pwd_ctx.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    return pwd_ctx.verify(plain, hashed)
