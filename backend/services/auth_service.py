import logging
from uuid import UUID
from typing import Optional, Tuple
import jwt
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from errors.user_errors import DuplicateUserError, InvalidCredentialsError, UserNotFoundError
from services.user_service import get_user_by_email
from config.security import hash_password, verify_password
from config.jwt import create_access_token, decode_access_token
from schemas.user_schema import UserCreate
from models.user_model import User

logger = logging.getLogger("app.services.auth")


# Resolve a bearer token to a user, any failure means anonymous
def resolve_identity(db: Session, token: Optional[str]) -> Optional[User]:
    if not token:
        return None

    try:
        user_id = UUID(decode_access_token(token))
    except (jwt.PyJWTError, ValueError, TypeError, AttributeError) as e:
        logger.debug("Rejected token: %s", type(e).__name__)
        return None

    user = db.get(User, user_id)
    if not user:
        logger.debug("Token subject no longer exists id=%s", user_id)
        return None
    return user


def issue_token(user: User) -> str:
    return create_access_token(subject = str(user.id))


# Login user (POST)
def login(db: Session, email: str, password: str) -> Tuple[str, User]:
    logger.info("Authenticating user email=%s", email)
    # Same error for unknown email and wrong password
    try:
        user = get_user_by_email(db, email)
    except UserNotFoundError:
        logger.warning("Invalid credentials email=%s", email)
        raise InvalidCredentialsError()

    if not verify_password(password, user.password):
        logger.warning("Invalid credentials email=%s", email)
        raise InvalidCredentialsError()

    return issue_token(user), user


# Register user (POST)
def register(db: Session, data: UserCreate) -> Tuple[str, User]:
    logger.info("Registering user email=%s", data.email)

    existing = db.query(User).filter(User.email == data.email).first()
    if existing:
        logger.warning("User with email=%s already exists", data.email)
        raise DuplicateUserError(data.email)

    user = User(
        name = data.name,
        email = data.email,
        password = hash_password(data.password),
    )

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as e:
        # Concurrent registration won the unique email index
        db.rollback()
        logger.warning("IntegrityError registering user email=%s: %s", data.email, str(e))
        raise DuplicateUserError(data.email)

    logger.info("User registered successfully id=%s", user.id)
    return issue_token(user), user
