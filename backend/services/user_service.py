import logging
from uuid import UUID
from sqlalchemy.orm import Session, selectinload
from errors.user_errors import UserNotFoundError
from models.enrollment_model import Enrollment
from models.user_model import User

logger = logging.getLogger("app.services.user")

def _with_enrollments():
    return selectinload(User.enrollments).selectinload(Enrollment.course)


# Get all users (GET)
def get_users(db: Session):
    logger.debug("Fetching all users")
    return db.query(User).options(_with_enrollments()).order_by(User.name, User.id).all()


# Get user by id (GET)
def get_user_by_id(db: Session, user_id: UUID):
    logger.debug("Fetching user by id=%s", user_id)
    user = db.query(User).options(_with_enrollments()).filter(User.id == user_id).first()
    if not user:
        raise UserNotFoundError("id", str(user_id))
    return user


# Get user by email (GET)
def get_user_by_email(db: Session, user_email: str):
    logger.debug("Fetching user by email=%s", user_email)
    user = db.query(User).options(_with_enrollments()).filter(User.email == user_email).first()
    if not user:
        raise UserNotFoundError("email", user_email)
    return user
