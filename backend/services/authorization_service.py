import logging
from uuid import UUID
from typing import Optional
from sqlalchemy.orm import Session
from errors.auth_errors import NotAuthenticatedError, NotAuthorizedError
from models.enrollment_model import Enrollment, EnrollmentRole
from models.user_model import User

logger = logging.getLogger("app.services.authorization")


def require_authenticated(user: Optional[User]) -> User:
    if user is None:
        raise NotAuthenticatedError()
    return user


def find_professor_enrollment(db: Session, user_id: UUID, course_id: UUID) -> Optional[Enrollment]:
    return db.query(Enrollment).filter(
        Enrollment.user_id == user_id,
        Enrollment.course_id == course_id,
        Enrollment.role == EnrollmentRole.PROFESSOR,
    ).first()


def is_professor(db: Session, user_id: UUID, course_id: UUID) -> bool:
    return find_professor_enrollment(db, user_id, course_id) is not None


# Queried on every call, role membership may change between requests
def require_professor(db: Session, user: Optional[User], course_id: UUID, action: str = "edit") -> Enrollment:
    user = require_authenticated(user)
    enrollment = find_professor_enrollment(db, user.id, course_id)
    if not enrollment:
        logger.warning("User id=%s denied %s on course id=%s", user.id, action, course_id)
        raise NotAuthorizedError(action)
    return enrollment
