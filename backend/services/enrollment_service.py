import logging
from uuid import UUID
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from errors.enrollment_errors import AlreadyEnrolledError, EnrollmentNotFoundError
from models.enrollment_model import Enrollment, EnrollmentRole
from errors.course_errors import CourseNotFoundError
from errors.auth_errors import NotAuthorizedError
from models.course_model import Course
from config import security

logger = logging.getLogger("app.services.enrollment")

def _with_user_and_course():
    return (selectinload(Enrollment.user), selectinload(Enrollment.course))


def _get_enrollment(db: Session, user_id: UUID, course_id: UUID):
    return db.query(Enrollment).filter(
        Enrollment.user_id == user_id,
        Enrollment.course_id == course_id,
    ).first()


# Enroll user in course (POST)
def enroll(db: Session, user_id: UUID, course_id: UUID, role: EnrollmentRole = EnrollmentRole.STUDENT):
    logger.info("Enrolling user id=%s in course id=%s as %s", user_id, course_id, role.value)

    if not db.get(Course, course_id):
        raise CourseNotFoundError("id", str(course_id))

    if role == EnrollmentRole.PROFESSOR:
        if not security.ENROLL_ALLOW_PROFESSOR_ROLE:
            logger.warning("Rejected self-assigned PROFESSOR user id=%s course id=%s", user_id, course_id)
            raise NotAuthorizedError("self-assign PROFESSOR on")
        logger.warning("User id=%s self-assigned PROFESSOR on course id=%s", user_id, course_id)

    if _get_enrollment(db, user_id, course_id):
        logger.warning("User id=%s already enrolled in course id=%s", user_id, course_id)
        raise AlreadyEnrolledError(str(user_id), str(course_id))

    enrollment = Enrollment(user_id = user_id, course_id = course_id, role = role)

    try:
        db.add(enrollment)
        db.commit()
    except IntegrityError as e:
        # The unique (user_id, course_id) index arbitrates concurrent enrolls
        db.rollback()
        logger.warning("IntegrityError enrolling user id=%s course id=%s: %s", user_id, course_id, str(e))
        raise AlreadyEnrolledError(str(user_id), str(course_id))

    enrollment = db.query(Enrollment).options(*_with_user_and_course()).filter(Enrollment.id == enrollment.id).first()
    logger.info("Enrollment created id=%s", enrollment.id)
    return enrollment


# Unenroll user from course (DELETE)
def unenroll(db: Session, user_id: UUID, course_id: UUID):
    logger.info("Unenrolling user id=%s from course id=%s", user_id, course_id)
    enrollment = _get_enrollment(db, user_id, course_id)
    if not enrollment:
        logger.warning("No enrollment for user id=%s course id=%s", user_id, course_id)
        raise EnrollmentNotFoundError(str(user_id), str(course_id))

    db.delete(enrollment)
    db.commit()
    logger.info("Enrollment deleted user id=%s course id=%s", user_id, course_id)


# Staged inside the create course transaction, the caller commits
def auto_enroll_as_professor(db: Session, user_id: UUID, course_id: UUID) -> Enrollment:
    enrollment = Enrollment(user_id = user_id, course_id = course_id, role = EnrollmentRole.PROFESSOR)
    db.add(enrollment)
    db.flush()
    return enrollment


# Get enrollments of a user (GET)
def get_enrollments_for_user(db: Session, user_id: UUID):
    logger.debug("Fetching enrollments for user id=%s", user_id)
    return db.query(Enrollment).options(*_with_user_and_course()).filter(
        Enrollment.user_id == user_id
    ).order_by(Enrollment.id).all()


# Get enrollments of a course (GET)
def get_enrollments_for_course(db: Session, course_id: UUID):
    logger.debug("Fetching enrollments for course id=%s", course_id)
    return db.query(Enrollment).options(*_with_user_and_course()).filter(
        Enrollment.course_id == course_id
    ).order_by(Enrollment.id).all()
