from services.authorization_service import require_authenticated, require_professor
from services.enrollment_service import auto_enroll_as_professor
from schemas.course_schema import CourseCreate, CourseUpdate
from errors.course_errors import CourseNotFoundError
from errors.db_errors import IntegrityConstraintError
from sqlalchemy.orm import Session, selectinload
from models.enrollment_model import Enrollment
from sqlalchemy.exc import IntegrityError
from models.course_model import Course
from models.user_model import User
from typing import Optional
from uuid import UUID
import logging

logger = logging.getLogger("app.services.course")

def _with_enrollments():
    return selectinload(Course.enrollments).selectinload(Enrollment.user)


# Create course (POST)
def create_course(db: Session, user: Optional[User], course_data: CourseCreate):
    user = require_authenticated(user)
    logger.info("Creating new course title=%s by user id=%s", course_data.title, user.id)

    course = Course(
        title = course_data.title,
        description = course_data.description,
        level = course_data.level,
    )

    # Course row and creator's PROFESSOR enrollment commit together
    try:
        db.add(course)
        db.flush()
        auto_enroll_as_professor(db, user.id, course.id)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error("IntegrityError when creating course: %s", str(e))
        raise IntegrityConstraintError("Create Course")

    course = get_course_by_id(db, course.id)
    logger.info("Course created successfully id=%s", course.id)
    return course


# Get all courses (GET)
def get_courses(db: Session):
    logger.debug("Fetching all courses")
    return db.query(Course).options(_with_enrollments()).order_by(Course.created_at.desc(), Course.id).all()


# Get course by id (GET)
def get_course_by_id(db: Session, course_id: UUID):
    logger.debug("Fetching course by id=%s", course_id)
    course = db.query(Course).options(_with_enrollments()).filter(Course.id == course_id).first()
    if not course:
        raise CourseNotFoundError("id", str(course_id))
    return course


# Update course (PUT)
def update_course(db: Session, user: Optional[User], course_id: UUID, course_data: CourseUpdate):
    user = require_authenticated(user)
    logger.info("Updating course id=%s", course_id)
    require_professor(db, user, course_id, action = "edit")
    course = get_course_by_id(db, course_id)

    for key, value in course_data.model_dump(exclude_unset = True).items():
        setattr(course, key, value)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error("IntegrityError when updating course: %s", str(e))
        raise IntegrityConstraintError("Update Course")

    course = get_course_by_id(db, course_id)
    logger.info("Course updated successfully id=%s", course.id)
    return course


# Delete course (DELETE)
def delete_course(db: Session, user: Optional[User], course_id: UUID):
    user = require_authenticated(user)
    logger.info("Deleting course id=%s", course_id)
    require_professor(db, user, course_id, action = "delete")
    course = get_course_by_id(db, course_id)
    db.delete(course)
    db.commit()
    logger.info("Course deleted successfully id=%s", course_id)
