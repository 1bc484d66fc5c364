from errors.enrollment_errors import AlreadyEnrolledError, EnrollmentNotFoundError
from schemas.enrollment_schema import EnrollmentCreate, EnrollmentResponse
from fastapi import APIRouter, Depends, HTTPException, status
from errors.course_errors import CourseNotFoundError
from errors.auth_errors import NotAuthorizedError
from schemas.course_schema import SuccessResponse
from middlewares.jwt_auth import require_user
from models.user_model import User
from sqlalchemy.orm import Session
from config.database import get_db
from models.enrollment_model import EnrollmentRole
from typing import Optional
from uuid import UUID
from services.enrollment_service import (
    enroll,
    unenroll,
    get_enrollments_for_course,
)

router = APIRouter(prefix = "/courses/{course_id}/enrollments", tags = ["Enrollments"])

# Enroll current user
@router.post("", response_model = EnrollmentResponse, status_code = status.HTTP_201_CREATED)
def enroll_endpoint(course_id: UUID, data: Optional[EnrollmentCreate] = None, user: User = Depends(require_user), db: Session = Depends(get_db)):
    try:
        role = data.role if data else EnrollmentRole.STUDENT
        return enroll(db, user.id, course_id, role)
    except CourseNotFoundError as e:
        raise HTTPException(status_code = status.HTTP_404_NOT_FOUND, detail = str(e))
    except NotAuthorizedError as e:
        raise HTTPException(status_code = status.HTTP_403_FORBIDDEN, detail = str(e))
    except AlreadyEnrolledError as e:
        raise HTTPException(status_code = status.HTTP_400_BAD_REQUEST, detail = str(e))


# Unenroll current user
@router.delete("", response_model = SuccessResponse, status_code = status.HTTP_200_OK)
def unenroll_endpoint(course_id: UUID, user: User = Depends(require_user), db: Session = Depends(get_db)):
    try:
        unenroll(db, user.id, course_id)
        return SuccessResponse(success = True)
    except EnrollmentNotFoundError as e:
        raise HTTPException(status_code = status.HTTP_404_NOT_FOUND, detail = str(e))


# Get enrollments of a course
@router.get("", response_model = list[EnrollmentResponse], status_code = status.HTTP_200_OK)
def get_course_enrollments_endpoint(course_id: UUID, db: Session = Depends(get_db)):
    return get_enrollments_for_course(db, course_id)
