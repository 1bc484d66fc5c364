from schemas.course_schema import CourseCreate, CourseUpdate, CourseResponse, SuccessResponse
from errors.auth_errors import NotAuthorizedError
from fastapi import APIRouter, Depends, HTTPException, status
from errors.db_errors import IntegrityConstraintError
from errors.course_errors import CourseNotFoundError
from middlewares.jwt_auth import require_user
from models.user_model import User
from sqlalchemy.orm import Session
from config.database import get_db
from uuid import UUID
from services.course_service import (
    create_course,
    get_courses,
    get_course_by_id,
    update_course,
    delete_course,
)

router = APIRouter(prefix = "/courses", tags = ["Courses"])

# Create Course
@router.post("/", response_model = CourseResponse, status_code = status.HTTP_201_CREATED)
def create_course_endpoint(course_data: CourseCreate, user: User = Depends(require_user), db: Session = Depends(get_db)):
    try:
        return create_course(db, user, course_data)
    except IntegrityConstraintError as e:
        raise HTTPException(status_code = status.HTTP_409_CONFLICT, detail = str(e))


# Get All Courses
@router.get("/", response_model = list[CourseResponse], status_code = status.HTTP_200_OK)
def get_courses_endpoint(db: Session = Depends(get_db)):
    return get_courses(db)


# Get Course by ID
@router.get("/{course_id}", response_model = CourseResponse, status_code = status.HTTP_200_OK)
def get_course_by_id_endpoint(course_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_course_by_id(db, course_id)
    except CourseNotFoundError as e:
        raise HTTPException(status_code = status.HTTP_404_NOT_FOUND, detail = str(e))


# Update Course, professors only
@router.put("/{course_id}", response_model = CourseResponse, status_code = status.HTTP_200_OK)
def update_course_endpoint(course_id: UUID, course_data: CourseUpdate, user: User = Depends(require_user), db: Session = Depends(get_db)):
    try:
        return update_course(db, user, course_id, course_data)
    except CourseNotFoundError as e:
        raise HTTPException(status_code = status.HTTP_404_NOT_FOUND, detail = str(e))
    except NotAuthorizedError as e:
        raise HTTPException(status_code = status.HTTP_403_FORBIDDEN, detail = str(e))
    except IntegrityConstraintError as e:
        raise HTTPException(status_code = status.HTTP_409_CONFLICT, detail = str(e))


# Delete Course, professors only
@router.delete("/{course_id}", response_model = SuccessResponse, status_code = status.HTTP_200_OK)
def delete_course_endpoint(course_id: UUID, user: User = Depends(require_user), db: Session = Depends(get_db)):
    try:
        delete_course(db, user, course_id)
        return SuccessResponse(success = True)
    except CourseNotFoundError as e:
        raise HTTPException(status_code = status.HTTP_404_NOT_FOUND, detail = str(e))
    except NotAuthorizedError as e:
        raise HTTPException(status_code = status.HTTP_403_FORBIDDEN, detail = str(e))
