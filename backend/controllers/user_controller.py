from schemas.enrollment_schema import EnrollmentResponse
from services.enrollment_service import get_enrollments_for_user
from errors.user_errors import UserNotFoundError
from fastapi import APIRouter, Depends, HTTPException, status
from services.user_service import get_users, get_user_by_id
from schemas.user_schema import UserResponse
from sqlalchemy.orm import Session
from config.database import get_db
from uuid import UUID

router = APIRouter(prefix="/users", tags=["Users"])


# Get Users
@router.get("/", response_model = list[UserResponse])
def get_users_endpoint(db: Session = Depends(get_db)):
    return get_users(db)


# Get User by Id
@router.get("/{user_id}", response_model = UserResponse)
def get_user_by_id_endpoint(user_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_user_by_id(db, user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# Get enrollments of a user
@router.get("/{user_id}/enrollments", response_model = list[EnrollmentResponse])
def get_user_enrollments_endpoint(user_id: UUID, db: Session = Depends(get_db)):
    return get_enrollments_for_user(db, user_id)
