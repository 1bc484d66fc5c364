from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from config.database import get_db
from schemas.user_schema import LoginRequest, AuthPayload, UserCreate, UserResponse
from services.auth_service import login, register
from services.user_service import get_user_by_id
from middlewares.jwt_auth import require_user
from errors.user_errors import InvalidCredentialsError, DuplicateUserError
from models.user_model import User

router = APIRouter(prefix="/auth", tags=["Auth"])

# Register new user
@router.post("/register", response_model = AuthPayload, status_code = status.HTTP_201_CREATED)
def register_endpoint(data: UserCreate, db: Session = Depends(get_db)):
    try:
        token, user = register(db, data)
        return AuthPayload(token = token, user = UserResponse.model_validate(user))
    except DuplicateUserError as e:
        raise HTTPException(status_code = status.HTTP_400_BAD_REQUEST, detail = str(e))


# Login user
@router.post("/login", response_model = AuthPayload)
def login_endpoint(req: LoginRequest, db: Session = Depends(get_db)):
    try:
        token, user = login(db, req.email, req.password)
        return AuthPayload(token = token, user = UserResponse.model_validate(user))
    except InvalidCredentialsError as e:
        raise HTTPException(status_code = status.HTTP_401_UNAUTHORIZED, detail = str(e))


# Current user
@router.get("/me", response_model = UserResponse)
def me_endpoint(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return get_user_by_id(db, user.id)
