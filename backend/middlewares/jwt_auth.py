from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from services.authorization_service import require_authenticated
from fastapi import Depends, HTTPException, status
from errors.auth_errors import NotAuthenticatedError
from services.auth_service import resolve_identity
from models.user_model import User
from sqlalchemy.orm import Session
from config.database import get_db
from typing import Optional

bearer_scheme = HTTPBearer(auto_error = False)


# Current user or None, invalid tokens are treated as anonymous
def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[User]:
    token = credentials.credentials if credentials else ""
    return resolve_identity(db, token)


# Current user, 401 when anonymous
def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    try:
        return require_authenticated(user)
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code = status.HTTP_401_UNAUTHORIZED,
            detail = str(e),
            headers = {"WWW-Authenticate": "Bearer"},
        )
