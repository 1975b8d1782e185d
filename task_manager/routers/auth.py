import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas.auth import AuthRequest, Token
from ..services.users import UserService
from ..utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=Token)
def login(credentials: AuthRequest, db: Session = Depends(get_db)):
    user = UserService(db).authenticate(credentials.username, credentials.password)
    if not user:
        logger.warning("Rejected login attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect credentials")
    token = create_access_token({"sub": user.email})
    return {"access_token": token, "token_type": "bearer"}
