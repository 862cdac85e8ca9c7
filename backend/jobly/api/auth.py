from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.security import create_access_token
from jobly.core.settings import Settings
from jobly.crud import user as user_crud
from jobly.deps import get_app_settings, get_db
from jobly.schemas.auth import LoginIn, TokenOut
from jobly.schemas.user import UserRegister

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenOut)
def login(payload: LoginIn, db: Session = Depends(get_db), settings: Settings = Depends(get_app_settings)):
    user = user_crud.authenticate(db, payload.username, payload.password)
    return TokenOut(token=create_access_token(user.username, user.is_admin, settings))


@router.post("/register", response_model=TokenOut, status_code=201)
def register(payload: UserRegister, db: Session = Depends(get_db), settings: Settings = Depends(get_app_settings)):
    # self-service accounts are never admins
    user = user_crud.register(db, **payload.model_dump(), hash_rounds=settings.PASSWORD_HASH_ROUNDS)
    return TokenOut(token=create_access_token(user.username, user.is_admin, settings))
