from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.policy import Action
from jobly.core.security import authorize, create_access_token
from jobly.core.settings import Settings
from jobly.crud import user as user_crud
from jobly.deps import get_app_settings, get_db
from jobly.schemas.company import DeletedResponse
from jobly.schemas.user import (
    UserCreate,
    UserListResponse,
    UserOut,
    UserResponse,
    UserTokenResponse,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserTokenResponse,
    status_code=201,
    dependencies=[Depends(authorize(Action.USER_CREATE))],
)
def create_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Admin provisioning; the new account may itself be an admin."""
    user = user_crud.register(db, **payload.model_dump(), hash_rounds=settings.PASSWORD_HASH_ROUNDS)
    token = create_access_token(user.username, user.is_admin, settings)
    return UserTokenResponse(user=UserOut.model_validate(user), token=token)


@router.get("", response_model=UserListResponse, dependencies=[Depends(authorize(Action.USER_LIST))])
def list_users(db: Session = Depends(get_db)):
    return UserListResponse(users=[UserOut.model_validate(u) for u in user_crud.find_all(db)])


@router.get("/{username}", response_model=UserResponse, dependencies=[Depends(authorize(Action.USER_READ))])
def get_user(username: str, db: Session = Depends(get_db)):
    return UserResponse(user=UserOut.model_validate(user_crud.get(db, username)))


@router.patch("/{username}", response_model=UserResponse, dependencies=[Depends(authorize(Action.USER_UPDATE))])
def update_user(
    username: str,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    user = user_crud.update(db, username, payload, hash_rounds=settings.PASSWORD_HASH_ROUNDS)
    return UserResponse(user=UserOut.model_validate(user))


@router.delete("/{username}", response_model=DeletedResponse, dependencies=[Depends(authorize(Action.USER_DELETE))])
def delete_user(username: str, db: Session = Depends(get_db)):
    user_crud.remove(db, username)
    return DeletedResponse(deleted=username)
