"""Record operations on ``users``. Passwords go in hashed and never come out."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from jobly.core.security import hash_password, verify_password
from jobly.models.user import User
from jobly.schemas.user import UserUpdate

logger = logging.getLogger(__name__)


def authenticate(db: Session, username: str, password: str) -> User:
    user = db.get(User, username)
    if user and verify_password(password, user.password):
        return user
    logger.info("Failed login for username=%s", username)
    raise UnauthorizedError("Invalid username/password")


def register(
    db: Session,
    *,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    is_admin: bool = False,
    hash_rounds: int | None = None,
) -> User:
    exists = db.scalar(select(User).where(User.username == username))
    if exists:
        raise BadRequestError(f"Duplicate username: {username}")

    user = User(
        username=username,
        password=hash_password(password, hash_rounds),
        first_name=first_name,
        last_name=last_name,
        email=email,
        is_admin=is_admin,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent insert of the same username
        db.rollback()
        raise BadRequestError(f"Duplicate username: {username}")
    db.refresh(user)
    logger.info("Registered username=%s is_admin=%s", username, is_admin)
    return user


def find_all(db: Session) -> list[User]:
    return list(db.scalars(select(User).order_by(User.username)))


def get(db: Session, username: str) -> User:
    user = db.get(User, username)
    if not user:
        raise NotFoundError(f"No user: {username}")
    return user


def update(db: Session, username: str, data: UserUpdate, hash_rounds: int | None = None) -> User:
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise BadRequestError("No data")

    user = get(db, username)
    if "password" in changes:
        changes["password"] = hash_password(changes["password"], hash_rounds)
    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user


def remove(db: Session, username: str) -> None:
    user = get(db, username)
    db.delete(user)
    db.commit()
    logger.info("Deleted username=%s", username)
