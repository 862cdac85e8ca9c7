"""Record operations on ``companies``."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.errors import BadRequestError, NotFoundError
from jobly.models.company import Company
from jobly.schemas.company import CompanyCreate, CompanyFilter, CompanyUpdate

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create(db: Session, data: CompanyCreate) -> Company:
    exists = db.scalar(select(Company).where(Company.handle == data.handle))
    if exists:
        raise BadRequestError(f"Duplicate company: {data.handle}")

    c = Company(**data.model_dump())
    db.add(c)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent insert of the same handle
        db.rollback()
        raise BadRequestError(f"Duplicate company: {data.handle}")
    db.refresh(c)
    logger.info("Created company handle=%s", c.handle)
    return c


def find_all(db: Session, filters: CompanyFilter | None = None) -> list[Company]:
    """Companies matching every supplied filter, ordered by handle.

    ``name`` is a case-insensitive substring match; ``min_employees`` and
    ``max_employees`` bound ``num_employees`` inclusively. A minimum above the
    maximum is a :class:`BadRequestError`.
    """
    q = select(Company).order_by(Company.handle)
    if filters is None:
        return list(db.scalars(q))

    lo, hi = filters.min_employees, filters.max_employees
    if lo is not None and hi is not None and lo > hi:
        raise BadRequestError()

    if filters.name is not None:
        q = q.where(Company.name.ilike(f"%{_escape_like(filters.name)}%", escape="\\"))
    if lo is not None:
        q = q.where(Company.num_employees >= lo)
    if hi is not None:
        q = q.where(Company.num_employees <= hi)
    return list(db.scalars(q))


def get(db: Session, handle: str) -> Company:
    c = db.get(Company, handle)
    if not c:
        raise NotFoundError(f"No company: {handle}")
    return c


def update(db: Session, handle: str, data: CompanyUpdate) -> Company:
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise BadRequestError("No data")

    c = get(db, handle)
    for field, value in changes.items():
        setattr(c, field, value)
    db.commit()
    db.refresh(c)
    return c


def remove(db: Session, handle: str) -> None:
    c = get(db, handle)
    db.delete(c)
    db.commit()
    logger.info("Deleted company handle=%s", handle)
