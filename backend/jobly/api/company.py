from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from jobly.core.policy import Action
from jobly.core.security import authorize
from jobly.core.validation import validate_query
from jobly.crud import company as company_crud
from jobly.deps import get_db
from jobly.schemas.company import (
    CompanyCreate,
    CompanyFilter,
    CompanyListResponse,
    CompanyOut,
    CompanyResponse,
    CompanyUpdate,
    DeletedResponse,
)

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=201,
    dependencies=[Depends(authorize(Action.COMPANY_CREATE))],
)
def create_company(payload: CompanyCreate, db: Session = Depends(get_db)):
    c = company_crud.create(db, payload)
    return CompanyResponse(company=CompanyOut.model_validate(c))


@router.get("", response_model=CompanyListResponse, dependencies=[Depends(authorize(Action.COMPANY_READ))])
def list_companies(request: Request, db: Session = Depends(get_db)):
    """Optional filters: ``name``, ``minEmployees``, ``maxEmployees``. Anything else is a 400."""
    filters = validate_query(CompanyFilter, request.query_params)
    companies = company_crud.find_all(db, filters)
    return CompanyListResponse(companies=[CompanyOut.model_validate(c) for c in companies])


@router.get("/{handle}", response_model=CompanyResponse, dependencies=[Depends(authorize(Action.COMPANY_READ))])
def get_company(handle: str, db: Session = Depends(get_db)):
    c = company_crud.get(db, handle)
    return CompanyResponse(company=CompanyOut.model_validate(c))


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(authorize(Action.COMPANY_UPDATE))],
)
def update_company(handle: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    c = company_crud.update(db, handle, payload)
    return CompanyResponse(company=CompanyOut.model_validate(c))


@router.delete(
    "/{handle}",
    response_model=DeletedResponse,
    dependencies=[Depends(authorize(Action.COMPANY_DELETE))],
)
def delete_company(handle: str, db: Session = Depends(get_db)):
    company_crud.remove(db, handle)
    return DeletedResponse(deleted=handle)
