from pydantic import BaseModel, ConfigDict, Field

from jobly.schemas.base import InputModel, OutputModel, Url


class CompanyCreate(InputModel):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: Url | None = None


class CompanyUpdate(InputModel):
    # omitted means unchanged; an explicit null is rejected
    name: str = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: Url | None = None


class CompanyFilter(InputModel):
    # query-string text, so numbers arrive as strings
    model_config = ConfigDict(strict=False)

    name: str | None = Field(default=None, min_length=1)
    min_employees: int | None = Field(default=None, ge=0)
    max_employees: int | None = Field(default=None, ge=0)


class CompanyOut(OutputModel):
    handle: str
    name: str
    description: str | None = None
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyListResponse(BaseModel):
    companies: list[CompanyOut]


class DeletedResponse(BaseModel):
    deleted: str
