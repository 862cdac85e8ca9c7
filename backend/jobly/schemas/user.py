from pydantic import BaseModel, Field

from jobly.schemas.base import Email, InputModel, OutputModel


class UserRegister(InputModel):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=20)
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: Email


class UserCreate(UserRegister):
    is_admin: bool = False


class UserUpdate(InputModel):
    # username and isAdmin are not updatable; omitted means unchanged, null is rejected
    password: str = Field(default=None, min_length=5, max_length=20)
    first_name: str = Field(default=None, min_length=1, max_length=30)
    last_name: str = Field(default=None, min_length=1, max_length=30)
    email: Email = None


class UserOut(OutputModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserResponse(BaseModel):
    user: UserOut


class UserTokenResponse(BaseModel):
    user: UserOut
    token: str


class UserListResponse(BaseModel):
    users: list[UserOut]
