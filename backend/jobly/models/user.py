from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobly.db import Base


class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(25), primary_key=True)
    # pbkdf2-sha256 hash, never the plain text
    password: Mapped[str] = mapped_column(Text)
    first_name: Mapped[str] = mapped_column(String(30))
    last_name: Mapped[str] = mapped_column(String(30))
    email: Mapped[str] = mapped_column(String(60))
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
