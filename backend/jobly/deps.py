from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from jobly.core.settings import Settings


# one session per request, bound to the engine of the app serving it
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
