import pytest
from fastapi.testclient import TestClient

from jobly.core.security import create_access_token, hash_password
from jobly.core.settings import Settings
from jobly.db import Base
from jobly.main import create_app
from jobly.models.company import Company
from jobly.models.user import User

HASH_ROUNDS = 1000


def _seed(db):
    for n in (1, 2, 3):
        db.add(Company(
            handle=f"c{n}",
            name=f"C{n}",
            description=f"Desc{n}",
            num_employees=n,
            logo_url=f"http://c{n}.img",
        ))
        db.add(User(
            username=f"u{n}",
            password=hash_password(f"password{n}", HASH_ROUNDS),
            first_name=f"U{n}F",
            last_name=f"U{n}L",
            email=f"user{n}@user.com",
            is_admin=False,
        ))
    db.commit()


@pytest.fixture()
def settings():
    return Settings(
        ENV="test",
        DATABASE_URL="sqlite://",
        AUTH_JWT_SECRET="test-secret-0123456789abcdefghijklmnop",
        PASSWORD_HASH_ROUNDS=HASH_ROUNDS,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture()
def app(settings):
    # fresh in-memory database per test, tables from the models' metadata
    app = create_app(settings)
    Base.metadata.create_all(bind=app.state.engine)
    with app.state.session_factory() as db:
        _seed(db)
    yield app
    app.state.engine.dispose()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db(app):
    with app.state.session_factory() as session:
        yield session


@pytest.fixture()
def u1_headers(settings):
    return {"Authorization": f"Bearer {create_access_token('u1', False, settings)}"}


@pytest.fixture()
def u2_headers(settings):
    return {"Authorization": f"Bearer {create_access_token('u2', False, settings)}"}


@pytest.fixture()
def admin_headers(settings):
    # the admin caller exists only in the token
    return {"Authorization": f"Bearer {create_access_token('admin', True, settings)}"}
