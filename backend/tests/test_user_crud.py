import pytest

from jobly.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from jobly.crud import user as user_crud
from jobly.schemas.user import UserUpdate

ROUNDS = 1000


def test_authenticate(db):
    user = user_crud.authenticate(db, "u1", "password1")
    assert user.username == "u1"


def test_authenticate_wrong_password(db):
    with pytest.raises(UnauthorizedError):
        user_crud.authenticate(db, "u1", "wrong")


def test_authenticate_unknown_user(db):
    with pytest.raises(UnauthorizedError):
        user_crud.authenticate(db, "ghost", "password1")


def test_register(db):
    user = user_crud.register(
        db,
        username="new",
        password="password",
        first_name="Test",
        last_name="Tester",
        email="test@test.com",
        is_admin=True,
        hash_rounds=ROUNDS,
    )
    assert user.is_admin is True
    assert user.password.startswith("$pbkdf2-sha256$")
    assert user_crud.authenticate(db, "new", "password").username == "new"


def test_register_duplicate(db):
    with pytest.raises(BadRequestError) as exc_info:
        user_crud.register(
            db,
            username="u1",
            password="password",
            first_name="Test",
            last_name="Tester",
            email="test@test.com",
            hash_rounds=ROUNDS,
        )
    assert exc_info.value.message == "Duplicate username: u1"


def test_find_all_sorted(db):
    assert [u.username for u in user_crud.find_all(db)] == ["u1", "u2", "u3"]


def test_get_not_found(db):
    with pytest.raises(NotFoundError):
        user_crud.get(db, "nope")


def test_update(db):
    user = user_crud.update(db, "u1", UserUpdate.model_validate({"firstName": "New", "email": "new@user.com"}))
    assert user.first_name == "New"
    assert user.email == "new@user.com"
    assert user.last_name == "U1L"


def test_update_password_is_hashed(db):
    user = user_crud.update(db, "u1", UserUpdate.model_validate({"password": "new-password"}), hash_rounds=ROUNDS)
    assert user.password != "new-password"
    assert user_crud.authenticate(db, "u1", "new-password").username == "u1"
    with pytest.raises(UnauthorizedError):
        user_crud.authenticate(db, "u1", "password1")


def test_update_no_data(db):
    with pytest.raises(BadRequestError):
        user_crud.update(db, "u1", UserUpdate.model_validate({}))


def test_remove(db):
    user_crud.remove(db, "u1")
    with pytest.raises(NotFoundError):
        user_crud.get(db, "u1")


def test_register_duplicate_missed_by_lookup(db, monkeypatch):
    # a concurrent insert lands between the lookup and the commit
    monkeypatch.setattr(db, "scalar", lambda *args, **kwargs: None)
    with pytest.raises(BadRequestError) as exc_info:
        user_crud.register(
            db,
            username="u1",
            password="password",
            first_name="Test",
            last_name="Tester",
            email="test@test.com",
            hash_rounds=ROUNDS,
        )
    assert exc_info.value.message == "Duplicate username: u1"
    assert user_crud.get(db, "u1").first_name == "U1F"
