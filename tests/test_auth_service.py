"""Flow-level behaviour: validation order, store races and collaborator failures."""

import pytest

from app.core.constants import LOGIN_REQUIRED_MESSAGE, REGISTER_REQUIRED_MESSAGE
from app.core.enums import ErrorCode
from app.core.errors import ValidationError
from app.services.auth import validate_registration
from app.services.user_store import UserStore
from tests.conftest import LOGIN_URL, REGISTER_URL


@pytest.mark.parametrize(
    ("name", "email", "password", "code"),
    [
        (None, "bad", "1", ErrorCode.MISSING_FIELDS),
        ("A", "bad", "1", ErrorCode.INVALID_EMAIL),
        ("A", "a@b.co", "12345", ErrorCode.WEAK_PASSWORD),
    ],
)
def test_validation_first_failure_wins(name, email, password, code):
    with pytest.raises(ValidationError) as excinfo:
        validate_registration(name, email, password)

    assert excinfo.value.code == code


def test_validation_accepts_minimal_input():
    validate_registration("A", "a@b.co", "123456")


def test_unique_constraint_conflict_is_reported_as_409(client, monkeypatch):
    """A registration that passes the existence check can still lose the insert race."""

    async def never_found(self, email):
        return None

    monkeypatch.setattr(UserStore, "get_by_email", never_found)
    payload = {"name": "Racer", "email": "race@teste.com", "password": "Senha123"}

    first = client.post(REGISTER_URL, json=payload)
    second = client.post(REGISTER_URL, json=payload)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json() == {"error": "Email already registered"}


def test_store_failure_is_generic_500(client, monkeypatch):
    async def broken(self, email):
        raise RuntimeError("connection reset by peer")

    monkeypatch.setattr(UserStore, "get_by_email", broken)

    register = client.post(
        REGISTER_URL, json={"name": "A", "email": "a@teste.com", "password": "Senha123"}
    )
    login = client.post(LOGIN_URL, json={"email": "a@teste.com", "password": "Senha123"})

    for response in (register, login):
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "connection reset" not in response.text


def test_missing_fields_wording_comes_from_constants():
    with pytest.raises(ValidationError) as excinfo:
        validate_registration("", "a@b.co", "123456")

    assert excinfo.value.message == REGISTER_REQUIRED_MESSAGE
    assert excinfo.value.to_body() == {"error": "Name, email and password are required"}


def test_login_missing_fields_wording(client):
    response = client.post(LOGIN_URL, json={"email": "a@b.co"})

    assert response.json() == {"error": LOGIN_REQUIRED_MESSAGE}
