"""POST /auth/login."""

import jwt
import pytest

from tests.conftest import LOGIN_URL, TEST_SECRET


def _login(client, email, password):
    return client.post(LOGIN_URL, json={"email": email, "password": password})


def test_login_returns_token_and_projection(client, registered_user):
    response = _login(client, registered_user["email"], registered_user["password"])

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["token"]
    assert body["user"] == {
        "id": registered_user["id"],
        "name": "Login Tester",
        "email": "logintester@logintest.com",
    }
    assert registered_user["password"] not in response.text


def test_login_token_carries_identity_and_24h_expiry(client, registered_user):
    token = _login(client, registered_user["email"], registered_user["password"]).json()["token"]

    decoded = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])
    assert decoded["id"] == registered_user["id"]
    assert decoded["email"] == "logintester@logintest.com"
    assert decoded["name"] == "Login Tester"
    assert decoded["exp"] - decoded["iat"] == 86400


@pytest.mark.parametrize(
    "payload",
    [{"password": "Senha123"}, {"email": "logintester@logintest.com"}, {}, {"email": "", "password": ""}],
)
def test_login_rejects_missing_fields(client, payload):
    response = client.post(LOGIN_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Email and password are required"}


def test_login_unknown_email(client):
    response = _login(client, "ghost@x.com", "whatever")

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_wrong_password(client, registered_user):
    response = _login(client, registered_user["email"], "SenhaErrada999")

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_failures_are_indistinguishable(client, registered_user):
    unknown = _login(client, "fantasma@logintest.com", registered_user["password"])
    wrong = _login(client, registered_user["email"], "TotalmenteErrada")

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.content == wrong.content
