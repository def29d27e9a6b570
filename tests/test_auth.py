from werkzeug.security import check_password_hash

from database_init import db
from models.user import User
from conftest import make_user, auth_headers


def test_register_creates_user_with_hashed_password(client, app):
    res = client.post(
        "/api/auth/register",
        json={"name": "Luis", "email": "Luis@EduJuegos.com", "password": "secret123"},
    )
    assert res.status_code == 201
    body = res.get_json()
    assert body["user"]["email"] == "luis@edujuegos.com"
    assert body["user"]["role"] == "user"
    assert "password" not in body["user"]

    with app.app_context():
        user = User.query.filter_by(email="luis@edujuegos.com").one()
        assert user.password != "secret123"
        assert check_password_hash(user.password, "secret123")


def test_register_duplicate_email_returns_400(client, user_id):
    res = client.post(
        "/api/auth/register",
        json={"name": "Otra Ana", "email": "ana@edujuegos.com", "password": "secret123"},
    )
    assert res.status_code == 400
    assert res.get_json()["message"] == "El usuario ya existe"


def test_register_rejects_short_password_and_bad_email(client):
    res = client.post(
        "/api/auth/register",
        json={"name": "Luis", "email": "no-es-email", "password": "123"},
    )
    assert res.status_code == 400
    errors = res.get_json()["errors"]
    assert "email" in errors
    assert "password" in errors


def test_login_returns_mock_token(client, user_id):
    res = client.post(
        "/api/auth/login", json={"email": "ana@edujuegos.com", "password": "secret123"}
    )
    assert res.status_code == 200
    body = res.get_json()
    assert body["token"] == f"mock_token_{user_id}"
    assert body["user"] == {
        "id": user_id,
        "email": "ana@edujuegos.com",
        "name": "Ana Pérez",
        "role": "user",
    }


def test_login_with_wrong_password_returns_401(client, user_id):
    res = client.post(
        "/api/auth/login", json={"email": "ana@edujuegos.com", "password": "incorrecta"}
    )
    assert res.status_code == 401
    assert res.get_json()["message"] == "Credenciales inválidas"


def test_login_unknown_email_returns_401(client):
    res = client.post(
        "/api/auth/login", json={"email": "nadie@edujuegos.com", "password": "secret123"}
    )
    assert res.status_code == 401


def test_login_missing_fields_returns_400(client):
    res = client.post("/api/auth/login", json={"email": "ana@edujuegos.com"})
    assert res.status_code == 400


def test_me_requires_bearer_token(client, user_id):
    assert client.get("/api/auth/me").status_code == 401
    assert (
        client.get("/api/auth/me", headers={"Authorization": "Bearer otro_token_1"}).status_code
        == 401
    )
    assert client.get("/api/auth/me", headers=auth_headers(9999)).status_code == 401

    res = client.get("/api/auth/me", headers=auth_headers(user_id))
    assert res.status_code == 200
    assert res.get_json()["email"] == "ana@edujuegos.com"


def test_each_request_resolves_its_own_token(client, app, user_id):
    other_id = make_user(app, "beto@edujuegos.com", name="Beto")
    first = client.get("/api/auth/me", headers=auth_headers(user_id)).get_json()
    second = client.get("/api/auth/me", headers=auth_headers(other_id)).get_json()
    assert first["id"] == user_id
    assert second["id"] == other_id


def test_logout_is_stateless(client):
    res = client.post("/api/auth/logout")
    assert res.status_code == 200
    assert "message" in res.get_json()


def test_update_profile(client, app, user_id, user_headers):
    res = client.put(
        "/api/auth/profile",
        headers=user_headers,
        json={"name": "Ana María", "email": "ana.maria@edujuegos.com", "phone": "1155550000"},
    )
    assert res.status_code == 200
    user = res.get_json()["user"]
    assert user["name"] == "Ana María"
    assert user["email"] == "ana.maria@edujuegos.com"
    assert user["phone"] == "1155550000"


def test_update_profile_rejects_email_of_other_user(client, app, user_headers):
    make_user(app, "beto@edujuegos.com", name="Beto")
    res = client.put(
        "/api/auth/profile",
        headers=user_headers,
        json={"name": "Ana", "email": "beto@edujuegos.com"},
    )
    assert res.status_code == 400


def test_update_profile_requires_auth(client):
    res = client.put("/api/auth/profile", json={"name": "Ana", "email": "ana@edujuegos.com"})
    assert res.status_code == 401


def test_change_password(client, app, user_id, user_headers):
    res = client.put(
        "/api/auth/change-password",
        headers=user_headers,
        json={"currentPassword": "secret123", "newPassword": "nueva123"},
    )
    assert res.status_code == 200

    with app.app_context():
        user = db.session.get(User, user_id)
        assert check_password_hash(user.password, "nueva123")

    login = client.post(
        "/api/auth/login", json={"email": "ana@edujuegos.com", "password": "nueva123"}
    )
    assert login.status_code == 200


def test_change_password_wrong_current_password(client, user_headers):
    res = client.put(
        "/api/auth/change-password",
        headers=user_headers,
        json={"currentPassword": "otra", "newPassword": "nueva123"},
    )
    assert res.status_code == 400
    assert res.get_json()["message"] == "Contraseña actual incorrecta"


def test_change_password_short_new_password(client, user_headers):
    res = client.put(
        "/api/auth/change-password",
        headers=user_headers,
        json={"currentPassword": "secret123", "newPassword": "123"},
    )
    assert res.status_code == 400
    assert "newPassword" in res.get_json()["errors"]


def test_malformed_token_ids_are_unauthorized(client, user_id):
    for raw_id in ("²", "99999999999999999999999", "12abc", ""):
        headers = {"Authorization": f"Bearer mock_token_{raw_id}"}
        res = client.get("/api/auth/me", headers=headers)
        assert res.status_code == 401, raw_id
