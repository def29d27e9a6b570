import email
import smtplib

import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from database_init import db
from models.admin_config import AdminConfig
from models.product import Product
from models.user import User


class FakeSMTP:
    """Sustituto de smtplib.SMTP: guarda los mensajes en FakeSMTP.sent."""

    sent = []
    fail_with = None

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def ehlo(self):
        pass

    def starttls(self):
        pass

    def login(self, username, password):
        if FakeSMTP.fail_with:
            raise FakeSMTP.fail_with
        self.username = username

    def sendmail(self, from_addr, to_addrs, message):
        FakeSMTP.sent.append(
            {"host": self.host, "from": from_addr, "to": to_addrs, "message": message}
        )


@pytest.fixture(scope="session")
def log_dir(tmp_path_factory):
    return str(tmp_path_factory.mktemp("logs"))


@pytest.fixture
def app(log_dir):
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "LOG_DIR": log_dir,
            "MAIL_QUEUE_ENABLED": False,
            "FRONTEND_URL": "http://tienda.local",
            "SMTP_EMAIL": None,
            "SMTP_PASSWORD": None,
            "ADMIN_EMAIL": "admin@edujuegos.com",
            "MERCADOPAGO_API_URL": "https://mp.local",
        }
    )
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def smtp(monkeypatch):
    FakeSMTP.sent = []
    FakeSMTP.fail_with = None
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def make_user(app, email, password="secret123", role="user", name="Ana Pérez"):
    with app.app_context():
        user = User(
            name=name,
            email=email,
            password=generate_password_hash(password),
            role=role,
        )
        db.session.add(user)
        db.session.commit()
        return user.id


def make_product(app, **overrides):
    values = {
        "name": "Kit Psicopedagógico Completo",
        "description": "Kit de evaluación",
        "price": 18500,
        "image_url": "https://img.local/kit.jpg",
        "category": "Kits",
        "age_range": "6-18",
        "type": "physical",
        "stock": 10,
    }
    values.update(overrides)
    with app.app_context():
        product = Product(**values)
        db.session.add(product)
        db.session.commit()
        return product.id


def configure_smtp(app, **overrides):
    values = {"smtp_email": "tienda@gmail.com", "smtp_password": "app-password"}
    values.update(overrides)
    with app.app_context():
        config = AdminConfig(**values)
        db.session.add(config)
        db.session.commit()
        return config.id


def auth_headers(user_id):
    return {"Authorization": f"Bearer mock_token_{user_id}"}


@pytest.fixture
def user_id(app):
    return make_user(app, "ana@edujuegos.com")


@pytest.fixture
def admin_id(app):
    return make_user(app, "admin@edujuegos.com", password="admin123", role="admin", name="Admin")


@pytest.fixture
def user_headers(user_id):
    return auth_headers(user_id)


@pytest.fixture
def admin_headers(admin_id):
    return auth_headers(admin_id)


def message_text(sent):
    """Texto plano decodificado de un mensaje capturado por FakeSMTP."""
    message = email.message_from_string(sent["message"])
    for part in message.walk():
        if part.get_content_type() == "text/plain":
            return part.get_payload(decode=True).decode("utf-8")
    return ""
