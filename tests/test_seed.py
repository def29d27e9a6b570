import json
import os

from werkzeug.security import check_password_hash

from models.admin_config import AdminConfig
from models.product import Product
from models.user import User
from seeder.seed import run_seed

DATA_FILE = os.path.join(os.path.dirname(__file__), "..", "seeder", "data", "product.json")


def test_seed_is_idempotent(app, monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "Admin@EduJuegos.com")
    monkeypatch.setenv("ADMIN_PASSWORD", "admin123")
    monkeypatch.delenv("SMTP_EMAIL", raising=False)
    monkeypatch.delenv("SMTP_PASSWORD", raising=False)
    with open(DATA_FILE, encoding="utf-8") as f:
        expected = len(json.load(f))

    run_seed(app)
    run_seed(app)

    with app.app_context():
        admins = User.query.filter_by(email="admin@edujuegos.com").all()
        assert len(admins) == 1
        assert admins[0].is_admin
        assert check_password_hash(admins[0].password, "admin123")
        assert Product.query.count() == expected
        assert Product.query.filter_by(type="digital").filter(Product.stock.isnot(None)).count() == 0
        assert AdminConfig.query.count() == 1


def test_seed_without_admin_credentials(app, monkeypatch):
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    run_seed(app)
    with app.app_context():
        assert User.query.count() == 0
        assert Product.query.count() > 0
