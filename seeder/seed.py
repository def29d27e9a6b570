# seed.py
from app import create_app
from database_init import db
from seeder.seed_user import seed_admin_user
from seeder.seed_product import seed_product
from seeder.seed_admin_config import seed_admin_config


def run_seed(app):
    with app.app_context():
        db.create_all()
    seed_admin_user(app)
    seed_product(app)
    seed_admin_config(app)


if __name__ == "__main__":
    run_seed(create_app())
