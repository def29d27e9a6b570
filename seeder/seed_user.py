# seeder/seed_user.py
import os
from werkzeug.security import generate_password_hash
from dotenv import load_dotenv

from models.user import User
from database_init import db
from util.constant import USER_ROLE

load_dotenv()


def seed_admin_user(app):
    with app.app_context():
        email = (os.getenv("ADMIN_EMAIL") or "").strip().lower()
        raw_password = os.getenv("ADMIN_PASSWORD")
        name = os.getenv("ADMIN_NAME", "Administrador")

        if not email or not raw_password:
            print("❌ Falta ADMIN_EMAIL o ADMIN_PASSWORD en .env")
            return

        if not User.query.filter_by(email=email).first():
            user = User(
                name=name,
                email=email,
                password=generate_password_hash(raw_password),
                role=USER_ROLE.admin.value,
            )
            db.session.add(user)
            db.session.commit()
            print(f"✅ Usuario admin creado: {email}")
        else:
            print("⚠️ El usuario admin ya existe, se omite.")
