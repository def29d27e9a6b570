import os
from models.admin_config import AdminConfig
from database_init import db


def seed_admin_config(app):
    """Crea la fila única de configuración si no existe (SMTP desde .env si está)."""
    with app.app_context():
        if AdminConfig.query.first():
            print("⚠️ La configuración de admin ya existe.")
            return
        config = AdminConfig(
            business_name=os.getenv("APP_NAME", "EduJuegos"),
            business_email=os.getenv("ADMIN_EMAIL"),
            smtp_email=os.getenv("SMTP_EMAIL"),
            smtp_password=os.getenv("SMTP_PASSWORD"),
        )
        db.session.add(config)
        db.session.commit()
        print("✅ Configuración de admin creada")
