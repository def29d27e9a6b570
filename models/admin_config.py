from datetime import datetime
from database_init import db


# Configuración única del negocio (una sola fila)
class AdminConfig(db.Model):
    __tablename__ = "admin_config"
    id = db.Column(db.Integer, primary_key=True)
    business_name = db.Column(db.String(255), nullable=True)
    business_address = db.Column(db.Text, nullable=True)
    business_phone = db.Column(db.String(50), nullable=True)
    business_email = db.Column(db.String(255), nullable=True)
    logo_url = db.Column(db.String(500), nullable=True)
    smtp_email = db.Column(db.String(255), nullable=True)  # cuenta Gmail
    smtp_password = db.Column(db.String(255), nullable=True)  # contraseña de aplicación
    smtp_host = db.Column(db.String(255), nullable=True, default="smtp.gmail.com")
    smtp_port = db.Column(db.String(10), nullable=True, default="587")
    mp_access_token = db.Column(db.String(255), nullable=True)
    mp_public_key = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    @property
    def smtp_configured(self):
        return bool(self.smtp_email and self.smtp_password)

    @property
    def mercadopago_configured(self):
        return bool(self.mp_access_token and self.mp_public_key)

    def __repr__(self):
        return f"<AdminConfig {self.id} - {self.business_name}>"
