# service/admin_service.py
from database_init import db
from models.admin_config import AdminConfig

# clave JSON -> columna
CONFIG_FIELDS = {
    "businessName": "business_name",
    "businessAddress": "business_address",
    "businessPhone": "business_phone",
    "businessEmail": "business_email",
    "logoUrl": "logo_url",
    "smtpEmail": "smtp_email",
    "smtpPassword": "smtp_password",
    "smtpHost": "smtp_host",
    "smtpPort": "smtp_port",
    "mpAccessToken": "mp_access_token",
    "mpPublicKey": "mp_public_key",
}

# Secretos: si no vienen en el body se conserva el valor guardado
SECRET_FIELDS = {"smtpPassword", "mpAccessToken"}


def get_admin_config():
    return AdminConfig.query.order_by(AdminConfig.id).first()


def save_admin_config(values):
    """Upsert de la fila única. "" limpia el campo; una clave ausente no lo toca."""
    config = get_admin_config()
    if not config:
        config = AdminConfig()
        db.session.add(config)
    for key, attr in CONFIG_FIELDS.items():
        if key not in values:
            continue
        value = values[key]
        if value is not None and not isinstance(value, str):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
        if key in SECRET_FIELDS and value is None:
            continue
        setattr(config, attr, value or None)
    db.session.commit()
    return config
