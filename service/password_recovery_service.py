# service/password_recovery_service.py
import logging
from datetime import datetime, timedelta

from flask import current_app, render_template

from database_init import db
from models.password_recovery_token import PasswordRecoveryToken
from models.user import User
from service.mail_service import send_mail
from service.user_service import set_password
from util.until import generate_recovery_token

logger = logging.getLogger("mail")


def create_recovery_token(user):
    """Crea un token nuevo e invalida los anteriores del usuario."""
    PasswordRecoveryToken.query.filter_by(user_id=user.id).delete()
    ttl = current_app.config["PASSWORD_RECOVERY_TTL_MINUTES"]
    record = PasswordRecoveryToken(
        user_id=user.id,
        token=generate_recovery_token(),
        expires_at=datetime.utcnow() + timedelta(minutes=ttl),
    )
    db.session.add(record)
    db.session.commit()
    return record


def build_recovery_link(token):
    base = current_app.config["FRONTEND_URL"].rstrip("/")
    return f"{base}/password-recovery?token={token}"


def send_recovery_email(user, token):
    """Envía el link por SMTP. Propaga MailNotConfigured / MailDeliveryError."""
    recovery_link = build_recovery_link(token)
    context = {
        "user": user,
        "recovery_link": recovery_link,
        "ttl_minutes": current_app.config["PASSWORD_RECOVERY_TTL_MINUTES"],
        "app_name": current_app.config["MAIL_FROM_NAME"],
    }
    subject = f"Recuperación de Contraseña - {context['app_name']}"
    try:
        send_mail(
            user.email,
            subject,
            render_template("email/password_recovery.html", **context),
            render_template("email/password_recovery.txt", **context),
        )
    except Exception:
        # El link queda en el log para soporte manual
        logger.warning("Link de recuperación para %s: %s", user.email, recovery_link)
        raise


def find_valid_token(token):
    """Devuelve el registro si existe, no fue usado y no expiró. Borra los expirados."""
    if not token:
        return None
    record = PasswordRecoveryToken.query.filter_by(token=token).first()
    if not record or record.used:
        return None
    if record.is_expired:
        db.session.delete(record)
        db.session.commit()
        return None
    return record


def reset_password(token, new_password):
    record = find_valid_token(token)
    if not record:
        return None
    user = db.session.get(User, record.user_id)
    if not user:
        return None
    set_password(user, new_password)
    db.session.delete(record)
    db.session.commit()
    logger.info("Contraseña restablecida para %s", user.email)
    return user
