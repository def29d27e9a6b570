# service/mail_service.py
import logging
import smtplib
import uuid
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, formatdate

from flask import current_app

from models.admin_config import AdminConfig

logger = logging.getLogger("mail")

DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 587


class MailNotConfigured(Exception):
    pass


class MailDeliveryError(Exception):
    pass


def get_smtp_settings():
    """Credenciales SMTP: primero la configuración de admin, si no la del entorno."""
    config = AdminConfig.query.first()
    if config and config.smtp_configured:
        return {
            "username": config.smtp_email,
            "password": config.smtp_password,
            "host": config.smtp_host or DEFAULT_SMTP_HOST,
            "port": int(config.smtp_port or DEFAULT_SMTP_PORT),
            "from_name": config.business_name or current_app.config["MAIL_FROM_NAME"],
        }

    username = current_app.config.get("SMTP_EMAIL")
    password = current_app.config.get("SMTP_PASSWORD")
    if not username or not password:
        return None
    return {
        "username": username,
        "password": password,
        "host": current_app.config.get("SMTP_HOST") or DEFAULT_SMTP_HOST,
        "port": int(current_app.config.get("SMTP_PORT") or DEFAULT_SMTP_PORT),
        "from_name": current_app.config["MAIL_FROM_NAME"],
    }


def build_message(settings, to_address, subject, html_body, text_body):
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = formataddr((settings["from_name"], settings["username"]))
    msg["To"] = to_address
    msg["Date"] = formatdate(localtime=True)
    domain = settings["username"].split("@")[-1]
    msg["Message-ID"] = f"<{uuid.uuid4()}@{domain}>"
    # text/plain primero: los clientes muestran la última parte que soportan
    msg.attach(MIMEText(text_body, "plain", "utf-8"))
    msg.attach(MIMEText(html_body, "html", "utf-8"))
    return msg


def send_mail(to_address, subject, html_body, text_body, settings=None):
    settings = settings or get_smtp_settings()
    if not settings:
        raise MailNotConfigured("SMTP no configurado")

    msg = build_message(settings, to_address, subject, html_body, text_body)
    timeout = current_app.config.get("SMTP_TIMEOUT", 20)
    try:
        with smtplib.SMTP(settings["host"], settings["port"], timeout=timeout) as smtp:
            smtp.ehlo()
            if settings["port"] != 25:
                smtp.starttls()
                smtp.ehlo()
            smtp.login(settings["username"], settings["password"])
            smtp.sendmail(settings["username"], [to_address], msg.as_string())
    except (smtplib.SMTPException, OSError) as exc:
        logger.error(
            "Error enviando email a %s via %s:%s (%s): %s",
            to_address,
            settings["host"],
            settings["port"],
            settings["username"],
            exc,
        )
        raise MailDeliveryError(str(exc)) from exc

    logger.info("Email '%s' enviado a %s", subject, to_address)
    return msg["Message-ID"]
