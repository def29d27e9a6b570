import logging
from logging.handlers import RotatingFileHandler
import os


def setup_logging(log_dir=None):
    # Directorio de logs (ruta absoluta, configurable con LOG_DIR)
    log_dir = log_dir or os.getenv(
        "LOG_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")
    )
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "app.log")

    log_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # --- Logger raíz ---
    app_logger = logging.getLogger()
    app_logger.setLevel(logging.INFO)

    # Consola (sin duplicar handlers)
    if not any(type(h) is logging.StreamHandler for h in app_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(log_formatter)
        app_logger.addHandler(console_handler)

    if not any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == log_file
        for h in app_logger.handlers
    ):
        file_handler_main = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler_main.setFormatter(log_formatter)
        app_logger.addHandler(file_handler_main)

    # --- Logger de correo: SMTP y jobs de RQ ---
    mail_logger = logging.getLogger("mail")
    mail_logger.setLevel(logging.INFO)

    # Werkzeug solo advertencias, evita el log por request
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
