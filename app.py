from flask import Flask, jsonify
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_cors import CORS
from database_init import db
from dotenv import load_dotenv
import os
from log import setup_logging

from util.auth import load_user_from_request
from util.errors import register_error_handlers
from util.until import format_datetime
from models.user import User
from models.product import Product
from models.order import Order
from models.order_item import OrderItem
from models.order_tracking import OrderTracking
from models.support_ticket import SupportTicket
from models.support_ticket_reply import SupportTicketReply
from models.user_favorite import UserFavorite
from models.user_stats import UserStats
from models.user_notification_preferences import UserNotificationPreferences
from models.password_recovery_token import PasswordRecoveryToken
from models.admin_config import AdminConfig

load_dotenv()
migrate = Migrate()
login_manager = LoginManager()


def _database_uri():
    url = os.getenv("DATABASE_URL")
    if url:
        # Heroku/Neon usan "postgres://", SQLAlchemy exige "postgresql://"
        return url.replace("postgres://", "postgresql://", 1)
    return (
        f"postgresql+psycopg2://{os.getenv('USER_DB')}:{os.getenv('PASSWORD_DB')}"
        f"@{os.getenv('ADDRESS_DB', 'localhost')}/{os.getenv('NAME_DB', 'edujuegos')}"
    )


def create_app(test_config=None):
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": os.getenv("CORS_ORIGINS", "*")}})

    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev-secret-key")
    app.config["SQLALCHEMY_DATABASE_URI"] = _database_uri()
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {"pool_pre_ping": True}
    app.json.sort_keys = False

    app.config["FRONTEND_URL"] = os.getenv("FRONTEND_URL", "http://localhost:5000")
    app.config["PASSWORD_RECOVERY_TTL_MINUTES"] = int(
        os.getenv("PASSWORD_RECOVERY_TTL_MINUTES", "60")
    )
    app.config["MAIL_FROM_NAME"] = os.getenv("APP_NAME", "EduJuegos")
    app.config["SMTP_EMAIL"] = os.getenv("SMTP_EMAIL")
    app.config["SMTP_PASSWORD"] = os.getenv("SMTP_PASSWORD")
    app.config["SMTP_HOST"] = os.getenv("SMTP_HOST", "smtp.gmail.com")
    app.config["SMTP_PORT"] = os.getenv("SMTP_PORT", "587")
    app.config["MAIL_QUEUE_ENABLED"] = os.getenv("MAIL_QUEUE_ENABLED", "true").lower() == "true"
    app.config["MERCADOPAGO_API_URL"] = os.getenv(
        "MERCADOPAGO_API_URL", "https://api.mercadopago.com"
    )
    app.config["MERCADOPAGO_CURRENCY"] = os.getenv("MERCADOPAGO_CURRENCY", "ARS")
    app.config["ADMIN_EMAIL"] = os.getenv("ADMIN_EMAIL", "admin@edujuegos.com")

    if test_config:
        app.config.update(test_config)

    # Logging (consola + archivo rotativo)
    setup_logging(app.config.get("LOG_DIR"))
    app.jinja_env.filters["datetimeformat"] = format_datetime

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    # Token bearer en cada request (no hay sesión de cookies)
    login_manager.request_loader(load_user_from_request)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"message": "No autorizado"}), 401

    register_error_handlers(app)

    from routes.auth import auth_bp
    from routes.products import products_bp
    from routes.orders import orders_bp
    from routes.admin import admin_bp
    from routes.support import support_bp
    from routes.user import user_bp
    from routes.mercadopago import mercadopago_bp
    from routes.health import health_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(support_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(mercadopago_bp)
    app.register_blueprint(health_bp)

    return app


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=True)
