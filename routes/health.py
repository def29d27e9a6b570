import logging
from datetime import datetime

from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError

from database_init import db
from models.product import Product
from service.user_service import get_user_by_email

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/api")


@health_bp.route("/health")
def health():
    timestamp = datetime.utcnow().isoformat() + "Z"
    try:
        products_count = Product.query.filter(Product.is_active.is_(True)).count()
        admin_exists = get_user_by_email(current_app.config["ADMIN_EMAIL"]) is not None
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("Health check: base de datos no disponible: %s", exc)
        return (
            jsonify(
                {
                    "status": "unhealthy",
                    "database": "disconnected",
                    "error": str(exc),
                    "timestamp": timestamp,
                }
            ),
            500,
        )
    return jsonify(
        {
            "status": "healthy",
            "database": "connected",
            "products_count": products_count,
            "admin_exists": admin_exists,
            "timestamp": timestamp,
        }
    )
