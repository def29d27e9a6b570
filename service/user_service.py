# service/user_service.py
import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func
from werkzeug.security import generate_password_hash, check_password_hash

from database_init import db
from models.user import User
from models.order import Order
from models.product import Product
from models.user_favorite import UserFavorite
from models.user_stats import UserStats
from models.user_notification_preferences import UserNotificationPreferences
from util.constant import USER_ROLE, ORDER_STATUS, LOYALTY_POINTS_PER_ORDER
from util.errors import ServiceError
from util.until import to_money

logger = logging.getLogger(__name__)

PREFERENCE_FIELDS = {
    "emailNotifications": "email_notifications",
    "orderUpdates": "order_updates",
    "promotionalEmails": "promotional_emails",
    "smsNotifications": "sms_notifications",
    "pushNotifications": "push_notifications",
}


def normalize_email(email):
    return (email or "").strip().lower()


def get_user_by_email(email):
    return User.query.filter_by(email=normalize_email(email)).first()


def register_user(name, email, password, role=USER_ROLE.user.value):
    if get_user_by_email(email):
        raise ServiceError("El usuario ya existe", 400)
    user = User(
        name=name.strip(),
        email=normalize_email(email),
        password=generate_password_hash(password),
        role=role,
    )
    db.session.add(user)
    db.session.commit()
    logger.info("Usuario registrado: %s", user.email)
    return user


def authenticate(email, password):
    user = get_user_by_email(email)
    if not user:
        logger.info("Login fallido: usuario no encontrado (%s)", email)
        return None
    if not check_password_hash(user.password, password):
        logger.info("Login fallido: contraseña incorrecta (%s)", email)
        return None
    logger.info("Login correcto: %s", user.email)
    return user


def update_profile(user, name, email, **extra):
    email = normalize_email(email)
    other = User.query.filter(User.email == email, User.id != user.id).first()
    if other:
        raise ServiceError("El email ya está en uso", 400)
    user.name = name.strip()
    user.email = email
    for field in ("phone", "address", "avatar"):
        if field in extra:
            setattr(user, field, extra[field] or None)
    db.session.commit()
    return user


def set_password(user, new_password):
    user.password = generate_password_hash(new_password)


def change_password(user, current_password, new_password):
    if not check_password_hash(user.password, current_password):
        raise ServiceError("Contraseña actual incorrecta", 400)
    set_password(user, new_password)
    db.session.commit()
    logger.info("Contraseña actualizada para %s", user.email)


# --- Favoritos ---

def get_favorites(user_id):
    return (
        UserFavorite.query.filter_by(user_id=user_id)
        .order_by(UserFavorite.created_at.desc(), UserFavorite.id.desc())
        .all()
    )


def is_favorite(user_id, product_id):
    return (
        UserFavorite.query.filter_by(user_id=user_id, product_id=product_id).first()
        is not None
    )


def add_favorite(user_id, product_id):
    """Devuelve (favorito, creado). Agregar dos veces no duplica."""
    if db.session.get(Product, product_id) is None:
        raise ServiceError("Producto no encontrado", 404)
    favorite = UserFavorite.query.filter_by(user_id=user_id, product_id=product_id).first()
    if favorite:
        return favorite, False
    favorite = UserFavorite(user_id=user_id, product_id=product_id)
    db.session.add(favorite)
    db.session.flush()
    refresh_user_stats(user_id)
    db.session.commit()
    return favorite, True


def remove_favorite(user_id, product_id):
    UserFavorite.query.filter_by(user_id=user_id, product_id=product_id).delete()
    db.session.flush()
    refresh_user_stats(user_id)
    db.session.commit()


# --- Estadísticas ---

def refresh_user_stats(user_id):
    """Recalcula user_stats. No hace commit: el llamador decide la transacción."""
    counted = Order.query.filter(
        Order.user_id == user_id, Order.status != ORDER_STATUS.cancelled.value
    )
    total_orders, total_spent, last_order_date = counted.with_entities(
        func.count(Order.id), func.coalesce(func.sum(Order.total), 0), func.max(Order.created_at)
    ).one()
    favorite_products = UserFavorite.query.filter_by(user_id=user_id).count()

    total_spent = to_money(total_spent)
    average = to_money(total_spent / total_orders) if total_orders else Decimal("0.00")

    stats = UserStats.query.filter_by(user_id=user_id).first()
    if not stats:
        stats = UserStats(user_id=user_id)
        db.session.add(stats)
    stats.total_orders = total_orders
    stats.total_spent = total_spent
    stats.favorite_products = favorite_products
    stats.last_order_date = last_order_date
    stats.average_order_value = average
    stats.loyalty_points = total_orders * LOYALTY_POINTS_PER_ORDER
    stats.updated_at = datetime.utcnow()
    return stats


def get_user_stats(user_id):
    stats = refresh_user_stats(user_id)
    db.session.commit()
    return stats


# --- Preferencias de notificación ---

def get_notification_preferences(user_id, commit=True):
    prefs = UserNotificationPreferences.query.filter_by(user_id=user_id).first()
    if not prefs:
        prefs = UserNotificationPreferences(user_id=user_id)
        db.session.add(prefs)
        if commit:
            db.session.commit()
        else:
            db.session.flush()
    return prefs


def update_notification_preferences(user_id, values):
    """values: dict con claves camelCase (solo las enviadas)."""
    prefs = get_notification_preferences(user_id, commit=False)
    for key, attr in PREFERENCE_FIELDS.items():
        if key in values:
            setattr(prefs, attr, bool(values[key]))
    db.session.commit()
    return prefs
