import logging

from flask import current_app, render_template
from redis.exceptions import RedisError

from database_init import db
from models.order import Order
from models.order_tracking import OrderTracking
from queue_config import queue
from service.mail_service import send_mail, MailNotConfigured, MailDeliveryError
from service.user_service import get_notification_preferences
from util.constant import ORDER_STATUS

logger = logging.getLogger("mail")


def send_order_status_email(order_id, tracking_id=None):
    """Job RQ: avisa al cliente el nuevo estado de su orden."""
    order = db.session.get(Order, order_id)
    if not order:
        return False

    prefs = get_notification_preferences(order.user_id)
    if not (prefs.email_notifications and prefs.order_updates):
        logger.info("Orden #%s: el usuario desactivó los avisos por email", order_id)
        return False

    entry = db.session.get(OrderTracking, tracking_id) if tracking_id else None
    context = {
        "order": order,
        "entry": entry,
        "status_label": ORDER_STATUS(order.status).label,
        "app_name": current_app.config["MAIL_FROM_NAME"],
    }
    try:
        send_mail(
            order.user.email,
            f"Tu pedido #{order.id}: {context['status_label']}",
            render_template("email/order_status.html", **context),
            render_template("email/order_status.txt", **context),
        )
    except MailNotConfigured:
        logger.warning("SMTP no configurado, no se avisa la orden #%s", order_id)
        return False
    return True


def enqueue_order_status_email(order_id, tracking_id=None):
    if not current_app.config["MAIL_QUEUE_ENABLED"]:
        try:
            return send_order_status_email(order_id, tracking_id)
        except MailDeliveryError:
            # Ya quedó registrado en el logger "mail"; el cambio de estado sigue válido
            return False
    try:
        queue.enqueue(send_order_status_email, order_id, tracking_id)
    except RedisError as exc:
        logger.error("No se pudo encolar el aviso de la orden #%s: %s", order_id, exc)
        return False
    return True
