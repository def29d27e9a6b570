# service/payment_service.py
import logging

import requests
from flask import current_app

from database_init import db
from service.admin_service import get_admin_config
from util.errors import ServiceError

logger = logging.getLogger(__name__)


def get_public_config():
    config = get_admin_config()
    return {
        "publicKey": config.mp_public_key if config else None,
        "configured": bool(config and config.mercadopago_configured),
    }


def _preference_payload(order):
    frontend = current_app.config["FRONTEND_URL"].rstrip("/")
    return {
        "items": [
            {
                "id": str(item.product_id),
                "title": item.product.name if item.product else f"Producto {item.product_id}",
                "quantity": item.quantity,
                "unit_price": float(item.price),
                "currency_id": current_app.config["MERCADOPAGO_CURRENCY"],
            }
            for item in order.items
        ],
        "payer": {"name": order.customer_name, "email": order.customer_email},
        "external_reference": str(order.id),
        "back_urls": {
            "success": f"{frontend}/checkout/success?order={order.id}",
            "failure": f"{frontend}/checkout/failure?order={order.id}",
            "pending": f"{frontend}/checkout/pending?order={order.id}",
        },
        "auto_return": "approved",
    }


def create_payment_preference(order):
    """Crea una preferencia de Checkout Pro y la asocia a la orden."""
    config = get_admin_config()
    if not config or not config.mp_access_token:
        raise ServiceError("MercadoPago no configurado", 400)

    url = f"{current_app.config['MERCADOPAGO_API_URL'].rstrip('/')}/checkout/preferences"
    try:
        res = requests.post(
            url,
            json=_preference_payload(order),
            headers={"Authorization": f"Bearer {config.mp_access_token}"},
            timeout=current_app.config.get("MERCADOPAGO_TIMEOUT", 15),
        )
    except requests.RequestException as exc:
        logger.error("Mercado Pago no responde (orden #%s): %s", order.id, exc)
        raise ServiceError("Error al crear pago", 502) from exc

    if not res.ok:
        logger.error(
            "Mercado Pago rechazó la preferencia de la orden #%s: %s %s",
            order.id,
            res.status_code,
            res.text,
        )
        raise ServiceError("Error al crear pago", 502)

    data = res.json()
    order.payment_id = data.get("id")
    db.session.commit()
    logger.info("Preferencia %s creada para la orden #%s", order.payment_id, order.id)
    return {
        "id": data.get("id"),
        "init_point": data.get("init_point"),
        "sandbox_init_point": data.get("sandbox_init_point"),
    }
