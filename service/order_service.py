# service/order_service.py
import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload, joinedload

from database_init import db
from models.order import Order
from models.order_item import OrderItem
from models.order_tracking import OrderTracking
from models.product import Product
from service.user_service import refresh_user_stats
from util.constant import ORDER_STATUS, MAX_DB_INT, MAX_PRICE
from util.errors import ServiceError
from util.until import to_money

logger = logging.getLogger(__name__)


def _order_query():
    return Order.query.options(
        selectinload(Order.items).joinedload(OrderItem.product),
        selectinload(Order.tracking),
    )


def list_orders(user):
    """Admin ve todas las órdenes; un usuario solo las suyas."""
    query = _order_query()
    if not user.is_admin:
        query = query.filter(Order.user_id == user.id)
    return query.order_by(Order.created_at.desc(), Order.id.desc()).all()


def get_order(order_id):
    return _order_query().filter(Order.id == order_id).first()


def _parse_positive_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return None
        try:
            value = int(value)
        except ValueError:
            return None
    if not isinstance(value, int) or value < 1 or value > MAX_DB_INT:
        return None
    return value


def _collect_lines(items):
    """Valida los items y agrupa cantidades por producto, manteniendo el orden."""
    if not isinstance(items, list) or not items:
        raise ServiceError("La orden debe tener al menos un producto", 400)

    quantities = {}
    for raw in items:
        if not isinstance(raw, dict):
            raise ServiceError("Item de orden inválido", 400)
        product_id = _parse_positive_int(raw.get("productId"))
        quantity = _parse_positive_int(raw.get("quantity", 1))
        if product_id is None:
            raise ServiceError("Producto inválido en la orden", 400)
        if quantity is None:
            raise ServiceError("Cantidad inválida en la orden", 400)
        quantities[product_id] = quantities.get(product_id, 0) + quantity
        if quantities[product_id] > MAX_DB_INT:
            raise ServiceError("Cantidad inválida en la orden", 400)

    lines = []
    for product_id, quantity in quantities.items():
        # FOR UPDATE en Postgres: bloquea la fila hasta el commit
        product = (
            Product.query.filter(Product.id == product_id).with_for_update().first()
        )
        if not product:
            raise ServiceError(f"Producto no encontrado: {product_id}", 404)
        if not product.is_active:
            raise ServiceError(f"Producto no disponible: {product.name}", 400)
        if product.is_physical and product.stock is not None and product.stock < quantity:
            raise ServiceError(f"Stock insuficiente para {product.name}", 400)
        lines.append((product, quantity))
    return lines


def create_order(user, data, items):
    """Crea orden + items + descuento de stock + tracking inicial en una sola transacción."""
    try:
        lines = _collect_lines(items)
        total = sum(
            (to_money(product.price) * quantity for product, quantity in lines),
            Decimal("0.00"),
        )
        if total > Decimal(MAX_PRICE):
            raise ServiceError("El total de la orden supera el máximo permitido", 400)
        order = Order(
            user_id=user.id,
            customer_name=data["customerName"],
            customer_email=data["customerEmail"],
            customer_phone=data["customerPhone"],
            customer_address=data["customerAddress"],
            payment_method=data["paymentMethod"],
            total=to_money(total),
            status=ORDER_STATUS.pending.value,
        )
        db.session.add(order)

        for product, quantity in lines:
            order.items.append(
                OrderItem(product=product, quantity=quantity, price=to_money(product.price))
            )
            if product.is_physical and product.stock is not None:
                product.stock = product.stock - quantity

        order.tracking.append(
            OrderTracking(status=ORDER_STATUS.processing.value, description="Pedido recibido")
        )
        db.session.flush()
        refresh_user_stats(user.id)
        db.session.commit()
    except ServiceError:
        db.session.rollback()
        raise
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error creando la orden del usuario %s", user.id)
        raise

    logger.info("Orden #%s creada por %s (total %s)", order.id, user.email, order.total)
    return order


def add_tracking(order, status, description=None, location=None, estimated_delivery=None):
    entry = OrderTracking(
        status=status,
        description=description,
        location=location,
        estimated_delivery=estimated_delivery,
    )
    order.tracking.append(entry)
    db.session.commit()
    return entry


def update_order_status(order, status, tracking_number=None, description=None, location=None):
    previous = order.status
    order.status = status
    if tracking_number:
        order.tracking_number = tracking_number
    entry = OrderTracking(
        status=status,
        description=description or ORDER_STATUS(status).label,
        location=location,
    )
    order.tracking.append(entry)
    db.session.flush()
    if (previous == ORDER_STATUS.cancelled.value) != (status == ORDER_STATUS.cancelled.value):
        refresh_user_stats(order.user_id)
    db.session.commit()
    logger.info("Orden #%s: %s -> %s", order.id, previous, status)
    return entry
