from flask import Blueprint, jsonify, request, abort
from flask_login import login_required, current_user

from Form.order_form import OrderForm, OrderStatusForm, TrackingForm
from service import order_service
from util.auth import admin_required, can_access
from util.errors import validation_error
from util.serializers import order_to_dict, tracking_to_dict
from util.tasks import enqueue_order_status_email
from util.until import parse_date

orders_bp = Blueprint("orders", __name__, url_prefix="/api/orders")


def _get_order_or_404(order_id):
    order = order_service.get_order(order_id)
    if not order:
        abort(404, description="Orden no encontrada")
    return order


def _get_own_order(order_id):
    order = _get_order_or_404(order_id)
    if not can_access(order.user_id):
        abort(403)
    return order


@orders_bp.route("", methods=["GET"])
@login_required
def list_orders():
    orders = order_service.list_orders(current_user)
    return jsonify([order_to_dict(o) for o in orders])


@orders_bp.route("", methods=["POST"])
@login_required
def create_order():
    payload = request.get_json(silent=True) or {}
    form = OrderForm(payload)
    if not form.validate():
        return validation_error(form.errors, "Datos de orden inválidos")

    order = order_service.create_order(current_user, form.data, payload.get("items"))
    return jsonify(order_to_dict(order)), 201


@orders_bp.route("/<int:order_id>", methods=["GET"])
@login_required
def order_detail(order_id):
    return jsonify(order_to_dict(_get_own_order(order_id), with_tracking=True))


@orders_bp.route("/<int:order_id>/status", methods=["PUT"])
@admin_required
def update_order_status(order_id):
    order = _get_order_or_404(order_id)
    form = OrderStatusForm()
    if not form.validate():
        return validation_error(form.errors, "Datos de estado inválidos")

    entry = order_service.update_order_status(
        order,
        form.status.data,
        tracking_number=form.trackingNumber.data or None,
        description=form.description.data or None,
        location=form.location.data or None,
    )
    enqueue_order_status_email(order.id, entry.id)
    return jsonify(order_to_dict(order, with_tracking=True))


@orders_bp.route("/<int:order_id>/tracking", methods=["GET"])
@login_required
def order_tracking(order_id):
    order = _get_own_order(order_id)
    return jsonify([tracking_to_dict(t) for t in order.tracking])


@orders_bp.route("/<int:order_id>/tracking", methods=["POST"])
@admin_required
def add_order_tracking(order_id):
    order = _get_order_or_404(order_id)
    form = TrackingForm()
    if not form.validate():
        return validation_error(form.errors, "Datos de seguimiento inválidos")

    estimated = None
    if form.estimatedDelivery.data:
        estimated = parse_date(form.estimatedDelivery.data)
        if estimated is None:
            return validation_error({"estimatedDelivery": ["Fecha inválida"]})

    entry = order_service.add_tracking(
        order,
        form.status.data,
        description=form.description.data or None,
        location=form.location.data or None,
        estimated_delivery=estimated,
    )
    return jsonify(tracking_to_dict(entry)), 201
