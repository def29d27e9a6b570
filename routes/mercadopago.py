from flask import Blueprint, jsonify, abort
from flask_login import login_required

from database_init import db
from Form.order_form import PaymentForm
from models.order import Order
from service import payment_service
from util.auth import can_access
from util.errors import validation_error

mercadopago_bp = Blueprint("mercadopago", __name__, url_prefix="/api/mercadopago")


@mercadopago_bp.route("/config")
def config():
    """Solo la public key; el access token nunca sale del servidor."""
    return jsonify(payment_service.get_public_config())


@mercadopago_bp.route("/create-payment", methods=["POST"])
@login_required
def create_payment():
    form = PaymentForm()
    if not form.validate():
        return validation_error(form.errors, "Error al crear pago")

    order = db.session.get(Order, form.orderId.data)
    if not order:
        abort(404, description="Orden no encontrada")
    if not can_access(order.user_id):
        abort(403)
    return jsonify(payment_service.create_payment_preference(order))
