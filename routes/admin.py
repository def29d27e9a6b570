from flask import Blueprint, jsonify, request

from Form.admin_form import AdminConfigForm
from models.user import User
from service.admin_service import get_admin_config, save_admin_config, CONFIG_FIELDS
from util.auth import admin_required
from util.errors import validation_error
from util.serializers import user_to_dict, admin_config_to_dict

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")


# Listado de clientes
@admin_bp.route("/clients")
@admin_required
def list_clients():
    users = User.query.order_by(User.created_at.desc(), User.id.desc()).all()
    return jsonify([user_to_dict(u) for u in users])


@admin_bp.route("/config", methods=["GET"])
@admin_required
def get_config():
    config = get_admin_config()
    return jsonify(admin_config_to_dict(config) if config else {})


@admin_bp.route("/config", methods=["POST"])
@admin_required
def save_config():
    payload = request.get_json(silent=True) or {}
    form = AdminConfigForm(payload)
    if not form.validate():
        return validation_error(form.errors, "Datos de configuración inválidos")

    values = {k: v for k, v in payload.items() if k in CONFIG_FIELDS}
    config = save_admin_config(values)
    return jsonify(admin_config_to_dict(config)), 201
