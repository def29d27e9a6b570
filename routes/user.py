from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from Form.forms import NotificationPreferencesForm
from service import user_service
from util.errors import validation_error
from util.serializers import favorite_to_dict, stats_to_dict, preferences_to_dict

user_bp = Blueprint("user", __name__, url_prefix="/api/user")


@user_bp.route("/favorites", methods=["GET"])
@login_required
def list_favorites():
    favorites = user_service.get_favorites(current_user.id)
    return jsonify([favorite_to_dict(f) for f in favorites])


@user_bp.route("/favorites/<int:product_id>", methods=["GET"])
@login_required
def check_favorite(product_id):
    return jsonify({"isFavorite": user_service.is_favorite(current_user.id, product_id)})


@user_bp.route("/favorites/<int:product_id>", methods=["POST"])
@login_required
def add_favorite(product_id):
    favorite, created = user_service.add_favorite(current_user.id, product_id)
    return jsonify(favorite_to_dict(favorite)), 201 if created else 200


@user_bp.route("/favorites/<int:product_id>", methods=["DELETE"])
@login_required
def remove_favorite(product_id):
    user_service.remove_favorite(current_user.id, product_id)
    return jsonify({"message": "Favorito eliminado"})


@user_bp.route("/stats")
@login_required
def user_stats():
    return jsonify(stats_to_dict(user_service.get_user_stats(current_user.id)))


@user_bp.route("/notifications", methods=["GET"])
@login_required
def get_notifications():
    prefs = user_service.get_notification_preferences(current_user.id)
    return jsonify(preferences_to_dict(prefs))


@user_bp.route("/notifications", methods=["PUT"])
@login_required
def update_notifications():
    payload = request.get_json(silent=True) or {}
    form = NotificationPreferencesForm(payload)
    errors = form.validate_partial(payload.keys())
    if errors:
        return validation_error(errors, "Preferencias inválidas")

    values = {
        name: getattr(form, name).data
        for name in user_service.PREFERENCE_FIELDS
        if name in payload
    }
    prefs = user_service.update_notification_preferences(current_user.id, values)
    return jsonify(preferences_to_dict(prefs))
