from functools import wraps

from flask import jsonify
from flask_login import current_user, login_required

from database_init import db
from models.user import User
from util.constant import TOKEN_PREFIX, MAX_DB_INT


def issue_token(user):
    # Token opaco no firmado, sin expiración: "mock_token_<id>"
    return f"{TOKEN_PREFIX}{user.id}"


def user_id_from_token(token):
    if not token or not token.startswith(TOKEN_PREFIX):
        return None
    raw_id = token[len(TOKEN_PREFIX):]
    if not raw_id.isdecimal():
        return None
    try:
        user_id = int(raw_id)
    except ValueError:
        return None
    if user_id > MAX_DB_INT:
        return None
    return user_id


def load_user_from_request(request):
    """request_loader de Flask-Login: lee 'Authorization: Bearer mock_token_<id>'."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None
    user_id = user_id_from_token(auth_header[len("Bearer "):].strip())
    if user_id is None:
        return None
    return db.session.get(User, user_id)


def admin_required(view):
    @wraps(view)
    @login_required
    def wrapped(*args, **kwargs):
        if not current_user.is_admin:
            return jsonify({"message": "Acceso denegado"}), 403
        return view(*args, **kwargs)

    return wrapped


def can_access(owner_id):
    return current_user.is_admin or current_user.id == owner_id
