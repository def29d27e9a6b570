import logging

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from Form.forms import (
    LoginForm,
    RegisterForm,
    PasswordRecoveryForm,
    ResetPasswordForm,
    ProfileForm,
    ChangePasswordForm,
)
from service import user_service
from service import password_recovery_service
from service.mail_service import MailNotConfigured, MailDeliveryError
from util.auth import issue_token
from util.errors import validation_error
from util.serializers import user_summary, user_to_dict

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@auth_bp.route("/login", methods=["POST"])
def login():
    form = LoginForm()
    if not form.validate():
        return validation_error(form.errors, "Datos de login inválidos")

    user = user_service.authenticate(form.email.data, form.password.data)
    if not user:
        return jsonify({"message": "Credenciales inválidas"}), 401
    return jsonify({"user": user_summary(user), "token": issue_token(user)})


@auth_bp.route("/register", methods=["POST"])
def register():
    form = RegisterForm()
    if not form.validate():
        return validation_error(form.errors, "Datos de registro inválidos")

    user = user_service.register_user(form.name.data, form.email.data, form.password.data)
    return (
        jsonify({"message": "Usuario registrado exitosamente", "user": user_summary(user)}),
        201,
    )


@auth_bp.route("/logout", methods=["POST"])
def logout():
    # Token sin estado: el cliente solo lo descarta
    return jsonify({"message": "Sesión cerrada correctamente"})


@auth_bp.route("/me")
@login_required
def me():
    return jsonify(user_to_dict(current_user))


@auth_bp.route("/password-recovery", methods=["POST"])
def password_recovery():
    form = PasswordRecoveryForm()
    if not form.validate():
        return validation_error(form.errors, "Error al procesar solicitud")

    user = user_service.get_user_by_email(form.email.data)
    if not user:
        return jsonify({"message": "Usuario no encontrado"}), 404

    record = password_recovery_service.create_recovery_token(user)
    try:
        password_recovery_service.send_recovery_email(user, record.token)
    except MailNotConfigured:
        return (
            jsonify(
                {
                    "message": "Email no configurado. Contacta al administrador.",
                    "emailConfigured": False,
                }
            ),
            500,
        )
    except MailDeliveryError:
        return (
            jsonify(
                {
                    "message": "Error al enviar email. Verifica la configuración SMTP en el panel de administración.",
                    "emailConfigured": False,
                }
            ),
            500,
        )
    return jsonify({"message": "Email de recuperación enviado", "email": user.email})


@auth_bp.route("/password-recovery/<token>")
def check_recovery_token(token):
    if not password_recovery_service.find_valid_token(token):
        return jsonify({"message": "Token inválido o expirado", "valid": False}), 400
    return jsonify({"valid": True})


@auth_bp.route("/reset-password", methods=["POST"])
def reset_password():
    form = ResetPasswordForm()
    if not form.validate():
        return validation_error(form.errors, "Error al actualizar contraseña")

    user = password_recovery_service.reset_password(form.token.data, form.newPassword.data)
    if not user:
        return jsonify({"message": "Token inválido o expirado"}), 400
    return jsonify({"message": "Contraseña actualizada exitosamente"})


@auth_bp.route("/profile", methods=["PUT"])
@login_required
def update_profile():
    form = ProfileForm()
    if not form.validate():
        return validation_error(form.errors, "Error al actualizar perfil")

    payload = request.get_json(silent=True) or {}
    extra = {f: getattr(form, f).data for f in ("phone", "address", "avatar") if f in payload}
    user = user_service.update_profile(current_user, form.name.data, form.email.data, **extra)
    return jsonify({"message": "Perfil actualizado exitosamente", "user": user_to_dict(user)})


@auth_bp.route("/change-password", methods=["PUT"])
@login_required
def change_password():
    form = ChangePasswordForm()
    if not form.validate():
        return validation_error(form.errors)

    user_service.change_password(
        current_user, form.currentPassword.data, form.newPassword.data
    )
    return jsonify({"message": "Contraseña actualizada exitosamente"})
