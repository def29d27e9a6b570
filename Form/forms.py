from wtforms import StringField, PasswordField, BooleanField
from wtforms.validators import InputRequired, Email, Length, Optional

from Form.base import JSONForm, json_boolean

EMAIL_MSG = "Email inválido"


class LoginForm(JSONForm):
    email = StringField("Email", validators=[InputRequired(), Email(message=EMAIL_MSG)])
    password = PasswordField("Contraseña", validators=[InputRequired()])


class RegisterForm(JSONForm):
    name = StringField("Nombre", validators=[InputRequired(), Length(min=1, max=120)])
    email = StringField(
        "Email", validators=[InputRequired(), Email(message=EMAIL_MSG), Length(max=255)]
    )
    password = PasswordField(
        "Contraseña",
        validators=[
            InputRequired(),
            Length(min=6, message="La contraseña debe tener al menos 6 caracteres"),
        ],
    )


class PasswordRecoveryForm(JSONForm):
    email = StringField("Email", validators=[InputRequired(), Email(message=EMAIL_MSG)])


class ResetPasswordForm(JSONForm):
    token = StringField("Token", validators=[InputRequired()])
    newPassword = PasswordField(
        "Nueva contraseña",
        validators=[
            InputRequired(),
            Length(min=6, message="La nueva contraseña debe tener al menos 6 caracteres"),
        ],
    )


class ProfileForm(JSONForm):
    name = StringField("Nombre", validators=[InputRequired(), Length(min=1, max=120)])
    email = StringField(
        "Email", validators=[InputRequired(), Email(message=EMAIL_MSG), Length(max=255)]
    )
    phone = StringField("Teléfono", validators=[Optional(), Length(max=50)])
    address = StringField("Dirección", validators=[Optional(), Length(max=255)])
    avatar = StringField("Avatar", validators=[Optional(), Length(max=500)])


class ChangePasswordForm(JSONForm):
    currentPassword = PasswordField(
        "Contraseña actual",
        validators=[InputRequired(message="Contraseña actual requerida")],
    )
    newPassword = PasswordField(
        "Nueva contraseña",
        validators=[
            InputRequired(),
            Length(min=6, message="La nueva contraseña debe tener al menos 6 caracteres"),
        ],
    )


class NotificationPreferencesForm(JSONForm):
    emailNotifications = BooleanField("Emails", validators=[json_boolean])
    orderUpdates = BooleanField("Actualizaciones de pedidos", validators=[json_boolean])
    promotionalEmails = BooleanField("Promociones", validators=[json_boolean])
    smsNotifications = BooleanField("SMS", validators=[json_boolean])
    pushNotifications = BooleanField("Push", validators=[json_boolean])
