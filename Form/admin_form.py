from wtforms import StringField, PasswordField
from wtforms.validators import Optional, Email, Length, Regexp

from Form.base import JSONForm


class AdminConfigForm(JSONForm):
    businessName = StringField("Nombre de empresa", validators=[Optional(), Length(max=255)])
    businessAddress = StringField("Dirección", validators=[Optional()])
    businessPhone = StringField("Teléfono", validators=[Optional(), Length(max=50)])
    businessEmail = StringField("Email", validators=[Optional(), Email(message="Email inválido")])
    logoUrl = StringField("Logo", validators=[Optional(), Length(max=500)])
    smtpEmail = StringField("Usuario Gmail", validators=[Optional(), Email(message="Email inválido")])
    smtpPassword = PasswordField("Contraseña de aplicación", validators=[Optional()])
    smtpHost = StringField("Host SMTP", validators=[Optional(), Length(max=255)])
    smtpPort = StringField(
        "Puerto SMTP", validators=[Optional(), Regexp(r"^\d{1,5}$", message="Puerto inválido")]
    )
    mpAccessToken = StringField("Access token Mercado Pago", validators=[Optional()])
    mpPublicKey = StringField("Public key Mercado Pago", validators=[Optional()])
