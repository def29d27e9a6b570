from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms.validators import ValidationError, StopValidation


def json_formdata(payload=None):
    """Convierte el body JSON en MultiDict para WTForms.

    null -> "" (lo absorbe el validador Optional), bool -> "true"/"false".
    Listas y objetos se ignoran; se validan a mano donde hacen falta.
    """
    if payload is None:
        payload = request.get_json(silent=True)
    formdata = MultiDict()
    if not isinstance(payload, dict):
        return formdata
    for key, value in payload.items():
        if isinstance(value, (dict, list)):
            continue
        if value is None:
            value = ""
        elif isinstance(value, bool):
            value = "true" if value else "false"
        formdata.add(key, str(value))
    return formdata


class JSONForm(FlaskForm):
    """FlaskForm alimentado desde request.get_json(), sin CSRF (API con token bearer)."""

    class Meta:
        csrf = False

    def __init__(self, payload=None, **kwargs):
        super().__init__(formdata=json_formdata(payload), **kwargs)

    def validate_partial(self, keys):
        """Valida solo los campos presentes en el body (updates parciales)."""
        self.validate()
        return {name: errors for name, errors in self.errors.items() if name in keys}


def finite_number(form, field):
    """Rechaza Infinity / NaN (DecimalField los acepta y rompen NumberRange)."""
    if field.data is not None and not field.data.is_finite():
        raise StopValidation("Número inválido")


def json_boolean(form, field):
    """Solo true/false de JSON; 0, "no" o null no se convierten en silencio."""
    if field.raw_data and field.raw_data[0] not in ("true", "false"):
        raise ValidationError("Debe ser true o false")
