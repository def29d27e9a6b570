from wtforms import StringField, IntegerField
from wtforms.validators import InputRequired, Optional, Email, AnyOf, Length

from Form.base import JSONForm
from util.constant import ORDER_STATUS, enum_values


class OrderForm(JSONForm):
    # "items" se valida en service.order_service
    customerName = StringField("Nombre", validators=[InputRequired(), Length(max=255)])
    customerEmail = StringField(
        "Email", validators=[InputRequired(), Email(message="Email inválido")]
    )
    customerPhone = StringField("Teléfono", validators=[InputRequired(), Length(max=50)])
    customerAddress = StringField("Dirección", validators=[InputRequired(), Length(max=500)])
    paymentMethod = StringField("Método de pago", validators=[InputRequired(), Length(max=50)])


class OrderStatusForm(JSONForm):
    status = StringField(
        "Estado",
        validators=[
            InputRequired(),
            AnyOf(enum_values(ORDER_STATUS), message="Estado de orden inválido"),
        ],
    )
    trackingNumber = StringField("Número de seguimiento", validators=[Optional(), Length(max=100)])
    description = StringField("Descripción", validators=[Optional()])
    location = StringField("Ubicación", validators=[Optional(), Length(max=255)])


class TrackingForm(JSONForm):
    status = StringField(
        "Estado",
        validators=[InputRequired(), AnyOf(enum_values(ORDER_STATUS))],
    )
    description = StringField("Descripción", validators=[Optional()])
    location = StringField("Ubicación", validators=[Optional(), Length(max=255)])
    estimatedDelivery = StringField("Entrega estimada", validators=[Optional()])


class PaymentForm(JSONForm):
    orderId = IntegerField("Orden", validators=[InputRequired()])
