from wtforms import StringField, TextAreaField, IntegerField
from wtforms.validators import InputRequired, Optional, AnyOf, Length

from Form.base import JSONForm
from util.constant import TICKET_TYPE, TICKET_PRIORITY, TICKET_STATUS, enum_values


class SupportTicketForm(JSONForm):
    type = StringField(
        "Tipo",
        validators=[InputRequired(), AnyOf(enum_values(TICKET_TYPE), message="Tipo inválido")],
    )
    subject = StringField("Asunto", validators=[InputRequired(), Length(max=255)])
    description = TextAreaField("Descripción", validators=[InputRequired()])
    priority = StringField(
        "Prioridad",
        validators=[Optional(), AnyOf(enum_values(TICKET_PRIORITY), message="Prioridad inválida")],
    )


class TicketReplyForm(JSONForm):
    message = TextAreaField("Mensaje", validators=[InputRequired()])


class TicketStatusForm(JSONForm):
    status = StringField(
        "Estado",
        validators=[InputRequired(), AnyOf(enum_values(TICKET_STATUS), message="Estado inválido")],
    )
    resolution = TextAreaField("Resolución", validators=[Optional()])
    assignedTo = IntegerField("Asignado a", validators=[Optional()])
