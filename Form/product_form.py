from decimal import Decimal

from wtforms import StringField, TextAreaField, DecimalField, IntegerField, BooleanField
from wtforms.validators import InputRequired, Optional, NumberRange, AnyOf, Length

from Form.base import JSONForm, finite_number, json_boolean
from util.constant import PRODUCT_TYPE, MAX_DB_INT, MAX_PRICE, enum_values


class ProductForm(JSONForm):
    name = StringField("Nombre", validators=[InputRequired(), Length(max=255)])
    description = TextAreaField("Descripción", validators=[InputRequired()])
    price = DecimalField(
        "Precio",
        places=2,
        validators=[
            InputRequired(),
            finite_number,
            NumberRange(min=0, max=Decimal(MAX_PRICE), message="Precio inválido"),
        ],
    )
    imageUrl = StringField("URL de imagen", validators=[InputRequired(), Length(max=500)])
    image = StringField("Imagen", validators=[Optional(), Length(max=500)])
    category = StringField("Categoría", validators=[InputRequired(), Length(max=120)])
    ageRange = StringField("Rango de edad", validators=[InputRequired(), Length(max=50)])
    type = StringField(
        "Tipo",
        validators=[
            InputRequired(),
            AnyOf(enum_values(PRODUCT_TYPE), message="Tipo de producto inválido"),
        ],
    )
    stock = IntegerField(
        "Stock",
        validators=[Optional(), NumberRange(min=0, max=MAX_DB_INT, message="Stock inválido")],
    )
    isActive = BooleanField("Activo", validators=[json_boolean])
    featured = BooleanField("Destacado", validators=[json_boolean])
