from enum import Enum


class ORDER_STATUS(Enum):
    pending = ("pending", "Pendiente")
    processing = ("processing", "Procesando pedido")
    preparing = ("preparing", "Preparando envío")
    shipped = ("shipped", "En camino")
    delivered = ("delivered", "Entregado")
    cancelled = ("cancelled", "Cancelado")

    def __new__(cls, value, label):
        obj = object.__new__(cls)
        obj._value_ = value
        obj.label = label
        return obj


class TICKET_STATUS(Enum):
    open = "open"
    in_progress = "in-progress"
    resolved = "resolved"
    closed = "closed"


class TICKET_TYPE(Enum):
    order = "order"
    product = "product"
    complaint = "complaint"
    suggestion = "suggestion"


class TICKET_PRIORITY(Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class PRODUCT_TYPE(Enum):
    physical = "physical"
    digital = "digital"


class USER_ROLE(Enum):
    user = "user"
    admin = "admin"


# Prefijo del token bearer: "mock_token_<user_id>"
TOKEN_PREFIX = "mock_token_"

LOYALTY_POINTS_PER_ORDER = 10


def enum_values(enum_cls):
    return [item.value for item in enum_cls]


# Límites de las columnas Integer y Numeric(10, 2)
MAX_DB_INT = 2**31 - 1
MAX_PRICE = "99999999.99"
