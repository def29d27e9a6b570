import secrets
import time
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def format_datetime(value, fmt="%d/%m/%Y %H:%M"):
    if not value:
        return ""
    return value.strftime(fmt)


def isoformat(value):
    return value.isoformat() if value else None


def to_money(value):
    """Normaliza a Decimal con dos decimales (los Numeric de SQLite vuelven como float)."""
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def money_str(value):
    if value is None:
        return None
    return str(to_money(value))


def parse_date(date_str):
    """Acepta ISO 8601 (con o sin 'Z') o dd/mm/YYYY. Devuelve None si no se puede."""
    if not date_str:
        return None
    try:
        if "T" in date_str or "-" in date_str:
            if date_str.endswith("Z"):
                date_str = date_str[:-1]
            return datetime.fromisoformat(date_str)
        return datetime.strptime(date_str, "%d/%m/%Y")
    except ValueError:
        return None


def generate_ticket_number():
    return f"TKT-{int(time.time() * 1000)}-{secrets.token_hex(2).upper()}"


def generate_recovery_token():
    # 32 bytes -> 64 caracteres hex
    return secrets.token_hex(32)


def split_tags(value):
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        items = value
    else:
        items = str(value).split(",")
    cleaned = [str(t).strip() for t in items if str(t).strip()]
    return ",".join(cleaned) if cleaned else None
