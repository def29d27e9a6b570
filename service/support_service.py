# service/support_service.py
import logging
from datetime import datetime

from sqlalchemy.orm import joinedload, selectinload

from database_init import db
from models.support_ticket import SupportTicket
from models.support_ticket_reply import SupportTicketReply
from models.user import User
from util.constant import TICKET_STATUS, TICKET_PRIORITY
from util.errors import ServiceError
from util.until import generate_ticket_number

logger = logging.getLogger(__name__)


def list_tickets(user):
    query = SupportTicket.query.options(joinedload(SupportTicket.user))
    if not user.is_admin:
        query = query.filter(SupportTicket.user_id == user.id)
    return query.order_by(SupportTicket.created_at.desc(), SupportTicket.id.desc()).all()


def get_ticket(ticket_id):
    return (
        SupportTicket.query.options(
            joinedload(SupportTicket.user),
            selectinload(SupportTicket.replies).joinedload(SupportTicketReply.user),
        )
        .filter(SupportTicket.id == ticket_id)
        .first()
    )


def create_ticket(user, type, subject, description, priority=None):
    ticket = SupportTicket(
        user_id=user.id,
        ticket_number=generate_ticket_number(),
        type=type,
        subject=subject.strip(),
        description=description.strip(),
        priority=priority or TICKET_PRIORITY.medium.value,
        status=TICKET_STATUS.open.value,
    )
    db.session.add(ticket)
    db.session.commit()
    logger.info("Ticket %s creado por %s", ticket.ticket_number, user.email)
    return ticket


def add_reply(ticket, user, message):
    if ticket.status == TICKET_STATUS.closed.value:
        raise ServiceError("El ticket está cerrado", 400)
    reply = SupportTicketReply(
        ticket_id=ticket.id,
        user_id=user.id,
        message=message.strip(),
        is_from_support=user.is_admin,
    )
    db.session.add(reply)
    # Respuesta de soporte a un ticket abierto: pasa a "en progreso"
    if user.is_admin and ticket.status == TICKET_STATUS.open.value:
        ticket.status = TICKET_STATUS.in_progress.value
    ticket.updated_at = datetime.utcnow()
    db.session.commit()
    return reply


def update_ticket(ticket, status, resolution=None, assigned_to=None):
    if assigned_to is not None and db.session.get(User, assigned_to) is None:
        raise ServiceError("Usuario asignado no encontrado", 400)
    ticket.status = status
    if resolution is not None:
        ticket.resolution = resolution
    if assigned_to is not None:
        ticket.assigned_to = assigned_to
    if status == TICKET_STATUS.resolved.value:
        ticket.resolved_at = datetime.utcnow()
    db.session.commit()
    logger.info("Ticket %s -> %s", ticket.ticket_number, status)
    return ticket
