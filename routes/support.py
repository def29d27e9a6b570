from flask import Blueprint, jsonify, abort
from flask_login import login_required, current_user

from Form.support_form import SupportTicketForm, TicketReplyForm, TicketStatusForm
from service import support_service
from util.auth import admin_required, can_access
from util.errors import validation_error
from util.serializers import ticket_to_dict, reply_to_dict

support_bp = Blueprint("support", __name__, url_prefix="/api/support")


def _get_ticket_or_404(ticket_id):
    ticket = support_service.get_ticket(ticket_id)
    if not ticket:
        abort(404, description="Ticket no encontrado")
    return ticket


def _get_own_ticket(ticket_id):
    ticket = _get_ticket_or_404(ticket_id)
    if not can_access(ticket.user_id):
        abort(403)
    return ticket


@support_bp.route("/tickets", methods=["GET"])
@login_required
def list_tickets():
    tickets = support_service.list_tickets(current_user)
    return jsonify([ticket_to_dict(t, with_user=current_user.is_admin) for t in tickets])


@support_bp.route("/tickets", methods=["POST"])
@login_required
def create_ticket():
    form = SupportTicketForm()
    if not form.validate():
        return validation_error(form.errors, "Error al crear ticket")

    ticket = support_service.create_ticket(
        current_user,
        form.type.data,
        form.subject.data,
        form.description.data,
        priority=form.priority.data or None,
    )
    return jsonify(ticket_to_dict(ticket)), 201


@support_bp.route("/tickets/<int:ticket_id>", methods=["GET"])
@login_required
def ticket_detail(ticket_id):
    ticket = _get_own_ticket(ticket_id)
    return jsonify(ticket_to_dict(ticket, with_user=True, with_replies=True))


@support_bp.route("/tickets/<int:ticket_id>/replies", methods=["GET"])
@login_required
def list_replies(ticket_id):
    ticket = _get_own_ticket(ticket_id)
    return jsonify([reply_to_dict(r) for r in ticket.replies])


@support_bp.route("/tickets/<int:ticket_id>/replies", methods=["POST"])
@login_required
def add_reply(ticket_id):
    ticket = _get_own_ticket(ticket_id)
    form = TicketReplyForm()
    if not form.validate():
        return validation_error(form.errors, "Error al enviar respuesta")

    reply = support_service.add_reply(ticket, current_user, form.message.data)
    return jsonify(reply_to_dict(reply)), 201


@support_bp.route("/tickets/<int:ticket_id>/status", methods=["PUT"])
@admin_required
def update_ticket_status(ticket_id):
    ticket = _get_ticket_or_404(ticket_id)
    form = TicketStatusForm()
    if not form.validate():
        return validation_error(form.errors, "Error al actualizar ticket")

    ticket = support_service.update_ticket(
        ticket,
        form.status.data,
        resolution=form.resolution.data or None,
        assigned_to=form.assignedTo.data,
    )
    return jsonify(ticket_to_dict(ticket, with_user=True))
