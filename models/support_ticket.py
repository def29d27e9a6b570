from datetime import datetime
from database_init import db
from util.constant import TICKET_STATUS, TICKET_PRIORITY


class SupportTicket(db.Model):
    __tablename__ = "support_tickets"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    ticket_number = db.Column(db.String(50), unique=True, nullable=False)
    type = db.Column(db.String(30), nullable=False, index=True)
    subject = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    status = db.Column(
        db.String(30), nullable=False, default=TICKET_STATUS.open.value, index=True
    )
    priority = db.Column(db.String(20), nullable=False, default=TICKET_PRIORITY.medium.value)
    assigned_to = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    resolution = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    resolved_at = db.Column(db.DateTime, nullable=True)

    user = db.relationship("User", foreign_keys=[user_id])
    assignee = db.relationship("User", foreign_keys=[assigned_to])
    replies = db.relationship(
        "SupportTicketReply",
        back_populates="ticket",
        lazy=True,
        order_by="[SupportTicketReply.created_at, SupportTicketReply.id]",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<SupportTicket {self.ticket_number} - {self.status}>"
