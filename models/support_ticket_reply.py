from datetime import datetime
from database_init import db


class SupportTicketReply(db.Model):
    __tablename__ = "support_ticket_replies"
    id = db.Column(db.Integer, primary_key=True)
    ticket_id = db.Column(
        db.Integer, db.ForeignKey("support_tickets.id"), nullable=False, index=True
    )
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    message = db.Column(db.Text, nullable=False)
    is_from_support = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    ticket = db.relationship("SupportTicket", back_populates="replies")
    user = db.relationship("User")

    def __repr__(self):
        return f"<SupportTicketReply {self.id} - Ticket {self.ticket_id}>"
