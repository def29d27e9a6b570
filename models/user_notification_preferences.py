from datetime import datetime
from database_init import db


class UserNotificationPreferences(db.Model):
    __tablename__ = "user_notification_preferences"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    email_notifications = db.Column(db.Boolean, nullable=False, default=True)
    order_updates = db.Column(db.Boolean, nullable=False, default=True)
    promotional_emails = db.Column(db.Boolean, nullable=False, default=True)
    sms_notifications = db.Column(db.Boolean, nullable=False, default=False)
    push_notifications = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self):
        return f"<UserNotificationPreferences User {self.user_id}>"
