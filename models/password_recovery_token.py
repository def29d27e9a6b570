from datetime import datetime
from database_init import db


class PasswordRecoveryToken(db.Model):
    __tablename__ = "password_recovery_tokens"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    token = db.Column(db.String(128), unique=True, nullable=False, index=True)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)
    used = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    user = db.relationship("User")

    @property
    def is_expired(self):
        return self.expires_at <= datetime.utcnow()

    def __repr__(self):
        return f"<PasswordRecoveryToken User {self.user_id} - exp {self.expires_at}>"
