from datetime import datetime
from database_init import db
from flask_login import UserMixin
from util.constant import USER_ROLE


class User(UserMixin, db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)  # hash de werkzeug
    role = db.Column(db.String(20), nullable=False, default=USER_ROLE.user.value)
    phone = db.Column(db.String(50), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    avatar = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    orders = db.relationship("Order", back_populates="user", lazy=True)
    favorites = db.relationship(
        "UserFavorite", back_populates="user", lazy=True, cascade="all, delete-orphan"
    )

    @property
    def is_admin(self):
        return self.role == USER_ROLE.admin.value

    def __repr__(self):
        return f"<User {self.id} - {self.email}>"
