from datetime import datetime
from decimal import Decimal
from database_init import db


class UserStats(db.Model):
    __tablename__ = "user_stats"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    total_orders = db.Column(db.Integer, nullable=False, default=0)
    total_spent = db.Column(db.Numeric(12, 2), nullable=False, default=Decimal("0"))
    favorite_products = db.Column(db.Integer, nullable=False, default=0)
    last_order_date = db.Column(db.DateTime, nullable=True)
    average_order_value = db.Column(db.Numeric(10, 2), nullable=False, default=Decimal("0"))
    loyalty_points = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self):
        return f"<UserStats User {self.user_id}>"
