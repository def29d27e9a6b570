from datetime import datetime
from database_init import db


class OrderTracking(db.Model):
    __tablename__ = "order_tracking"
    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    status = db.Column(db.String(30), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    location = db.Column(db.String(255), nullable=True)
    estimated_delivery = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    order = db.relationship("Order", back_populates="tracking")

    def __repr__(self):
        return f"<OrderTracking {self.id} - Order {self.order_id} - {self.status}>"
