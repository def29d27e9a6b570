from datetime import datetime
from database_init import db
from util.constant import ORDER_STATUS


class Order(db.Model):
    __tablename__ = "orders"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    customer_name = db.Column(db.String(255), nullable=False)
    customer_email = db.Column(db.String(255), nullable=False)
    customer_phone = db.Column(db.String(50), nullable=False)
    customer_address = db.Column(db.String(500), nullable=False)
    total = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(
        db.String(30), nullable=False, default=ORDER_STATUS.pending.value, index=True
    )
    payment_method = db.Column(db.String(50), nullable=False)
    tracking_number = db.Column(db.String(100), nullable=True)
    payment_id = db.Column(db.String(255), nullable=True)  # preferencia de Mercado Pago
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", back_populates="orders")
    items = db.relationship(
        "OrderItem", back_populates="order", lazy=True, cascade="all, delete-orphan"
    )
    tracking = db.relationship(
        "OrderTracking",
        back_populates="order",
        lazy=True,
        order_by="[OrderTracking.created_at, OrderTracking.id]",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Order {self.id} - User {self.user_id}>"
