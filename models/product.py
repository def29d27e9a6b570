from datetime import datetime
from database_init import db
from util.constant import PRODUCT_TYPE


class Product(db.Model):
    __tablename__ = "products"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    image_url = db.Column(db.String(500), nullable=False)
    image = db.Column(db.String(500), nullable=True)
    category = db.Column(db.String(120), nullable=False, index=True)
    age_range = db.Column(db.String(50), nullable=False)
    type = db.Column(db.String(20), nullable=False, default=PRODUCT_TYPE.physical.value)
    stock = db.Column(db.Integer, nullable=True)  # NULL para productos digitales
    is_active = db.Column(db.Boolean, nullable=False, default=True)  # soft delete
    featured = db.Column(db.Boolean, nullable=False, default=False)
    tags = db.Column(db.Text, nullable=True)  # separados por coma
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    order_items = db.relationship("OrderItem", back_populates="product", lazy=True)

    @property
    def is_physical(self):
        return self.type == PRODUCT_TYPE.physical.value

    @property
    def tag_list(self):
        if not self.tags:
            return []
        return [t.strip() for t in self.tags.split(",") if t.strip()]

    def __repr__(self):
        return f"<Product {self.id} - {self.name}>"
