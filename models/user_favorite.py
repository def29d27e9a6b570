from datetime import datetime
from database_init import db


class UserFavorite(db.Model):
    __tablename__ = "user_favorites"
    __table_args__ = (
        db.UniqueConstraint("user_id", "product_id", name="uq_user_favorites_user_product"),
    )
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    user = db.relationship("User", back_populates="favorites")
    product = db.relationship("Product")

    def __repr__(self):
        return f"<UserFavorite User {self.user_id} - Product {self.product_id}>"
