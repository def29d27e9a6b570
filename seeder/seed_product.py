import json
from models.product import Product
from database_init import db
from util.until import split_tags
import os


def seed_product(app):
    """Carga los productos de ./data/product.json (se omiten los que ya existen por nombre)."""
    data_file = os.path.abspath(os.path.join(os.path.dirname(__file__), "./data/product.json"))

    with open(data_file, "r", encoding="utf-8") as f:
        products = json.load(f)

    with app.app_context():
        added_count = 0
        for prod in products:
            if not Product.query.filter_by(name=prod["name"]).first():
                product = Product(
                    name=prod["name"],
                    description=prod["description"],
                    price=prod["price"],
                    image_url=prod["imageUrl"],
                    category=prod["category"],
                    age_range=prod["ageRange"],
                    type=prod["type"],
                    stock=prod.get("stock"),
                    featured=prod.get("featured", False),
                    tags=split_tags(prod.get("tags")),
                )
                db.session.add(product)
                added_count += 1
        if added_count > 0:
            db.session.commit()
            print(f"✅ Se agregaron {added_count} productos nuevos.")
        else:
            print("⚠️ No hay productos nuevos para agregar.")
        return added_count
