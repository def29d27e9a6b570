from flask import Blueprint, jsonify, request, abort
from sqlalchemy import or_

from database_init import db
from Form.product_form import ProductForm
from models.product import Product
from util.auth import admin_required
from util.constant import PRODUCT_TYPE
from util.errors import validation_error
from util.serializers import product_to_dict
from util.until import split_tags

products_bp = Blueprint("products", __name__, url_prefix="/api/products")

# campo del form -> columna
PRODUCT_FIELDS = {
    "name": "name",
    "description": "description",
    "price": "price",
    "imageUrl": "image_url",
    "image": "image",
    "category": "category",
    "ageRange": "age_range",
    "type": "type",
    "stock": "stock",
    "isActive": "is_active",
    "featured": "featured",
}


def _get_product_or_404(product_id):
    product = db.session.get(Product, product_id)
    if not product:
        abort(404, description="Producto no encontrado")
    return product


def _normalize_stock(product):
    # Los productos digitales no manejan stock
    if product.type == PRODUCT_TYPE.digital.value:
        product.stock = None


@products_bp.route("", methods=["GET"])
def list_products():
    """Catálogo público: solo productos activos."""
    query = Product.query.filter(Product.is_active.is_(True))

    category = request.args.get("category")
    if category:
        query = query.filter(Product.category == category)
    product_type = request.args.get("type")
    if product_type:
        query = query.filter(Product.type == product_type)
    if request.args.get("featured", "").lower() == "true":
        query = query.filter(Product.featured.is_(True))
    q = (request.args.get("q") or "").strip()
    if q:
        pattern = f"%{q}%"
        query = query.filter(
            or_(Product.name.ilike(pattern), Product.description.ilike(pattern))
        )

    products = query.order_by(Product.created_at.desc(), Product.id.desc()).all()
    return jsonify([product_to_dict(p) for p in products])


@products_bp.route("/<int:product_id>", methods=["GET"])
def get_product(product_id):
    return jsonify(product_to_dict(_get_product_or_404(product_id)))


@products_bp.route("", methods=["POST"])
@admin_required
def create_product():
    payload = request.get_json(silent=True) or {}
    form = ProductForm(payload)
    if not form.validate():
        return validation_error(form.errors, "Datos de producto inválidos")

    product = Product(
        name=form.name.data.strip(),
        description=form.description.data,
        price=form.price.data,
        image_url=form.imageUrl.data,
        image=form.image.data or None,
        category=form.category.data,
        age_range=form.ageRange.data,
        type=form.type.data,
        stock=form.stock.data,
        is_active=form.isActive.data if "isActive" in payload else True,
        featured=form.featured.data,
        tags=split_tags(payload.get("tags")),
    )
    _normalize_stock(product)
    db.session.add(product)
    db.session.commit()
    return jsonify(product_to_dict(product)), 201


@products_bp.route("/<int:product_id>", methods=["PUT"])
@admin_required
def update_product(product_id):
    product = _get_product_or_404(product_id)
    payload = request.get_json(silent=True) or {}
    form = ProductForm(payload)
    errors = form.validate_partial(payload.keys())
    if errors:
        return validation_error(errors, "Datos de producto inválidos")

    for key, attr in PRODUCT_FIELDS.items():
        if key in payload:
            value = getattr(form, key).data
            if key == "image":
                value = value or None
            setattr(product, attr, value)
    if "tags" in payload:
        product.tags = split_tags(payload.get("tags"))
    _normalize_stock(product)
    db.session.commit()
    return jsonify(product_to_dict(product))


@products_bp.route("/<int:product_id>", methods=["DELETE"])
@admin_required
def delete_product(product_id):
    """Soft delete: el producto queda inactivo y fuera del catálogo."""
    product = _get_product_or_404(product_id)
    product.is_active = False
    db.session.commit()
    return jsonify({"message": "Producto eliminado correctamente"})
