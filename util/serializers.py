"""Conversión de modelos a dict JSON (claves camelCase, como las consume el frontend)."""
from util.until import isoformat, money_str


def user_summary(user):
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
    }


def user_to_dict(user):
    """Usuario completo, nunca incluye el hash de la contraseña."""
    data = user_summary(user)
    data.update(
        {
            "phone": user.phone,
            "address": user.address,
            "avatar": user.avatar,
            "createdAt": isoformat(user.created_at),
            "updatedAt": isoformat(user.updated_at),
        }
    )
    return data


def product_to_dict(product):
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": money_str(product.price),
        "image": product.image or product.image_url,
        "imageUrl": product.image_url,
        "category": product.category,
        "ageRange": product.age_range,
        "type": product.type,
        "stock": product.stock,
        "isActive": product.is_active,
        "featured": product.featured,
        "tags": product.tag_list,
        "createdAt": isoformat(product.created_at),
        "updatedAt": isoformat(product.updated_at),
    }


def order_item_to_dict(item):
    return {
        "id": item.id,
        "orderId": item.order_id,
        "productId": item.product_id,
        "quantity": item.quantity,
        "price": money_str(item.price),
        "createdAt": isoformat(item.created_at),
        "product": product_to_dict(item.product) if item.product else None,
    }


def tracking_to_dict(entry):
    return {
        "id": entry.id,
        "orderId": entry.order_id,
        "status": entry.status,
        "description": entry.description,
        "location": entry.location,
        "estimatedDelivery": isoformat(entry.estimated_delivery),
        "createdAt": isoformat(entry.created_at),
    }


def order_to_dict(order, with_tracking=False):
    data = {
        "id": order.id,
        "userId": order.user_id,
        "customerName": order.customer_name,
        "customerEmail": order.customer_email,
        "customerPhone": order.customer_phone,
        "customerAddress": order.customer_address,
        "total": money_str(order.total),
        "status": order.status,
        "paymentMethod": order.payment_method,
        "trackingNumber": order.tracking_number,
        "paymentId": order.payment_id,
        "createdAt": isoformat(order.created_at),
        "updatedAt": isoformat(order.updated_at),
        "items": [order_item_to_dict(i) for i in order.items],
    }
    if with_tracking:
        data["tracking"] = [tracking_to_dict(t) for t in order.tracking]
    return data


def reply_to_dict(reply):
    return {
        "id": reply.id,
        "ticketId": reply.ticket_id,
        "userId": reply.user_id,
        "userName": reply.user.name if reply.user else None,
        "message": reply.message,
        "isFromSupport": reply.is_from_support,
        "createdAt": isoformat(reply.created_at),
    }


def ticket_to_dict(ticket, with_user=False, with_replies=False):
    data = {
        "id": ticket.id,
        "userId": ticket.user_id,
        "ticketNumber": ticket.ticket_number,
        "type": ticket.type,
        "subject": ticket.subject,
        "description": ticket.description,
        "status": ticket.status,
        "priority": ticket.priority,
        "assignedTo": ticket.assigned_to,
        "resolution": ticket.resolution,
        "createdAt": isoformat(ticket.created_at),
        "updatedAt": isoformat(ticket.updated_at),
        "resolvedAt": isoformat(ticket.resolved_at),
    }
    if with_user:
        data["userName"] = ticket.user.name if ticket.user else None
        data["userEmail"] = ticket.user.email if ticket.user else None
    if with_replies:
        data["replies"] = [reply_to_dict(r) for r in ticket.replies]
    return data


def favorite_to_dict(favorite):
    return {
        "id": favorite.id,
        "userId": favorite.user_id,
        "productId": favorite.product_id,
        "createdAt": isoformat(favorite.created_at),
        "product": product_to_dict(favorite.product) if favorite.product else None,
    }


def stats_to_dict(stats):
    return {
        "userId": stats.user_id,
        "totalOrders": stats.total_orders,
        "totalSpent": money_str(stats.total_spent),
        "favoriteProducts": stats.favorite_products,
        "lastOrderDate": isoformat(stats.last_order_date),
        "averageOrderValue": money_str(stats.average_order_value),
        "loyaltyPoints": stats.loyalty_points,
        "updatedAt": isoformat(stats.updated_at),
    }


def preferences_to_dict(prefs):
    return {
        "userId": prefs.user_id,
        "emailNotifications": prefs.email_notifications,
        "orderUpdates": prefs.order_updates,
        "promotionalEmails": prefs.promotional_emails,
        "smsNotifications": prefs.sms_notifications,
        "pushNotifications": prefs.push_notifications,
    }


def admin_config_to_dict(config):
    # La contraseña SMTP no sale nunca del servidor
    return {
        "id": config.id,
        "businessName": config.business_name,
        "businessAddress": config.business_address,
        "businessPhone": config.business_phone,
        "businessEmail": config.business_email,
        "logoUrl": config.logo_url,
        "smtpEmail": config.smtp_email,
        "smtpPasswordSet": bool(config.smtp_password),
        "smtpHost": config.smtp_host,
        "smtpPort": config.smtp_port,
        "mpAccessTokenSet": bool(config.mp_access_token),
        "mpPublicKey": config.mp_public_key,
        "updatedAt": isoformat(config.updated_at),
    }
