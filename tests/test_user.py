from conftest import make_product


def test_favorites_flow(client, app, user_headers):
    product_id = make_product(app)
    url = f"/api/user/favorites/{product_id}"

    assert client.get(url, headers=user_headers).get_json() == {"isFavorite": False}

    first = client.post(url, headers=user_headers)
    assert first.status_code == 201
    assert first.get_json()["product"]["id"] == product_id

    again = client.post(url, headers=user_headers)
    assert again.status_code == 200
    assert again.get_json()["id"] == first.get_json()["id"]

    favorites = client.get("/api/user/favorites", headers=user_headers).get_json()
    assert [f["productId"] for f in favorites] == [product_id]
    assert client.get(url, headers=user_headers).get_json() == {"isFavorite": True}

    assert client.delete(url, headers=user_headers).status_code == 200
    assert client.get("/api/user/favorites", headers=user_headers).get_json() == []


def test_favorite_unknown_product(client, user_headers):
    res = client.post("/api/user/favorites/999", headers=user_headers)
    assert res.status_code == 404


def test_favorites_require_auth(client):
    assert client.get("/api/user/favorites").status_code == 401


def test_stats_for_new_user(client, user_id, user_headers):
    res = client.get("/api/user/stats", headers=user_headers)
    assert res.status_code == 200
    stats = res.get_json()
    assert stats["userId"] == user_id
    assert stats["totalOrders"] == 0
    assert stats["totalSpent"] == "0.00"
    assert stats["averageOrderValue"] == "0.00"
    assert stats["favoriteProducts"] == 0
    assert stats["loyaltyPoints"] == 0
    assert stats["lastOrderDate"] is None


def test_stats_after_orders_and_favorites(client, app, user_headers):
    product_id = make_product(app, price=1000)
    client.post(f"/api/user/favorites/{product_id}", headers=user_headers)
    for quantity in (1, 2):
        client.post(
            "/api/orders",
            json={
                "customerName": "Ana Pérez",
                "customerEmail": "ana@edujuegos.com",
                "customerPhone": "1155550000",
                "customerAddress": "Calle 1",
                "paymentMethod": "transferencia",
                "items": [{"productId": product_id, "quantity": quantity}],
            },
            headers=user_headers,
        )

    stats = client.get("/api/user/stats", headers=user_headers).get_json()
    assert stats["totalOrders"] == 2
    assert stats["totalSpent"] == "3000.00"
    assert stats["averageOrderValue"] == "1500.00"
    assert stats["favoriteProducts"] == 1
    assert stats["loyaltyPoints"] == 20
    assert stats["lastOrderDate"] is not None


def test_notification_preferences_defaults(client, user_id, user_headers):
    res = client.get("/api/user/notifications", headers=user_headers)
    assert res.get_json() == {
        "userId": user_id,
        "emailNotifications": True,
        "orderUpdates": True,
        "promotionalEmails": True,
        "smsNotifications": False,
        "pushNotifications": True,
    }


def test_notification_preferences_partial_update(client, user_headers):
    res = client.put(
        "/api/user/notifications",
        json={"promotionalEmails": False, "smsNotifications": True},
        headers=user_headers,
    )
    assert res.status_code == 200
    body = client.get("/api/user/notifications", headers=user_headers).get_json()
    assert body["promotionalEmails"] is False
    assert body["smsNotifications"] is True
    assert body["orderUpdates"] is True


def test_notification_preferences_reject_non_booleans(client, user_headers):
    res = client.put(
        "/api/user/notifications",
        json={"orderUpdates": 0, "promotionalEmails": "no", "smsNotifications": None},
        headers=user_headers,
    )
    assert res.status_code == 400
    assert set(res.get_json()["errors"]) == {
        "orderUpdates",
        "promotionalEmails",
        "smsNotifications",
    }
    body = client.get("/api/user/notifications", headers=user_headers).get_json()
    assert body["orderUpdates"] is True
    assert body["promotionalEmails"] is True
    assert body["smsNotifications"] is False
