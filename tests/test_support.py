import re

import pytest

from conftest import auth_headers, make_user

TICKET = {
    "type": "order",
    "subject": "Mi pedido no llegó",
    "description": "Hace dos semanas que espero el kit",
}


@pytest.fixture
def ticket(client, user_headers):
    res = client.post("/api/support/tickets", json=TICKET, headers=user_headers)
    assert res.status_code == 201
    return res.get_json()


def test_create_ticket_defaults(ticket, user_id):
    assert re.fullmatch(r"TKT-\d+-[0-9A-F]{4}", ticket["ticketNumber"])
    assert ticket["status"] == "open"
    assert ticket["priority"] == "medium"
    assert ticket["userId"] == user_id
    assert ticket["resolvedAt"] is None


def test_create_ticket_validation(client, user_headers):
    res = client.post(
        "/api/support/tickets",
        json={"type": "reclamo", "subject": "", "priority": "ya"},
        headers=user_headers,
    )
    assert res.status_code == 400
    assert {"type", "subject", "description", "priority"} <= set(res.get_json()["errors"])


def test_create_ticket_requires_auth(client):
    assert client.post("/api/support/tickets", json=TICKET).status_code == 401


def test_listing_scope(client, app, ticket, user_headers, admin_headers):
    other_headers = auth_headers(make_user(app, "luis@edujuegos.com", name="Luis"))
    client.post(
        "/api/support/tickets",
        json=dict(TICKET, type="suggestion", priority="low"),
        headers=other_headers,
    )

    own = client.get("/api/support/tickets", headers=user_headers).get_json()
    assert [t["id"] for t in own] == [ticket["id"]]
    assert "userEmail" not in own[0]

    everything = client.get("/api/support/tickets", headers=admin_headers).get_json()
    assert len(everything) == 2
    assert {t["userEmail"] for t in everything} == {"ana@edujuegos.com", "luis@edujuegos.com"}


def test_ticket_detail_access(client, app, ticket, user_headers, admin_headers):
    other_headers = auth_headers(make_user(app, "luis@edujuegos.com", name="Luis"))
    url = f"/api/support/tickets/{ticket['id']}"

    detail = client.get(url, headers=user_headers).get_json()
    assert detail["userName"] == "Ana Pérez"
    assert detail["replies"] == []

    assert client.get(url, headers=other_headers).status_code == 403
    assert client.get(url, headers=admin_headers).status_code == 200
    assert client.get("/api/support/tickets/999", headers=admin_headers).status_code == 404


def test_support_reply_moves_ticket_to_in_progress(client, ticket, user_headers, admin_headers):
    url = f"/api/support/tickets/{ticket['id']}/replies"

    res = client.post(url, json={"message": "Ya lo estamos revisando"}, headers=admin_headers)
    assert res.status_code == 201
    assert res.get_json()["isFromSupport"] is True

    client.post(url, json={"message": "Gracias"}, headers=user_headers)

    replies = client.get(url, headers=user_headers).get_json()
    assert [r["isFromSupport"] for r in replies] == [True, False]
    assert replies[1]["userName"] == "Ana Pérez"

    detail = client.get(f"/api/support/tickets/{ticket['id']}", headers=user_headers).get_json()
    assert detail["status"] == "in-progress"


def test_customer_reply_keeps_status(client, ticket, user_headers):
    client.post(
        f"/api/support/tickets/{ticket['id']}/replies",
        json={"message": "Sigo esperando"},
        headers=user_headers,
    )
    detail = client.get(f"/api/support/tickets/{ticket['id']}", headers=user_headers).get_json()
    assert detail["status"] == "open"


def test_reply_validation(client, ticket, user_headers):
    res = client.post(
        f"/api/support/tickets/{ticket['id']}/replies", json={}, headers=user_headers
    )
    assert res.status_code == 400


def test_closed_ticket_rejects_replies(client, ticket, user_headers, admin_headers):
    client.put(
        f"/api/support/tickets/{ticket['id']}/status",
        json={"status": "closed"},
        headers=admin_headers,
    )
    res = client.post(
        f"/api/support/tickets/{ticket['id']}/replies",
        json={"message": "¿Hola?"},
        headers=user_headers,
    )
    assert res.status_code == 400
    assert res.get_json()["message"] == "El ticket está cerrado"


def test_admin_resolves_ticket(client, ticket, admin_id, admin_headers):
    res = client.put(
        f"/api/support/tickets/{ticket['id']}/status",
        json={"status": "resolved", "resolution": "Reenviamos el paquete", "assignedTo": admin_id},
        headers=admin_headers,
    )
    assert res.status_code == 200
    body = res.get_json()
    assert body["status"] == "resolved"
    assert body["resolution"] == "Reenviamos el paquete"
    assert body["assignedTo"] == admin_id
    assert body["resolvedAt"] is not None


def test_update_status_validation(client, ticket, user_headers, admin_headers):
    url = f"/api/support/tickets/{ticket['id']}/status"
    assert client.put(url, json={"status": "olvidado"}, headers=admin_headers).status_code == 400
    assert (
        client.put(url, json={"status": "closed", "assignedTo": 999}, headers=admin_headers)
        .status_code
        == 400
    )
    assert client.put(url, json={"status": "closed"}, headers=user_headers).status_code == 403
