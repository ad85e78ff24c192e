from order_service.db.models import Order, OrderStatus


def test_update_marks_order_paid(client, products, alice, place_order, events, db):
    order = place_order(alice)
    events.clear()

    resp = client.patch(f"/order/v1/orders/{order['id']}", json={"paymentIntentId": "pi_anything-goes"}, headers=alice)

    assert resp.status_code == 200
    updated = resp.json()["order"]
    assert updated["status"] == "paid"
    assert updated["paymentIntentId"] == "pi_anything-goes"
    assert updated["total"] == order["total"]
    assert updated["orderItems"] == order["orderItems"]
    assert events == [{
        "type": "order.paid",
        "order_id": order["id"],
        "user": "alice@example.com",
        "payment_intent_id": "pi_anything-goes",
    }]

    stored = db.get(Order, order["id"])
    assert stored.status == OrderStatus.PAID
    assert stored.payment_intent_id == "pi_anything-goes"


def test_admin_can_update_any_order(client, products, alice, admin, place_order):
    order = place_order(alice)

    resp = client.patch(f"/order/v1/orders/{order['id']}", json={"paymentIntentId": "pi_1"}, headers=admin)

    assert resp.status_code == 200
    assert resp.json()["order"]["status"] == "paid"
    assert resp.json()["order"]["user"] == "alice@example.com"


def test_other_user_cannot_update_order(client, products, alice, bob, place_order, events, db):
    order = place_order(alice)
    events.clear()

    resp = client.patch(f"/order/v1/orders/{order['id']}", json={"paymentIntentId": "pi_1"}, headers=bob)

    assert resp.status_code == 403
    assert events == []
    stored = db.get(Order, order["id"])
    assert stored.status == OrderStatus.PENDING
    assert stored.payment_intent_id is None


def test_update_unknown_order_is_not_found(client, alice):
    resp = client.patch("/order/v1/orders/4242", json={"paymentIntentId": "pi_1"}, headers=alice)

    assert resp.status_code == 404
    assert resp.json() == {"detail": "Order with id 4242 is not found."}


def test_update_requires_payment_intent_id(client, products, alice, place_order):
    order = place_order(alice)

    resp = client.patch(f"/order/v1/orders/{order['id']}", json={}, headers=alice)

    assert resp.status_code == 422
