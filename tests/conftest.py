import os

os.environ["POSTGRES_DSN"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ORDER_EVENTS_ENABLED"] = "false"
os.environ["PAYMENT_BACKEND"] = "fake"

from datetime import datetime, timedelta

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from order_service.api import routes
from order_service.api.deps import get_db
from order_service.core.config import settings
from order_service.db.models import Product
from order_service.db.session import Base, build_engine
from order_service.main import app
from order_service.services.payments import PaymentIntent, get_payment_gateway

engine = build_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


class RecordingGateway:
    def __init__(self):
        self.calls = []

    def charge(self, amount, currency):
        self.calls.append((amount, currency))
        return PaymentIntent(client_secret=f"secret_test_{len(self.calls)}", amount=amount)


def make_token(sub, role="customer", token_type="access", secret=None):
    payload = {"sub": sub, "role": role, "type": token_type, "exp": datetime.utcnow() + timedelta(minutes=5)}
    return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def auth_header(sub, role="customer"):
    return {"Authorization": f"Bearer {make_token(sub, role)}"}


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def products(db):
    items = [
        Product(id="A", name="Armchair", image="/uploads/armchair.jpeg", price=10),
        Product(id="B", name="Sofa", image="/uploads/sofa.jpeg", price=2599),
    ]
    db.add_all(items)
    db.commit()
    return {p.id: p for p in items}


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def events(monkeypatch):
    published = []
    monkeypatch.setattr(routes, "publish_order_event", published.append)
    return published


@pytest.fixture
def client(db, gateway, events):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def alice():
    return auth_header("alice@example.com")


@pytest.fixture
def bob():
    return auth_header("bob@example.com")


@pytest.fixture
def admin():
    return auth_header("admin@example.com", role="admin")


@pytest.fixture
def place_order(client):
    def _place(headers, items=None, tax=5, shipping_fee=3):
        body = {"items": items or [{"product": "A", "amount": 2}], "tax": tax, "shippingFee": shipping_fee}
        resp = client.post("/order/v1/orders", json=body, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["order"]
    return _place
